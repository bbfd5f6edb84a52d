"""
FastAPI REST API for the vacation calculator.

Every endpoint is a pure computation: requests carry the employees, vacations
and holidays they need, nothing is stored between calls.
"""

from datetime import date
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Path, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from vacation_calculator import __version__
from vacation_calculator.config.manager import ConfigManager
from vacation_calculator.core.aggregator import holidays_for_years
from vacation_calculator.core.balance import (
    balances_for_employees,
    summary_stats,
    validate_vacation_request,
)
from vacation_calculator.core.dates import MAX_YEAR, MIN_YEAR
from vacation_calculator.core.easter import compute_easter
from vacation_calculator.core.holiday_catalog import HolidayCache, holidays_for_range, holidays_for_year
from vacation_calculator.core.working_days import count_working_days
from vacation_calculator.data.bundesland_data import BUNDESLAND_NAMES, NATIONWIDE_NAME
from vacation_calculator.data.schemas import (
    NATIONWIDE,
    Bundesland,
    Employee,
    Holiday,
    HolidayKind,
    VacationBalance,
    VacationEntry,
    VacationSummaryStats,
    VacationValidation,
    WorkingDayResult,
)

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

holiday_source = HolidayCache() if config.cache_holidays else holidays_for_year


# API Models
class HolidayResponse(BaseModel):
    """Response model for a single holiday."""

    date: date
    name: str
    description: str
    kind: HolidayKind
    regions: List[str]


class RegionInfo(BaseModel):
    """Information about a region code."""

    code: str
    name: str


class EasterResponse(BaseModel):
    year: int
    easter_sunday: date


class WorkdaysRequest(BaseModel):
    """Request model for working day calculation."""

    start_date: date = Field(..., description="Start date of the period")
    end_date: date = Field(..., description="End date of the period")
    region: str = Field(NATIONWIDE, description="Bundesland code or DE")
    holidays: Optional[List[date]] = Field(
        None, description="Explicit holiday dates; defaults to the region's holidays"
    )


class BalancesRequest(BaseModel):
    """Request model for vacation balances."""

    year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR)
    employees: List[Employee]
    vacations: List[VacationEntry] = Field(default_factory=list)
    holidays: Optional[List[date]] = Field(
        None, description="Explicit holiday dates; defaults to each employee's region"
    )


class BalancesResponse(BaseModel):
    balances: List[VacationBalance]
    stats: VacationSummaryStats


class ValidateRequest(BaseModel):
    """Request model for checking a vacation request."""

    employee: Employee
    start_date: date
    end_date: date
    existing_vacations: List[VacationEntry] = Field(default_factory=list)
    year: Optional[int] = Field(None, ge=MIN_YEAR, le=MAX_YEAR)
    exclude_entry_id: Optional[str] = None
    holidays: Optional[List[date]] = None


def to_response(holiday: Holiday) -> HolidayResponse:
    return HolidayResponse(
        date=holiday.holiday_date,
        name=holiday.name,
        description=holiday.description,
        kind=holiday.kind,
        regions=[r.value for r in holiday.regions],
    )


# FastAPI app
app = FastAPI(
    title="Vacation Calculator API",
    description="German public holidays, working days and vacation balances",
    version=__version__,
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report validation errors without echoing the rejected input.

    Inputs such as Infinity or NaN cannot be rendered as strict JSON.
    """
    errors = [
        {"type": error["type"], "loc": list(error["loc"]), "msg": error["msg"]}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=422, content={"detail": errors})


@app.get("/")
async def root():
    """API root endpoint with basic info."""
    return {
        "name": "Vacation Calculator API",
        "version": __version__,
        "endpoints": {
            "GET /easter/{year}": "Easter Sunday of a year",
            "GET /holidays/{year}": "Holidays of a year",
            "GET /holidays": "Holidays of a year span",
            "POST /workdays": "Count working days",
            "POST /balances": "Vacation balances for employees",
            "POST /validate": "Check a vacation request",
            "GET /regions": "List all region codes",
        },
    }


@app.get("/easter/{year}", response_model=EasterResponse)
async def get_easter(year: int = Path(..., ge=MIN_YEAR, le=MAX_YEAR)):
    """Get Easter Sunday of a year."""
    return EasterResponse(year=year, easter_sunday=compute_easter(year))


@app.get("/holidays/{year}", response_model=List[HolidayResponse])
async def get_holidays(
    year: int = Path(..., ge=MIN_YEAR, le=MAX_YEAR),
    region: Optional[str] = Query(None, description="Bundesland code or DE"),
    federal_only: bool = Query(False, description="Only holidays observed in all states"),
):
    """
    Get all holidays for a year, optionally for one Bundesland.

    An unknown region yields an empty list.
    """
    holidays = holiday_source(year, region)
    if federal_only:
        holidays = [h for h in holidays if h.kind == HolidayKind.FEDERAL]
    return [to_response(h) for h in holidays]


@app.get("/holidays", response_model=List[HolidayResponse])
async def get_holidays_for_years(
    start_year: int = Query(..., ge=MIN_YEAR, le=MAX_YEAR),
    end_year: int = Query(..., ge=MIN_YEAR, le=MAX_YEAR),
    region: Optional[str] = Query(None, description="Bundesland code or DE"),
):
    """Get the holidays of a span of years, sorted by date."""
    try:
        holidays = holidays_for_years(start_year, end_year, region, source=holiday_source)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [to_response(h) for h in holidays]


@app.post("/workdays", response_model=WorkingDayResult)
async def calculate_workdays(request: WorkdaysRequest):
    """
    Count working days between two dates.

    Weekends are never counted as holidays.
    """
    try:
        if request.holidays is not None:
            holidays = request.holidays
        else:
            holidays = holidays_for_range(request.start_date, request.end_date, request.region)
        return count_working_days(request.start_date, request.end_date, holidays)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/balances", response_model=BalancesResponse)
async def calculate_balances(request: BalancesRequest):
    """Calculate the vacation balances of all active employees."""
    balances = balances_for_employees(
        request.employees,
        request.year,
        request.vacations,
        request.holidays,
        source=holiday_source,
    )

    return BalancesResponse(balances=balances, stats=summary_stats(balances))


@app.post("/validate", response_model=VacationValidation)
async def validate_request(request: ValidateRequest):
    """
    Check a vacation request.

    Overlaps make the request invalid; exceeding the allowance only produces
    a warning.
    """
    try:
        return validate_vacation_request(
            request.employee.id,
            request.start_date,
            request.end_date,
            request.employee,
            request.existing_vacations,
            holidays=request.holidays,
            year=request.year,
            exclude_entry_id=request.exclude_entry_id,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/regions", response_model=List[RegionInfo])
async def list_regions():
    """List all German federal states plus the nationwide code."""
    regions = [
        RegionInfo(code=bundesland.value, name=BUNDESLAND_NAMES[bundesland])
        for bundesland in Bundesland
    ]
    regions.append(RegionInfo(code=NATIONWIDE, name=NATIONWIDE_NAME))
    return regions


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
