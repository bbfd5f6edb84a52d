"""
Data models for the vacation calculator using Pydantic.
"""

from datetime import date
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


NATIONWIDE = "DE"


class Bundesland(str, Enum):
    """German federal states (Bundeslaender)."""

    BB = "BB"  # Brandenburg
    BE = "BE"  # Berlin
    BW = "BW"  # Baden-Wuerttemberg
    BY = "BY"  # Bayern
    HB = "HB"  # Bremen
    HE = "HE"  # Hessen
    HH = "HH"  # Hamburg
    MV = "MV"  # Mecklenburg-Vorpommern
    NI = "NI"  # Niedersachsen
    NW = "NW"  # Nordrhein-Westfalen
    RP = "RP"  # Rheinland-Pfalz
    SH = "SH"  # Schleswig-Holstein
    SL = "SL"  # Saarland
    SN = "SN"  # Sachsen
    ST = "ST"  # Sachsen-Anhalt
    TH = "TH"  # Thueringen


class HolidayKind(str, Enum):
    """Classification of a public holiday."""

    FEDERAL = "federal"
    RELIGIOUS = "religious"
    REGIONAL = "regional"


class Holiday(BaseModel):
    """Represents a public holiday and the states observing it."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Name of the holiday in German")
    holiday_date: date = Field(..., description="Date of the holiday")
    regions: Tuple[Bundesland, ...] = Field(..., description="States where the holiday applies")
    kind: HolidayKind = Field(..., description="federal, religious or regional")
    description: str = Field(default="", description="English name of the holiday")

    @property
    def is_national(self) -> bool:
        """Whether all 16 states observe the holiday."""
        return len(set(self.regions)) == len(Bundesland)


class Employee(BaseModel):
    """Employee fields consumed by the balance calculation."""

    id: str = Field(..., description="Employee identifier")
    name: Optional[str] = Field(default=None, description="Display name")
    allowance_days: float = Field(..., ge=0, allow_inf_nan=False, description="Vacation days per year")
    region_code: str = Field(default=NATIONWIDE, description="Bundesland code or DE")
    active: bool = Field(default=True, description="Inactive employees are skipped in summaries")

    @field_validator("allowance_days")
    @classmethod
    def validate_half_days(cls, v: float) -> float:
        """Allowance may only be given in half-day steps."""
        if not (v * 2).is_integer():
            raise ValueError("allowance_days must be a multiple of 0.5")
        return v


class VacationEntry(BaseModel):
    """A booked vacation period."""

    id: str = Field(..., description="Entry identifier")
    employee_id: str = Field(..., description="Owning employee")
    start_date: date = Field(..., description="First day of the vacation")
    end_date: date = Field(..., description="Last day of the vacation (inclusive)")
    working_days: Optional[int] = Field(default=None, ge=0, description="Stored working-day count")
    note: Optional[str] = Field(default=None, description="Free text note")

    @model_validator(mode="after")
    def validate_date_range(self) -> "VacationEntry":
        """Ensure end_date is not before start_date."""
        if self.end_date < self.start_date:
            raise ValueError("end_date must be after or equal to start_date")
        return self


class WorkingDayResult(BaseModel):
    """Classification counts for a date range."""

    start_date: date
    end_date: date
    total_days: int = Field(..., ge=1, description="Calendar days in the inclusive range")
    working_days: int = Field(..., ge=0)
    weekend_days: int = Field(..., ge=0)
    holiday_days: int = Field(..., ge=0, description="Holidays falling on weekdays")
    excluded_dates: List[date] = Field(default_factory=list, description="Weekend and holiday dates")


class VacationBalance(BaseModel):
    """Derived vacation balance of one employee for one year."""

    employee_id: str
    employee_name: Optional[str] = None
    year: int
    allowance_days: float
    used_days: int
    remaining_days: float = Field(..., description="allowance - used, may be negative")
    region_code: str = NATIONWIDE

    @property
    def display_remaining_days(self) -> float:
        """Remaining days clamped at zero for display."""
        return max(0.0, self.remaining_days)

    @property
    def is_overdrawn(self) -> bool:
        return self.remaining_days < 0


class VacationValidation(BaseModel):
    """Outcome of checking a new or edited vacation request."""

    is_valid: bool
    errors: List[str] = Field(default_factory=list, description="Blocking problems")
    warnings: List[str] = Field(default_factory=list, description="Non-blocking problems")
    working_days: int
    would_exceed_allowance: bool
    current_used: int
    allowance: float
    remaining_after: float


class VacationSummaryStats(BaseModel):
    """Aggregate figures over a list of balances."""

    total_employees: int
    total_allowance: float
    total_used: int
    total_remaining: float
    average_usage: float


class DateValidation(BaseModel):
    """Result of validating raw request dates."""

    is_valid: bool
    error: Optional[str] = None


class Config(BaseModel):
    """Configuration for the vacation calculator."""

    default_region: str = Field(default=NATIONWIDE, description="Region used when none is given")
    default_allowance_days: float = Field(default=30, ge=0, description="Allowance for employees without one")
    clamp_remaining: bool = Field(default=False, description="Show negative remaining days as 0")
    cache_holidays: bool = Field(default=True, description="Memoize holiday sets per (year, region)")
    output_format: str = Field(default="json", description="Default output format: json or csv")
    output_directory: str = Field(default="results", description="Directory for output files")
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API server port")

    @field_validator("default_region")
    @classmethod
    def validate_region(cls, v: str) -> str:
        """Only known state codes or DE are accepted."""
        if v != NATIONWIDE and v not in {b.value for b in Bundesland}:
            raise ValueError(f"Unknown region code: {v}")
        return v


class VacationDataset(BaseModel):
    """Employees and their vacation entries, as read from a dataset file."""

    employees: List[Employee] = Field(default_factory=list)
    vacations: List[VacationEntry] = Field(default_factory=list)

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        """Look up an employee by id."""
        for employee in self.employees:
            if employee.id == employee_id:
                return employee
        return None
