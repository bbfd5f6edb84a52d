"""
Vacation balance calculation and request validation.

Used days are always derived from the vacation entries; nothing is stored.
Remaining days are signed: a negative value means the employee booked more
than their allowance.
"""

import logging
import math
from datetime import date
from typing import Iterable, List, Optional

from vacation_calculator.core.dates import DateLike, to_date, year_bounds
from vacation_calculator.core.holiday_catalog import HolidaySource, holidays_for_range, holidays_for_year
from vacation_calculator.core.overlap import find_overlaps, ranges_overlap
from vacation_calculator.core.working_days import HolidayInput, count_working_days, working_days_count
from vacation_calculator.data.schemas import (
    NATIONWIDE,
    DateValidation,
    Employee,
    VacationBalance,
    VacationEntry,
    VacationSummaryStats,
    VacationValidation,
)

logger = logging.getLogger(__name__)

MAX_YEARS_AHEAD = 2


def used_days_in_year(
    employee_id: str,
    year: int,
    entries: Iterable[VacationEntry],
    holidays: Optional[HolidayInput] = None,
    region: str = NATIONWIDE,
) -> int:
    """
    Sum the working days an employee spent on vacation in a year.

    Entries reaching into neighbouring years are clipped to the year. Entries
    are trusted not to overlap each other.

    Args:
        employee_id: Employee whose entries are counted.
        year: Calendar year.
        entries: Vacation entries, possibly of several employees.
        holidays: Holidays to exclude. Defaults to the holidays of ``region``.
        region: Region used when ``holidays`` is not given.

    Returns:
        Number of working days used.
    """
    if holidays is None:
        holidays = holidays_for_year(year, region)
    holidays = list(holidays)
    year_start, year_end = year_bounds(year)

    total = 0
    for entry in entries:
        if entry.employee_id != employee_id:
            continue
        if not ranges_overlap(entry.start_date, entry.end_date, year_start, year_end):
            continue

        effective_start = max(entry.start_date, year_start)
        effective_end = min(entry.end_date, year_end)
        total += working_days_count(effective_start, effective_end, holidays)

    logger.debug("Employee %s used %d days in %d", employee_id, total, year)
    return total


def balance_for_employee(
    employee: Employee,
    year: int,
    entries: Iterable[VacationEntry],
    holidays: Optional[HolidayInput] = None,
) -> VacationBalance:
    """
    Calculate the vacation balance of one employee.

    Args:
        employee: Employee with allowance and region.
        year: Calendar year.
        entries: Vacation entries.
        holidays: Holidays to exclude. Defaults to the employee's region.

    Returns:
        VacationBalance with signed remaining days.
    """
    used_days = used_days_in_year(
        employee.id, year, entries, holidays, region=employee.region_code
    )
    return VacationBalance(
        employee_id=employee.id,
        employee_name=employee.name,
        year=year,
        allowance_days=employee.allowance_days,
        used_days=used_days,
        remaining_days=employee.allowance_days - used_days,
        region_code=employee.region_code,
    )


def balances_for_employees(
    employees: Iterable[Employee],
    year: int,
    entries: Iterable[VacationEntry],
    holidays: Optional[HolidayInput] = None,
    source: HolidaySource = holidays_for_year,
) -> List[VacationBalance]:
    """
    Calculate balances for all active employees.

    Args:
        employees: Employees; inactive ones are skipped.
        year: Calendar year.
        entries: Vacation entries of all employees.
        holidays: Holidays shared by everyone. Defaults to each employee's
            region, looked up through ``source``.
        source: Holiday function, e.g. a ``HolidayCache``.
    """
    entries = list(entries)
    if holidays is not None:
        holidays = list(holidays)

    balances = []
    for employee in employees:
        if not employee.active:
            continue
        employee_holidays = holidays
        if employee_holidays is None:
            employee_holidays = source(year, employee.region_code)
        balances.append(balance_for_employee(employee, year, entries, employee_holidays))
    return balances


def validate_vacation_request(
    employee_id: str,
    start: DateLike,
    end: DateLike,
    employee: Employee,
    existing_entries: Iterable[VacationEntry],
    holidays: Optional[HolidayInput] = None,
    year: Optional[int] = None,
    exclude_entry_id: Optional[str] = None,
) -> VacationValidation:
    """
    Check a new or edited vacation request.

    Overlaps with the employee's other entries are errors and make the request
    invalid. Exceeding the allowance is only reported as a warning; the caller
    decides whether to block.

    Args:
        employee_id: Employee requesting the vacation.
        start: First vacation day.
        end: Last vacation day.
        employee: Employee record providing allowance and region.
        existing_entries: Already booked entries.
        holidays: Holidays to exclude. Defaults to the employee's region.
        year: Year to check the allowance against. Defaults to the start year.
        exclude_entry_id: Entry being edited, ignored for overlap and usage.

    Returns:
        VacationValidation with errors, warnings and day counts.

    Raises:
        InvalidRangeError: If start is after end.
    """
    start_date = to_date(start)
    end_date = to_date(end)
    if year is None:
        year = start_date.year

    if holidays is None:
        request_holidays = holidays_for_range(start_date, end_date, employee.region_code)
        year_holidays = holidays_for_year(year, employee.region_code)
    else:
        request_holidays = year_holidays = list(holidays)

    working_days = count_working_days(start_date, end_date, request_holidays).working_days

    employee_entries = [
        e for e in existing_entries
        if e.employee_id == employee_id and e.id != exclude_entry_id
    ]

    errors = []
    for entry in find_overlaps(start_date, end_date, employee_entries):
        errors.append(
            f"Vacation period overlaps with existing vacation from "
            f"{entry.start_date.isoformat()} to {entry.end_date.isoformat()}"
        )

    current_used = used_days_in_year(employee_id, year, employee_entries, year_holidays)
    total_after_request = current_used + working_days
    would_exceed_allowance = total_after_request > employee.allowance_days

    warnings = []
    if would_exceed_allowance:
        warnings.append(
            f"Request would exceed vacation allowance. Used: {current_used}, "
            f"Requesting: {working_days}, Allowance: {employee.allowance_days:g}"
        )

    return VacationValidation(
        is_valid=not errors,
        errors=errors,
        warnings=warnings,
        working_days=working_days,
        would_exceed_allowance=would_exceed_allowance,
        current_used=current_used,
        allowance=employee.allowance_days,
        remaining_after=employee.allowance_days - total_after_request,
    )


def validate_vacation_dates(
    start: str,
    end: str,
    today: Optional[date] = None,
) -> DateValidation:
    """
    Validate raw date input of a vacation request.

    Args:
        start: Start date as ISO string.
        end: End date as ISO string.
        today: Reference date, defaults to today.

    Returns:
        DateValidation; invalid input is reported, never raised.
    """
    try:
        start_date = to_date(start)
        end_date = to_date(end)
    except (TypeError, ValueError):
        return DateValidation(is_valid=False, error="Invalid date format")

    if start_date > end_date:
        return DateValidation(
            is_valid=False, error="Start date must be before or equal to end date"
        )

    today = today or date.today()
    try:
        limit = today.replace(year=today.year + MAX_YEARS_AHEAD)
    except ValueError:  # February 29th
        limit = today.replace(year=today.year + MAX_YEARS_AHEAD, day=28)

    if start_date > limit:
        return DateValidation(
            is_valid=False,
            error=f"Vacation dates cannot be more than {MAX_YEARS_AHEAD} years in the future",
        )
    return DateValidation(is_valid=True)


def recalculate_entry(entry: VacationEntry, holidays: HolidayInput = ()) -> VacationEntry:
    """Return a copy of the entry with its working_days field recalculated."""
    working_days = working_days_count(entry.start_date, entry.end_date, holidays)
    return entry.model_copy(update={"working_days": working_days})


def summary_stats(balances: Iterable[VacationBalance]) -> VacationSummaryStats:
    """Aggregate allowance, usage and remaining days over balances."""
    balances = list(balances)
    total_employees = len(balances)
    total_used = sum(b.used_days for b in balances)
    average_usage = total_used / total_employees if total_employees else 0.0
    # half-up rounding to one decimal
    average_usage = math.floor(average_usage * 10 + 0.5) / 10

    return VacationSummaryStats(
        total_employees=total_employees,
        total_allowance=sum(b.allowance_days for b in balances),
        total_used=total_used,
        total_remaining=sum(b.remaining_days for b in balances),
        average_usage=average_usage,
    )
