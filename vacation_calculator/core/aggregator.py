"""
Aggregation of holidays and balances over several years.
"""

from typing import Iterable, List, Optional

from vacation_calculator.core.balance import balance_for_employee
from vacation_calculator.core.holiday_catalog import HolidaySource, holidays_for_year
from vacation_calculator.core.working_days import HolidayInput
from vacation_calculator.data.schemas import Employee, Holiday, VacationBalance, VacationEntry
from vacation_calculator.exceptions import InvalidRangeError


def _check_years(start_year: int, end_year: int) -> None:
    if start_year > end_year:
        raise InvalidRangeError(start_year, end_year)


def holidays_for_years(
    start_year: int,
    end_year: int,
    region: Optional[str] = None,
    source: HolidaySource = holidays_for_year,
) -> List[Holiday]:
    """
    Get the holidays of every year in [start_year, end_year], sorted by date.

    Args:
        start_year: First year.
        end_year: Last year (inclusive).
        region: Bundesland code, ``"DE"`` or None; see ``holidays_for_year``.
        source: Holiday function, e.g. a ``HolidayCache``.

    Returns:
        Holidays of all years sorted by date.
    """
    _check_years(start_year, end_year)
    result = []
    for year in range(start_year, end_year + 1):
        result.extend(source(year, region))
    return sorted(result, key=lambda h: h.holiday_date)


def balances_for_years(
    employee: Employee,
    start_year: int,
    end_year: int,
    entries: Iterable[VacationEntry],
    holidays: Optional[HolidayInput] = None,
) -> List[VacationBalance]:
    """One balance per year for an employee, ordered by year."""
    _check_years(start_year, end_year)
    entries = list(entries)
    if holidays is not None:
        holidays = list(holidays)
    return [
        balance_for_employee(employee, year, entries, holidays)
        for year in range(start_year, end_year + 1)
    ]
