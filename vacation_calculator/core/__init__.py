"""
Core calculation logic: holidays, working days and vacation balances.
"""

from vacation_calculator.core.aggregator import balances_for_years, holidays_for_years
from vacation_calculator.core.balance import (
    balance_for_employee,
    balances_for_employees,
    recalculate_entry,
    summary_stats,
    used_days_in_year,
    validate_vacation_dates,
    validate_vacation_request,
)
from vacation_calculator.core.easter import compute_easter
from vacation_calculator.core.holiday_catalog import (
    HolidayCache,
    get_federal_holidays,
    get_holiday_name,
    holiday_dates,
    holidays_for_range,
    holidays_for_year,
    is_holiday,
)
from vacation_calculator.core.overlap import find_overlaps, ranges_overlap
from vacation_calculator.core.working_days import count_working_days, working_days_count

__all__ = [
    "HolidayCache",
    "balance_for_employee",
    "balances_for_employees",
    "balances_for_years",
    "compute_easter",
    "count_working_days",
    "find_overlaps",
    "get_federal_holidays",
    "get_holiday_name",
    "holiday_dates",
    "holidays_for_range",
    "holidays_for_year",
    "holidays_for_years",
    "is_holiday",
    "ranges_overlap",
    "recalculate_entry",
    "summary_stats",
    "used_days_in_year",
    "validate_vacation_dates",
    "validate_vacation_request",
    "working_days_count",
]
