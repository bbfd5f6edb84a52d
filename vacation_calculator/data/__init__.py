"""
Data models and schemas for the vacation calculator.
"""

from vacation_calculator.data.schemas import (
    NATIONWIDE,
    Bundesland,
    Config,
    DateValidation,
    Employee,
    Holiday,
    HolidayKind,
    VacationBalance,
    VacationDataset,
    VacationEntry,
    VacationSummaryStats,
    VacationValidation,
    WorkingDayResult,
)

__all__ = [
    "NATIONWIDE",
    "Bundesland",
    "Config",
    "DateValidation",
    "Employee",
    "Holiday",
    "HolidayKind",
    "VacationBalance",
    "VacationDataset",
    "VacationEntry",
    "VacationSummaryStats",
    "VacationValidation",
    "WorkingDayResult",
]
