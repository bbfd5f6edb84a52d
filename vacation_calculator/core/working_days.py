"""
Working day counting considering weekends and holidays.
"""

import logging
from datetime import date
from typing import Iterable, Union

from vacation_calculator.core.dates import DateLike, iter_days, to_date
from vacation_calculator.core.holiday_catalog import holiday_dates
from vacation_calculator.data.schemas import Holiday, WorkingDayResult
from vacation_calculator.exceptions import InvalidRangeError

logger = logging.getLogger(__name__)

HolidayInput = Iterable[Union[Holiday, date, str]]


def count_working_days(
    start: DateLike,
    end: DateLike,
    holidays: HolidayInput = (),
) -> WorkingDayResult:
    """
    Classify every day of an inclusive range as working, weekend or holiday.

    A holiday falling on a Saturday or Sunday counts as a weekend day only.

    Args:
        start: First day of the range.
        end: Last day of the range (inclusive).
        holidays: Holidays to exclude, as Holiday objects, dates or ISO strings.

    Returns:
        WorkingDayResult with counts and the excluded dates.

    Raises:
        InvalidRangeError: If start is after end.
    """
    start_date = to_date(start)
    end_date = to_date(end)
    if start_date > end_date:
        raise InvalidRangeError(start_date, end_date)

    excluded = holiday_dates(holidays)

    working_days = 0
    weekend_days = 0
    holiday_days = 0
    excluded_dates = []

    for current in iter_days(start_date, end_date):
        if current.weekday() >= 5:  # Saturday, Sunday
            weekend_days += 1
            excluded_dates.append(current)
        elif current in excluded:
            holiday_days += 1
            excluded_dates.append(current)
        else:
            working_days += 1

    total_days = (end_date - start_date).days + 1
    logger.debug(
        "Counted %d working days between %s and %s", working_days, start_date, end_date
    )

    return WorkingDayResult(
        start_date=start_date,
        end_date=end_date,
        total_days=total_days,
        working_days=working_days,
        weekend_days=weekend_days,
        holiday_days=holiday_days,
        excluded_dates=excluded_dates,
    )


def working_days_count(
    start: DateLike,
    end: DateLike,
    holidays: HolidayInput = (),
) -> int:
    """Return only the number of working days in the range."""
    return count_working_days(start, end, holidays).working_days
