"""
Date parsing and formatting helpers.
"""

import re
from datetime import date, datetime, timedelta
from typing import Iterator, Union

DateLike = Union[date, str]

INPUT_FORMATS = ["%Y-%m-%d", "%d.%m.%Y", "%d/%m/%Y"]

# Gregorian calendar years served by the API and MCP tools
MIN_YEAR = 1583
MAX_YEAR = 9999

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def to_date(value: DateLike) -> date:
    """
    Convert an ISO calendar-date string or date into a date.

    Args:
        value: ``YYYY-MM-DD`` string or date instance.

    Returns:
        The date, without any time component.

    Raises:
        ValueError: If the string is not a valid ISO calendar date.
        TypeError: If the value is neither a string nor a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        value = value.strip()
        if not ISO_DATE_PATTERN.fullmatch(value):
            raise ValueError(f"Invalid date format: {value!r}, expected YYYY-MM-DD")
        return date.fromisoformat(value)
    raise TypeError(f"Expected date or ISO date string, got {type(value).__name__}")


def parse_date(date_str: str) -> date:
    """Parse date string in various formats."""
    for fmt in INPUT_FORMATS:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    raise ValueError(
        f"Invalid date format: {date_str}. Use YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY"
    )


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day from start to end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def year_bounds(year: int) -> tuple:
    """Return (January 1st, December 31st) of a year."""
    return date(year, 1, 1), date(year, 12, 31)
