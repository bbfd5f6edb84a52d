"""
Overlap checks for inclusive date ranges.
"""

from typing import Iterable, List, Optional

from vacation_calculator.core.dates import DateLike, to_date
from vacation_calculator.data.schemas import VacationEntry


def ranges_overlap(s1: DateLike, e1: DateLike, s2: DateLike, e2: DateLike) -> bool:
    """Return True if the inclusive ranges [s1, e1] and [s2, e2] share a day."""
    return to_date(s1) <= to_date(e2) and to_date(s2) <= to_date(e1)


def find_overlaps(
    start: DateLike,
    end: DateLike,
    entries: Iterable[VacationEntry],
    exclude_id: Optional[str] = None,
) -> List[VacationEntry]:
    """
    Find the vacation entries a range collides with.

    Args:
        start: First day of the range.
        end: Last day of the range.
        entries: Entries to check against.
        exclude_id: Entry to ignore, e.g. the one being edited.

    Returns:
        Overlapping entries in input order.
    """
    return [
        entry
        for entry in entries
        if entry.id != exclude_id
        and ranges_overlap(start, end, entry.start_date, entry.end_date)
    ]
