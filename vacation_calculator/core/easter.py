"""
Gregorian Easter Sunday calculation.
"""

from datetime import date


def compute_easter(year: int) -> date:
    """
    Compute Easter Sunday for a year of the Gregorian calendar.

    Uses the anonymous Gregorian algorithm (Meeus/Jones/Butcher), a refinement
    of Gauss' method that needs no exception table.

    Args:
        year: Year, valid from 1583 on.

    Returns:
        Date of Easter Sunday.

    Raises:
        TypeError: If year is not an integer.
    """
    if isinstance(year, bool) or not isinstance(year, int):
        raise TypeError(f"year must be an int, got {type(year).__name__}")

    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)
