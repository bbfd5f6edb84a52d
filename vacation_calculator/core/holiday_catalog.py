"""
Holiday catalog for German federal states.

Holidays are generated from fixed dates and offsets to Easter Sunday; nothing
is fetched or stored. Use ``HolidayCache`` when the same sets are requested
repeatedly.
"""

import logging
from collections import OrderedDict
from datetime import date, timedelta
from typing import Callable, Iterable, List, Optional, Set, Tuple, Union

from vacation_calculator.core.dates import DateLike, to_date
from vacation_calculator.core.easter import compute_easter
from vacation_calculator.data.bundesland_data import VALID_REGION_CODES
from vacation_calculator.data.schemas import NATIONWIDE, Bundesland, Holiday, HolidayKind
from vacation_calculator.exceptions import InvalidRangeError

logger = logging.getLogger(__name__)

ALL_STATES: Tuple[Bundesland, ...] = tuple(Bundesland)

WEDNESDAY = 2

# (month, day, name, description)
FIXED_FEDERAL_HOLIDAYS = [
    (1, 1, "Neujahr", "New Year's Day"),
    (5, 1, "Tag der Arbeit", "Labour Day"),
    (10, 3, "Tag der Deutschen Einheit", "German Unity Day"),
    (12, 25, "1. Weihnachtstag", "Christmas Day"),
    (12, 26, "2. Weihnachtstag", "Boxing Day"),
]

# (days after Easter Sunday, name, description)
EASTER_FEDERAL_HOLIDAYS = [
    (-2, "Karfreitag", "Good Friday"),
    (1, "Ostermontag", "Easter Monday"),
    (39, "Christi Himmelfahrt", "Ascension Day"),
    (50, "Pfingstmontag", "Whit Monday"),
]

_S = Bundesland
# (rule, name, description, kind, states); rule is (month, day) or an Easter offset
REGIONAL_HOLIDAYS = [
    ((1, 6), "Heilige Drei Könige", "Epiphany", HolidayKind.RELIGIOUS,
     (_S.BW, _S.BY, _S.ST)),
    ((3, 8), "Internationaler Frauentag", "International Women's Day", HolidayKind.REGIONAL,
     (_S.BE,)),
    (60, "Fronleichnam", "Corpus Christi", HolidayKind.RELIGIOUS,
     (_S.BW, _S.BY, _S.HE, _S.NW, _S.RP, _S.SL)),
    ((8, 15), "Mariä Himmelfahrt", "Assumption of Mary", HolidayKind.RELIGIOUS,
     (_S.BY, _S.SL)),
    ((9, 20), "Weltkindertag", "World Children's Day", HolidayKind.REGIONAL,
     (_S.TH,)),
    ((10, 31), "Reformationstag", "Reformation Day", HolidayKind.RELIGIOUS,
     (_S.BB, _S.MV, _S.SN, _S.ST, _S.TH, _S.HH, _S.NI, _S.SH)),
    ((11, 1), "Allerheiligen", "All Saints' Day", HolidayKind.RELIGIOUS,
     (_S.BW, _S.BY, _S.NW, _S.RP, _S.SL)),
]

REPENTANCE_DAY_STATES = (_S.SN,)


def repentance_day(year: int) -> date:
    """
    Buß- und Bettag: the Wednesday on or before November 23rd.

    Args:
        year: Year to compute the date for.

    Returns:
        Date of the Day of Repentance and Prayer.
    """
    nov23 = date(year, 11, 23)
    return nov23 - timedelta(days=(nov23.weekday() - WEDNESDAY) % 7)


def _generate(year: int) -> List[Holiday]:
    easter = compute_easter(year)
    result = []

    for month, day, name, description in FIXED_FEDERAL_HOLIDAYS:
        result.append(Holiday(
            name=name,
            holiday_date=date(year, month, day),
            regions=ALL_STATES,
            kind=HolidayKind.FEDERAL,
            description=description,
        ))

    for offset, name, description in EASTER_FEDERAL_HOLIDAYS:
        result.append(Holiday(
            name=name,
            holiday_date=easter + timedelta(days=offset),
            regions=ALL_STATES,
            kind=HolidayKind.FEDERAL,
            description=description,
        ))

    for rule, name, description, kind, states in REGIONAL_HOLIDAYS:
        if isinstance(rule, tuple):
            holiday_date = date(year, *rule)
        else:
            holiday_date = easter + timedelta(days=rule)
        result.append(Holiday(
            name=name,
            holiday_date=holiday_date,
            regions=states,
            kind=kind,
            description=description,
        ))

    result.append(Holiday(
        name="Buß- und Bettag",
        holiday_date=repentance_day(year),
        regions=REPENTANCE_DAY_STATES,
        kind=HolidayKind.RELIGIOUS,
        description="Day of Repentance and Prayer",
    ))
    return result


def holidays_for_year(year: int, region: Optional[str] = None) -> List[Holiday]:
    """
    Get all holidays of a year, optionally restricted to one state.

    Args:
        year: Year to generate holidays for.
        region: Bundesland code. ``None`` or ``"DE"`` returns every holiday
            observed anywhere in Germany; an unknown code returns an empty list.

    Returns:
        Holidays sorted by date, ties kept in generation order.
    """
    holidays = _generate(year)
    if region is not None and region != NATIONWIDE:
        holidays = [h for h in holidays if region in h.regions]
    return sorted(holidays, key=lambda h: h.holiday_date)


def get_federal_holidays(year: int) -> List[Holiday]:
    """Get the holidays observed in all states."""
    return [h for h in holidays_for_year(year) if h.kind == HolidayKind.FEDERAL]


def holidays_for_range(start: DateLike, end: DateLike, region: Optional[str] = None) -> List[Holiday]:
    """
    Get the holidays between two dates (inclusive), across year boundaries.

    Raises:
        InvalidRangeError: If start is after end.
    """
    start_date = to_date(start)
    end_date = to_date(end)
    if start_date > end_date:
        raise InvalidRangeError(start_date, end_date)

    result = []
    for year in range(start_date.year, end_date.year + 1):
        result.extend(
            h for h in holidays_for_year(year, region)
            if start_date <= h.holiday_date <= end_date
        )
    return result


def holiday_dates(holidays: Iterable[Union[Holiday, date, str]]) -> Set[date]:
    """Normalize holidays, dates or ISO strings into a set of dates."""
    result = set()
    for item in holidays:
        if isinstance(item, Holiday):
            result.add(item.holiday_date)
        else:
            result.add(to_date(item))
    return result


def _find_holiday(date_string: str, region: Optional[str]) -> Optional[Holiday]:
    try:
        check_date = to_date(date_string)
    except (TypeError, ValueError):
        logger.debug("Ignoring malformed date %r", date_string)
        return None
    for holiday in holidays_for_year(check_date.year, region or NATIONWIDE):
        if holiday.holiday_date == check_date:
            return holiday
    return None


def is_holiday(date_string: str, region: str = NATIONWIDE) -> bool:
    """
    Check if a date is a holiday in a region.

    Malformed dates and unknown regions yield False instead of raising.
    """
    return _find_holiday(date_string, region) is not None


def get_holiday_name(date_string: str, region: str = NATIONWIDE) -> Optional[str]:
    """
    Get the German name of the holiday on a date, if any.

    Malformed dates and unknown regions yield None instead of raising.
    """
    holiday = _find_holiday(date_string, region)
    return holiday.name if holiday else None


HolidaySource = Callable[[int, Optional[str]], List[Holiday]]


class HolidayCache:
    """
    Memoizing wrapper around a holiday source, keyed by (year, region).

    Only known region codes are stored, at most ``maxsize`` entries with the
    least recently used evicted first. Unknown codes are passed straight to
    the source.
    """

    def __init__(self, source: HolidaySource = holidays_for_year, maxsize: int = 512):
        """
        Initialize the cache.

        Args:
            source: Function returning the holidays of a year and region.
            maxsize: Maximum number of (year, region) entries kept.
        """
        self._source = source
        self.maxsize = maxsize
        self._cache: "OrderedDict[tuple, List[Holiday]]" = OrderedDict()

    def __call__(self, year: int, region: Optional[str] = None) -> List[Holiday]:
        if region is not None and region not in VALID_REGION_CODES:
            return self._source(year, region)
        cache_key = (year, region or NATIONWIDE)
        if cache_key in self._cache:
            self._cache.move_to_end(cache_key)
        else:
            logger.debug("Holiday cache miss for %s", cache_key)
            self._cache[cache_key] = self._source(year, region)
            if len(self._cache) > self.maxsize:
                self._cache.popitem(last=False)
        return list(self._cache[cache_key])

    @property
    def size(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        """Clear the holiday cache."""
        self._cache.clear()
