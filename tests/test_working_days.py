"""
Tests for working day counting and range overlap.
"""

from datetime import date, timedelta

import pytest

from vacation_calculator.core.holiday_catalog import holidays_for_range, holidays_for_year
from vacation_calculator.core.overlap import find_overlaps, ranges_overlap
from vacation_calculator.core.working_days import count_working_days, working_days_count
from vacation_calculator.data.schemas import VacationEntry
from vacation_calculator.exceptions import InvalidRangeError


@pytest.fixture
def holidays_2025():
    """Nationwide holidays of 2025."""
    return holidays_for_year(2025)


class TestCountWorkingDays:
    """Tests for count_working_days."""

    def test_simple_week(self):
        """Monday to Friday are five working days."""
        result = count_working_days(date(2026, 3, 2), date(2026, 3, 6))

        assert result.total_days == 5
        assert result.weekend_days == 0
        assert result.working_days == 5
        assert result.excluded_dates == []

    def test_week_with_weekend(self):
        """A full week has two weekend days."""
        result = count_working_days(date(2026, 3, 2), date(2026, 3, 8))

        assert result.total_days == 7
        assert result.weekend_days == 2
        assert result.working_days == 5
        assert result.excluded_dates == [date(2026, 3, 7), date(2026, 3, 8)]

    def test_holiday_on_weekday(self, holidays_2025):
        """Christmas 2025 falls on Thursday and Friday."""
        result = count_working_days(date(2025, 12, 22), date(2025, 12, 28), holidays_2025)

        assert result.working_days == 3
        assert result.holiday_days == 2
        assert result.weekend_days == 2
        assert date(2025, 12, 25) in result.excluded_dates

    def test_holiday_on_weekend_counts_as_weekend(self):
        """German Unity Day 2026 is a Saturday and only counts as weekend."""
        holidays = holidays_for_year(2026)
        result = count_working_days(date(2026, 10, 1), date(2026, 10, 4), holidays)

        assert date(2026, 10, 3).weekday() == 5
        assert result.working_days == 2
        assert result.weekend_days == 2
        assert result.holiday_days == 0

    def test_accepts_iso_strings_and_dates(self):
        """Dates and holidays may be given as ISO strings."""
        result = count_working_days("2025-12-22", "2025-12-28", ["2025-12-25", date(2025, 12, 26)])

        assert result.working_days == 3
        assert result.holiday_days == 2

    def test_single_day(self):
        result = count_working_days(date(2026, 3, 2), date(2026, 3, 2))

        assert result.total_days == 1
        assert result.working_days == 1

    def test_single_weekend_day(self):
        result = count_working_days(date(2026, 3, 7), date(2026, 3, 7))

        assert result.total_days == 1
        assert result.weekend_days == 1
        assert result.working_days == 0

    def test_single_holiday(self, holidays_2025):
        result = count_working_days("2025-01-01", "2025-01-01", holidays_2025)

        assert result.holiday_days == 1
        assert result.working_days == 0
        assert result.excluded_dates == [date(2025, 1, 1)]

    def test_invalid_range(self):
        """Start after end is rejected, never swapped."""
        with pytest.raises(InvalidRangeError):
            count_working_days(date(2026, 3, 6), date(2026, 3, 2))

    def test_invalid_range_is_value_error(self):
        with pytest.raises(ValueError):
            count_working_days("2026-03-06", "2026-03-02")

    def test_malformed_date(self):
        with pytest.raises(ValueError):
            count_working_days("2026-13-01", "2026-12-31")

    @pytest.mark.parametrize("start, end", [("2025W521", "20251231"), ("2025-12-22", "2025-W52-7")])
    def test_only_extended_iso_dates(self, start, end):
        """Basic and week-date ISO forms are rejected."""
        with pytest.raises(ValueError):
            count_working_days(start, end)

    def test_hamburg_march_to_august_2026(self):
        """Hamburg from 01.03.2026 to 31.08.2026."""
        start, end = date(2026, 3, 1), date(2026, 8, 31)
        result = count_working_days(start, end, holidays_for_range(start, end, "HH"))

        # Karfreitag, Ostermontag, Tag der Arbeit, Christi Himmelfahrt, Pfingstmontag
        assert result.total_days == 184
        assert result.weekend_days == 53
        assert result.holiday_days == 5
        assert result.working_days == 126

    def test_region_changes_count(self):
        """Corpus Christi 2026 (June 4th) is a working day in Hamburg only."""
        start, end = date(2026, 6, 1), date(2026, 6, 5)

        hamburg = count_working_days(start, end, holidays_for_range(start, end, "HH"))
        bayern = count_working_days(start, end, holidays_for_range(start, end, "BY"))

        assert hamburg.working_days == 5
        assert bayern.working_days == 4

    def test_year_boundary(self):
        start, end = date(2025, 12, 15), date(2026, 1, 15)
        result = count_working_days(start, end, holidays_for_range(start, end, "HH"))

        assert result.total_days == 32
        # 25./26.12.2025 and 01.01.2026
        assert result.holiday_days == 3

    def test_counts_add_up(self, holidays_2025):
        """total = working + weekend + holiday for many ranges."""
        start = date(2025, 1, 1)
        for length in range(0, 400, 13):
            result = count_working_days(start, start + timedelta(days=length), holidays_2025)
            assert result.total_days == length + 1
            assert result.total_days == (
                result.working_days + result.weekend_days + result.holiday_days
            )
            assert len(result.excluded_dates) == result.weekend_days + result.holiday_days

    def test_extending_range_never_decreases(self, holidays_2025):
        """Adding a day at the end never lowers the working-day count."""
        start = date(2025, 3, 28)
        previous = 0
        for length in range(60):
            current = working_days_count(start, start + timedelta(days=length), holidays_2025)
            assert current >= previous
            previous = current


class TestRangesOverlap:
    """Tests for ranges_overlap and find_overlaps."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (("2025-03-10", "2025-03-14"), ("2025-03-12", "2025-03-16"), True),
            (("2025-03-10", "2025-03-14"), ("2025-03-14", "2025-03-20"), True),
            (("2025-03-10", "2025-03-14"), ("2025-03-15", "2025-03-20"), False),
            (("2025-03-10", "2025-03-31"), ("2025-03-12", "2025-03-13"), True),
            (("2025-03-10", "2025-03-10"), ("2025-03-10", "2025-03-10"), True),
            (("2025-01-01", "2025-01-05"), ("2024-12-20", "2024-12-31"), False),
        ],
    )
    def test_overlap_is_symmetric(self, a, b, expected):
        assert ranges_overlap(*a, *b) is expected
        assert ranges_overlap(*b, *a) is expected

    def test_range_overlaps_itself(self):
        assert ranges_overlap(date(2025, 5, 1), date(2025, 5, 9), date(2025, 5, 1), date(2025, 5, 9))

    def test_find_overlaps(self):
        entries = [
            VacationEntry(id="a", employee_id="e1", start_date="2025-03-10", end_date="2025-03-14"),
            VacationEntry(id="b", employee_id="e1", start_date="2025-04-01", end_date="2025-04-04"),
            VacationEntry(id="c", employee_id="e1", start_date="2025-03-16", end_date="2025-03-18"),
        ]

        result = find_overlaps("2025-03-12", "2025-03-16", entries)
        assert [e.id for e in result] == ["a", "c"]

        result = find_overlaps("2025-03-12", "2025-03-16", entries, exclude_id="a")
        assert [e.id for e in result] == ["c"]
