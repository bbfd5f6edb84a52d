"""
Tests for the MCP server setup and its tools.
"""

import pytest
from mcp.server.fastmcp import FastMCP

from vacation_calculator.mcp_server import (
    _check_region,
    calculate_workdays,
    check_holiday,
    create_mcp_server,
    get_holidays,
    list_regions,
)


class TestMcpServer:
    def test_create_server(self):
        server = create_mcp_server(host="127.0.0.1", port=8765)
        assert isinstance(server, FastMCP)

    def test_valid_regions(self):
        assert _check_region("HH") is None
        assert _check_region("DE") is None

    def test_invalid_region(self):
        error = _check_region("XX")
        assert "Invalid region code: XX" in error["error"]


class TestCalculateWorkdays:
    def test_hamburg_march_to_august_2026(self):
        result = calculate_workdays("2026-03-01", "2026-08-31", "hh")

        assert result["region"] == "HH"
        assert result["region_name"] == "Hamburg"
        assert result["total_days"] == 184
        assert result["working_days"] == 126
        assert result["holiday_days"] == 5
        assert "Pfingstmontag" in [h["name"] for h in result["holidays"]]

    @pytest.mark.parametrize("start", ["2026-02-30", "20251225", "2025-W52-4"])
    def test_malformed_date(self, start):
        result = calculate_workdays(start, "2026-03-02")

        assert "Invalid date format" in result["error"]

    def test_end_before_start(self):
        result = calculate_workdays("2026-03-06", "2026-03-02")

        assert result == {"error": "end_date must be after or equal to start_date"}

    def test_unknown_region(self):
        result = calculate_workdays("2026-03-02", "2026-03-06", "XX")

        assert "Invalid region code: XX" in result["error"]


class TestGetHolidays:
    def test_bayern(self):
        result = get_holidays(2025, "by")

        assert result["region"] == "BY"
        assert result["holiday_count"] == 13
        assert len(result["holidays"]) == 13
        first = result["holidays"][0]
        assert first["name"] == "Neujahr"
        assert first["date"] == "2025-01-01"
        assert first["kind"] == "federal"
        assert "BY" in first["regions"]

    @pytest.mark.parametrize("year", [1000, 10000])
    def test_year_out_of_range(self, year):
        result = get_holidays(year, "BY")

        assert result == {"error": "Year must be between 1583 and 9999"}

    def test_unknown_region(self):
        assert "error" in get_holidays(2025, "XX")


class TestCheckHoliday:
    def test_christmas(self):
        result = check_holiday("2025-12-25")

        assert result["is_holiday"] is True
        assert result["name"] == "1. Weihnachtstag"

    def test_regional_holiday(self):
        assert check_holiday("2025-01-06", "by")["is_holiday"] is True
        assert check_holiday("2025-01-06", "HH")["is_holiday"] is False

    @pytest.mark.parametrize("check_date", ["not-a-date", "2025-W52-4", "20251225"])
    def test_malformed_date(self, check_date):
        result = check_holiday(check_date)

        assert result["is_holiday"] is False
        assert result["name"] is None


class TestListRegions:
    def test_all_states_then_nationwide(self):
        result = list_regions()

        assert result["count"] == 17
        codes = [r["code"] for r in result["regions"]]
        assert codes[-1] == "DE"
        assert {"code": "HH", "name": "Hamburg"} in result["regions"]
