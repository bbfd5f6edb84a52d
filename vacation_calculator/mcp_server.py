"""
MCP Server for the Vacation Calculator.

This module provides an MCP (Model Context Protocol) server that exposes
the holiday and working day calculations to MCP clients.

Supports two transport modes:
- stdio: For local desktop integration
- sse: For HTTP-based integration (Docker, remote servers)
"""

import argparse
import logging
import os
from typing import Optional

from mcp.server.fastmcp import FastMCP

from vacation_calculator.config.manager import ConfigManager
from vacation_calculator.core.dates import MAX_YEAR, MIN_YEAR, to_date
from vacation_calculator.core.holiday_catalog import (
    HolidayCache,
    get_holiday_name,
    holidays_for_range,
    holidays_for_year,
)
from vacation_calculator.core.working_days import count_working_days
from vacation_calculator.data.bundesland_data import BUNDESLAND_NAMES, NATIONWIDE_NAME, VALID_REGION_CODES, region_name
from vacation_calculator.data.schemas import NATIONWIDE, Bundesland
from vacation_calculator.output.exporter import holiday_to_dict

logger = logging.getLogger(__name__)

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

holiday_source = HolidayCache() if config.cache_holidays else holidays_for_year


def _check_region(region: str) -> Optional[dict]:
    if region not in VALID_REGION_CODES:
        valid_codes = ", ".join(sorted(VALID_REGION_CODES))
        return {"error": f"Invalid region code: {region}. Valid codes: {valid_codes}"}
    return None


def calculate_workdays(
    start_date: str,
    end_date: str,
    region: str = NATIONWIDE,
) -> dict:
    """
    Calculate working days between two dates for a German federal state.

    Weekends and the public holidays of the region are excluded. A holiday
    on a Saturday or Sunday counts as a weekend day only.

    Args:
        start_date: Start date in format YYYY-MM-DD (e.g., "2026-03-01")
        end_date: End date in format YYYY-MM-DD (e.g., "2026-08-31")
        region: Bundesland code (e.g., "HH", "BY") or "DE" for all holidays

    Returns:
        Dictionary with total_days, working_days, weekend_days,
        holiday_days and the holidays in the period.
    """
    try:
        start = to_date(start_date)
        end = to_date(end_date)
    except (TypeError, ValueError) as e:
        return {"error": f"Invalid date format. Use YYYY-MM-DD. Details: {str(e)}"}

    if end < start:
        return {"error": "end_date must be after or equal to start_date"}

    region = region.upper()
    error = _check_region(region)
    if error:
        return error

    holidays = holidays_for_range(start, end, region)
    result = count_working_days(start, end, holidays)

    return {
        "start_date": start.isoformat(),
        "end_date": end.isoformat(),
        "region": region,
        "region_name": region_name(region),
        "total_days": result.total_days,
        "working_days": result.working_days,
        "weekend_days": result.weekend_days,
        "holiday_days": result.holiday_days,
        "holidays": [holiday_to_dict(h) for h in holidays],
    }


def get_holidays(year: int, region: str = NATIONWIDE) -> dict:
    """
    Get all public holidays for a year and German federal state.

    Args:
        year: Year to get holidays for (e.g., 2026)
        region: Bundesland code (e.g., "BY", "HH", "NW") or "DE" for all

    Returns:
        Dictionary with year, region, holiday_count and the holidays.
    """
    region = region.upper()
    error = _check_region(region)
    if error:
        return error

    if year < MIN_YEAR or year > MAX_YEAR:
        return {"error": f"Year must be between {MIN_YEAR} and {MAX_YEAR}"}

    holidays = holiday_source(year, region)
    return {
        "year": year,
        "region": region,
        "region_name": region_name(region),
        "holiday_count": len(holidays),
        "holidays": [holiday_to_dict(h) for h in holidays],
    }


def check_holiday(check_date: str, region: str = NATIONWIDE) -> dict:
    """
    Check whether a date is a public holiday.

    Args:
        check_date: Date in format YYYY-MM-DD
        region: Bundesland code or "DE"

    Returns:
        Dictionary with is_holiday and the holiday name (or null).
    """
    name = get_holiday_name(check_date, region.upper())
    return {
        "date": check_date,
        "region": region.upper(),
        "is_holiday": name is not None,
        "name": name,
    }


def list_regions() -> dict:
    """
    List all German federal states (Bundesländer) with their codes.

    Returns:
        Dictionary with the 16 state codes and names plus "DE".
    """
    regions = [{"code": bl.value, "name": BUNDESLAND_NAMES[bl]} for bl in Bundesland]
    regions.append({"code": NATIONWIDE, "name": NATIONWIDE_NAME})
    return {"count": len(regions), "regions": regions}


def create_mcp_server(host: str = "127.0.0.1", port: int = 8000) -> FastMCP:
    """Create and configure the MCP server with tools."""
    mcp = FastMCP("Vacation Calculator", host=host, port=port)

    for tool in (calculate_workdays, get_holidays, check_holiday, list_regions):
        mcp.tool()(tool)

    return mcp


def main():
    """Run the MCP server with configurable transport.

    Transport can be set via:
    - Command line: --transport sse --port 8080
    - Environment: MCP_TRANSPORT=sse MCP_PORT=8080 MCP_HOST=0.0.0.0
    """
    parser = argparse.ArgumentParser(description="Vacation Calculator MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=os.environ.get("MCP_TRANSPORT", "stdio"),
        help="Transport mode: stdio (default) or sse for HTTP",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("MCP_HOST", os.environ.get("FASTMCP_HOST", "0.0.0.0")),
        help="Host to bind to (SSE mode only, default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("MCP_PORT", os.environ.get("FASTMCP_PORT", "8080"))),
        help="Port to listen on (SSE mode only, default: 8080)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    mcp = create_mcp_server(host=args.host, port=args.port)

    logger.info("Starting Vacation Calculator MCP server (%s)", args.transport)
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
