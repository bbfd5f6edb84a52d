"""
CLI interface for the vacation calculator.
"""

import logging
import sys
from datetime import date
from pathlib import Path

import click

from vacation_calculator import __version__
from vacation_calculator.config.manager import ConfigManager
from vacation_calculator.core.aggregator import holidays_for_years
from vacation_calculator.core.balance import (
    balances_for_employees,
    summary_stats,
    validate_vacation_request,
)
from vacation_calculator.core.dates import parse_date
from vacation_calculator.core.easter import compute_easter
from vacation_calculator.core.holiday_catalog import HolidayCache, holidays_for_range, holidays_for_year
from vacation_calculator.core.working_days import count_working_days
from vacation_calculator.data.loader import DataLoader
from vacation_calculator.data.schemas import NATIONWIDE, Bundesland, HolidayKind
from vacation_calculator.output.exporter import ResultExporter
from vacation_calculator.output.formatter import ConsoleFormatter

logger = logging.getLogger(__name__)

REGION_CHOICES = [b.value for b in Bundesland] + [NATIONWIDE]


def setup_logging(debug: bool) -> None:
    """Configure root logging for CLI usage."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def region_option(**kwargs):
    return click.option(
        "--region", "-r",
        type=click.Choice(REGION_CHOICES, case_sensitive=False),
        help="Bundesland code (e.g., HH, BY, NW) or DE for all",
        **kwargs,
    )


config_option = click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)


def wants_json(output: str, default_format: str) -> bool:
    """Pick JSON or CSV from the file suffix, falling back to the configured format."""
    suffix = Path(output).suffix.lower()
    if suffix in (".json", ".csv"):
        return suffix == ".json"
    return default_format == "json"


@click.group()
@click.version_option(version=__version__, prog_name="vacation-calc")
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging")
def main(debug):
    """Vacation Calculator - German holidays, working days and vacation balances."""
    setup_logging(debug)


@main.command()
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year (default: current year)",
)
def easter(year):
    """Show Easter Sunday of a year."""
    formatter = ConsoleFormatter()
    year = year or date.today().year
    formatter.print_easter(year, compute_easter(year))


@main.command()
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year to show holidays for (default: current year)",
)
@click.option(
    "--to-year",
    type=int,
    default=None,
    help="Last year of a multi-year listing (optional)",
)
@region_option()
@click.option(
    "--federal-only",
    is_flag=True,
    default=False,
    help="Only list holidays observed in all states",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output file path, .csv or .json (optional)",
)
@config_option
def holidays(year, to_year, region, federal_only, output, config):
    """List holidays for a year (or year span) and region."""
    formatter = ConsoleFormatter()

    try:
        cfg = ConfigManager(config).load_config()

        start_year = year or date.today().year
        end_year = to_year or start_year
        region = region.upper() if region else cfg.default_region

        holiday_list = holidays_for_years(start_year, end_year, region)
        if federal_only:
            holiday_list = [h for h in holiday_list if h.kind == HolidayKind.FEDERAL]

        formatter.print_holidays_for_years(start_year, end_year, region, holiday_list)

        if output:
            exporter = ResultExporter(output_directory=cfg.output_directory)
            if wants_json(output, cfg.output_format):
                path = exporter.export_holidays_json(holiday_list, output)
            else:
                path = exporter.export_holidays_csv(holiday_list, output)
            formatter.print_success(f"Holidays saved to {path}")

    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command()
@click.option(
    "--start", "-s",
    required=True,
    help="Start date (YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY)",
)
@click.option(
    "--end", "-e",
    required=True,
    help="End date (YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY)",
)
@region_option()
@click.option(
    "--format", "-f",
    type=click.Choice(["console", "json", "both"]),
    default="console",
    help="Output format (default: console)",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output file path for JSON (optional)",
)
@config_option
def workdays(start, end, region, format, output, config):
    """Count working days between two dates."""
    formatter = ConsoleFormatter()

    try:
        start_date = parse_date(start)
        end_date = parse_date(end)

        cfg = ConfigManager(config).load_config()
        region = region.upper() if region else cfg.default_region

        holiday_list = holidays_for_range(start_date, end_date, region)
        logger.debug("Using %d holidays for region %s", len(holiday_list), region)
        result = count_working_days(start_date, end_date, holiday_list)

        if format in ("console", "both"):
            formatter.print_working_days(result, region)
            if holiday_list:
                formatter.print_holidays(holiday_list, title="Holidays in Period")

        if format in ("json", "both"):
            exporter = ResultExporter(output_directory=cfg.output_directory)
            path = exporter.export_working_days_json(result, region, output)
            formatter.print_success(f"Result saved to {path}")

    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command()
@click.option(
    "--data", "-d",
    required=True,
    type=click.Path(exists=True),
    help="Dataset file (JSON or YAML) with employees and vacations",
)
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year (default: current year)",
)
@click.option(
    "--employee",
    default=None,
    help="Only show this employee id",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output file path, .csv or .json (optional)",
)
@config_option
def balance(data, year, employee, output, config):
    """Show vacation balances per employee."""
    formatter = ConsoleFormatter()

    try:
        cfg = ConfigManager(config).load_config()
        dataset = DataLoader(cfg.default_allowance_days).load(data)
        year = year or date.today().year

        employees = dataset.employees
        if employee:
            employees = [e for e in employees if e.id == employee]
            if not employees:
                formatter.print_error(f"Unknown employee: {employee}")
                sys.exit(1)

        source = HolidayCache() if cfg.cache_holidays else holidays_for_year
        balances = balances_for_employees(employees, year, dataset.vacations, source=source)
        stats = summary_stats(balances)
        logger.debug("Calculated %d balances for %d", len(balances), year)

        formatter.print_balances(balances, stats, clamp=cfg.clamp_remaining)

        if output:
            exporter = ResultExporter(output_directory=cfg.output_directory)
            if wants_json(output, cfg.output_format):
                path = exporter.export_balances_json(balances, output)
            else:
                path = exporter.export_balances_csv(balances, output, clamp=cfg.clamp_remaining)
            formatter.print_success(f"Balances saved to {path}")

    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command()
@click.option(
    "--data", "-d",
    required=True,
    type=click.Path(exists=True),
    help="Dataset file (JSON or YAML) with employees and vacations",
)
@click.option("--employee", required=True, help="Employee id")
@click.option("--start", "-s", required=True, help="Start date")
@click.option("--end", "-e", required=True, help="End date")
@click.option("--exclude", default=None, help="Vacation id being edited (ignored in checks)")
@click.option("--year", "-y", type=int, default=None, help="Allowance year (default: start year)")
@config_option
def validate(data, employee, start, end, exclude, year, config):
    """Check a vacation request for overlaps and allowance."""
    formatter = ConsoleFormatter()

    try:
        cfg = ConfigManager(config).load_config()
        dataset = DataLoader(cfg.default_allowance_days).load(data)

        emp = dataset.get_employee(employee)
        if emp is None:
            formatter.print_error(f"Unknown employee: {employee}")
            sys.exit(1)

        result = validate_vacation_request(
            employee,
            parse_date(start),
            parse_date(end),
            emp,
            dataset.vacations,
            year=year,
            exclude_entry_id=exclude,
        )
        formatter.print_validation(result)
        if not result.is_valid:
            sys.exit(1)

    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command()
def regions():
    """List all German federal states with their codes."""
    formatter = ConsoleFormatter()
    formatter.print_regions()


@main.command()
@click.option(
    "--host", "-h",
    default=None,
    help="Host to bind to (default: from config or 0.0.0.0)",
)
@click.option(
    "--port", "-p",
    type=int,
    default=None,
    help="Port to bind to (default: from config or 8000)",
)
@config_option
def serve(host, port, config):
    """Start the FastAPI server."""
    formatter = ConsoleFormatter()

    try:
        import uvicorn
    except ImportError:
        formatter.print_error("uvicorn is required for the API server. Install it with: pip install uvicorn")
        sys.exit(1)

    cfg = ConfigManager(config).load_config()

    # Use provided values or fall back to config
    api_host = host or cfg.api_host
    api_port = port or cfg.api_port

    formatter.console.print(f"Starting API server at http://{api_host}:{api_port}")
    formatter.console.print("Press Ctrl+C to stop")
    formatter.console.print()

    uvicorn.run(
        "vacation_calculator.api:app",
        host=api_host,
        port=api_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
