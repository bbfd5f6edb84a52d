"""
Console output formatting using Rich.
"""

from datetime import date
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from vacation_calculator.data.bundesland_data import BUNDESLAND_NAMES, NATIONWIDE_NAME, region_name
from vacation_calculator.data.schemas import (
    NATIONWIDE,
    Bundesland,
    Holiday,
    VacationBalance,
    VacationSummaryStats,
    VacationValidation,
    WorkingDayResult,
)

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the console formatter."""
        self.console = console or Console()

    def print_working_days(self, result: WorkingDayResult, region: str = NATIONWIDE) -> None:
        """
        Print a working day calculation result.

        Args:
            result: WorkingDayResult to display.
            region: Region whose holidays were used.
        """
        self.console.print()
        self.console.rule("[bold blue]Working Day Calculation[/bold blue]")
        self.console.print()

        summary_table = Table(show_header=False, box=None)
        summary_table.add_column("Label", style="cyan", width=20)
        summary_table.add_column("Value", style="white")

        summary_table.add_row(
            "Period:",
            f"{result.start_date.strftime('%d.%m.%Y')} - {result.end_date.strftime('%d.%m.%Y')}",
        )
        summary_table.add_row("Region:", f"{region_name(region)} ({region})")

        self.console.print(Panel(summary_table, title="[bold]Region & Period[/bold]"))

        calc_table = Table(show_header=False, box=None)
        calc_table.add_column("Label", style="cyan", width=20)
        calc_table.add_column("Value", style="white", justify="right", width=10)

        calc_table.add_row("Calendar Days:", str(result.total_days))
        calc_table.add_row("Weekend Days:", f"- {result.weekend_days}")
        calc_table.add_row("Holidays (on workdays):", f"- {result.holiday_days}")
        calc_table.add_row("", "─" * 15)
        calc_table.add_row(
            Text("Working Days:", style="bold green"),
            Text(str(result.working_days), style="bold green"),
        )

        self.console.print(Panel(calc_table, title="[bold]Calculation[/bold]"))
        self.console.print()

    def print_holidays(self, holidays: List[Holiday], title: str = "Holidays") -> None:
        """
        Print a table of holidays.

        Args:
            holidays: List of holidays to display.
            title: Table title.
        """
        holiday_table = Table(title=f"[bold]{title}[/bold]")
        holiday_table.add_column("Date", style="cyan", width=12)
        holiday_table.add_column("Day", style="dim", width=10)
        holiday_table.add_column("Name", style="white")
        holiday_table.add_column("Kind", style="magenta")
        holiday_table.add_column("States", style="dim")

        for holiday in holidays:
            states = "all" if holiday.is_national else ", ".join(r.value for r in holiday.regions)
            holiday_table.add_row(
                holiday.holiday_date.strftime("%d.%m.%Y"),
                WEEKDAY_NAMES[holiday.holiday_date.weekday()],
                holiday.name,
                holiday.kind.value,
                states,
            )

        self.console.print(holiday_table)

    def print_holidays_for_years(
        self, start_year: int, end_year: int, region: str, holidays: List[Holiday]
    ) -> None:
        """Print all holidays of a year span for a region."""
        years = str(start_year) if start_year == end_year else f"{start_year}-{end_year}"
        self.console.print()
        self.console.rule(f"[bold blue]Holidays {years} - {region_name(region)}[/bold blue]")
        self.console.print()

        if holidays:
            self.print_holidays(holidays, title=f"{len(holidays)} holidays")
        else:
            self.console.print("[dim]No holidays found for this region.[/dim]")

        self.console.print()

    def print_easter(self, year: int, easter: date) -> None:
        """Print the Easter Sunday of a year."""
        self.console.print(
            f"Easter Sunday {year}: [bold green]{easter.strftime('%d.%m.%Y')}[/bold green] "
            f"({easter.isoformat()})"
        )

    def print_balances(
        self,
        balances: List[VacationBalance],
        stats: Optional[VacationSummaryStats] = None,
        clamp: bool = False,
    ) -> None:
        """
        Print vacation balances as a table.

        Args:
            balances: Balances to display.
            stats: Optional summary row.
            clamp: Show negative remaining days as 0.
        """
        table = Table(title="[bold]Vacation Balances[/bold]")
        table.add_column("Employee", style="white")
        table.add_column("Year", style="dim", justify="right")
        table.add_column("Region", style="dim")
        table.add_column("Allowance", justify="right")
        table.add_column("Used", justify="right")
        table.add_column("Remaining", justify="right")

        for balance in balances:
            remaining = balance.display_remaining_days if clamp else balance.remaining_days
            style = "bold red" if balance.is_overdrawn and not clamp else "green"
            table.add_row(
                balance.employee_name or balance.employee_id,
                str(balance.year),
                balance.region_code,
                f"{balance.allowance_days:g}",
                str(balance.used_days),
                Text(f"{remaining:g}", style=style),
            )

        self.console.print(table)

        if stats:
            self.console.print(
                f"[cyan]{stats.total_employees}[/cyan] employees, "
                f"[cyan]{stats.total_used}[/cyan] of [cyan]{stats.total_allowance:g}[/cyan] days used, "
                f"average [cyan]{stats.average_usage:g}[/cyan] days per employee"
            )

    def print_validation(self, validation: VacationValidation) -> None:
        """Print the outcome of a vacation request check."""
        if validation.is_valid:
            self.print_success("Vacation request is valid")
        else:
            self.console.print("[bold red]Vacation request is invalid[/bold red]")

        for error in validation.errors:
            self.print_error(error)
        for warning in validation.warnings:
            self.console.print(f"[yellow]Warning:[/yellow] {warning}")

        self.console.print(
            f"Working days: {validation.working_days}, used so far: {validation.current_used}, "
            f"allowance: {validation.allowance:g}, remaining after: {validation.remaining_after:g}"
        )

    def print_regions(self) -> None:
        """Print a table of all region codes."""
        self.console.print()
        self.console.rule("[bold blue]German Federal States (Bundeslaender)[/bold blue]")
        self.console.print()

        table = Table()
        table.add_column("Code", style="cyan", width=6)
        table.add_column("Name", style="white")

        for bundesland in Bundesland:
            table.add_row(bundesland.value, BUNDESLAND_NAMES[bundesland])
        table.add_row(NATIONWIDE, NATIONWIDE_NAME)

        self.console.print(table)
        self.console.print()

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        Args:
            message: Error message to display.
        """
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def print_success(self, message: str) -> None:
        """
        Print a success message.

        Args:
            message: Success message to display.
        """
        self.console.print(f"[bold green]Success:[/bold green] {message}")
