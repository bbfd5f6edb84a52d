"""
Export functionality for holiday, working day and balance results.
"""

import csv
import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from vacation_calculator.data.schemas import Holiday, VacationBalance, WorkingDayResult


def holiday_to_dict(holiday: Holiday) -> dict:
    """Convert a Holiday to a JSON-serializable dictionary."""
    return {
        "name": holiday.name,
        "date": holiday.holiday_date.isoformat(),
        "regions": [r.value for r in holiday.regions],
        "kind": holiday.kind.value,
        "description": holiday.description,
    }


class ResultExporter:
    """Exports calculation results to JSON and CSV files."""

    def __init__(
        self,
        output_directory: str = "results",
        timestamp_format: str = "%Y%m%d_%H%M%S",
    ):
        """
        Initialize the result exporter.

        Args:
            output_directory: Directory for output files.
            timestamp_format: Format string for timestamps in filenames.
        """
        self.output_directory = output_directory
        self.timestamp_format = timestamp_format

    def _ensure_output_dir(self) -> Path:
        """Ensure output directory exists and return path."""
        output_path = Path(self.output_directory)
        output_path.mkdir(parents=True, exist_ok=True)
        return output_path

    def _generate_filename(self, prefix: str, extension: str) -> str:
        """Generate a filename with timestamp."""
        timestamp = datetime.now().strftime(self.timestamp_format)
        return f"{prefix}_{timestamp}.{extension}"

    def _resolve_path(self, output_path: Optional[str], prefix: str, extension: str) -> Path:
        if output_path:
            file_path = Path(output_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            return file_path
        return self._ensure_output_dir() / self._generate_filename(prefix, extension)

    def export_working_days_json(
        self, result: WorkingDayResult, region: str, output_path: Optional[str] = None
    ) -> str:
        """
        Export a working day result to JSON.

        Args:
            result: WorkingDayResult to export.
            region: Region whose holidays were used.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "workdays", "json")

        result_dict = {"region": region, **result.model_dump(mode="json")}

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(result_dict, f, indent=2, ensure_ascii=False)

        return str(file_path)

    def export_holidays_csv(
        self, holidays: List[Holiday], output_path: Optional[str] = None
    ) -> str:
        """
        Export holidays list to CSV file.

        Args:
            holidays: List of holidays to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "holidays", "csv")

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)

            # Write header
            writer.writerow(["Date", "Name", "Description", "Kind", "States"])

            # Write data
            for holiday in holidays:
                writer.writerow([
                    holiday.holiday_date.isoformat(),
                    holiday.name,
                    holiday.description,
                    holiday.kind.value,
                    " ".join(r.value for r in holiday.regions),
                ])

        return str(file_path)

    def export_holidays_json(
        self, holidays: List[Holiday], output_path: Optional[str] = None
    ) -> str:
        """Export holidays list to JSON file."""
        file_path = self._resolve_path(output_path, "holidays", "json")

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump([holiday_to_dict(h) for h in holidays], f, indent=2, ensure_ascii=False)

        return str(file_path)

    def export_balances_csv(
        self,
        balances: List[VacationBalance],
        output_path: Optional[str] = None,
        clamp: bool = False,
    ) -> str:
        """
        Export vacation balances to CSV file.

        Args:
            balances: Balances to export.
            output_path: Optional specific output path.
            clamp: Write negative remaining days as 0.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(output_path, "balances", "csv")

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow([
                "Employee ID",
                "Employee Name",
                "Year",
                "Region",
                "Allowance Days",
                "Used Days",
                "Remaining Days",
            ])
            for balance in balances:
                writer.writerow([
                    balance.employee_id,
                    balance.employee_name or "",
                    balance.year,
                    balance.region_code,
                    balance.allowance_days,
                    balance.used_days,
                    balance.display_remaining_days if clamp else balance.remaining_days,
                ])

        return str(file_path)

    def export_balances_json(
        self, balances: List[VacationBalance], output_path: Optional[str] = None
    ) -> str:
        """Export vacation balances to JSON file."""
        file_path = self._resolve_path(output_path, "balances", "json")

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(
                [b.model_dump(mode="json") for b in balances], f, indent=2, ensure_ascii=False
            )

        return str(file_path)
