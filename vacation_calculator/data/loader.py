"""
Loading of employee and vacation datasets from JSON or YAML files.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from vacation_calculator.data.schemas import VacationDataset
from vacation_calculator.exceptions import DatasetError

logger = logging.getLogger(__name__)


class DataLoader:
    """Loads employee/vacation datasets."""

    def __init__(self, default_allowance_days: float = 30):
        """
        Initialize the loader.

        Args:
            default_allowance_days: Allowance for employees that have none.
        """
        self.default_allowance_days = default_allowance_days

    def load(self, file_path: str) -> VacationDataset:
        """
        Load a dataset with ``employees`` and ``vacations`` lists.

        Args:
            file_path: Path to a .json, .yaml or .yml file.

        Returns:
            Validated VacationDataset.

        Raises:
            DatasetError: If the file is missing, unparsable or invalid.
        """
        path = Path(file_path)
        if not path.exists():
            raise DatasetError(f"Dataset file not found: {file_path}")

        raw = self._read(path)
        if not isinstance(raw, dict):
            raise DatasetError(f"Dataset must be a mapping with employees and vacations: {file_path}")

        try:
            dataset = self.parse(raw)
        except ValidationError as e:
            raise DatasetError(f"Invalid dataset {file_path}: {e}") from e

        logger.debug(
            "Loaded %d employees and %d vacations from %s",
            len(dataset.employees), len(dataset.vacations), file_path,
        )
        return dataset

    def parse(self, raw: Dict[str, Any]) -> VacationDataset:
        """Build a dataset from already decoded data."""
        employees = []
        for emp in raw.get("employees") or []:
            emp = dict(emp)
            if "id" in emp:
                emp["id"] = str(emp["id"])
            emp.setdefault("allowance_days", self.default_allowance_days)
            employees.append(emp)

        vacations = []
        for index, vac in enumerate(raw.get("vacations") or [], start=1):
            vac = dict(vac)
            vac["id"] = str(vac.get("id", f"vac-{index}"))
            if "employee_id" in vac:
                vac["employee_id"] = str(vac["employee_id"])
            vacations.append(vac)

        return VacationDataset(employees=employees, vacations=vacations)

    def _read(self, path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() == ".json":
                    return json.load(f)
                return yaml.safe_load(f)
        except json.JSONDecodeError as e:
            raise DatasetError(f"Invalid JSON in {path}: {e}") from e
        except yaml.YAMLError as e:
            raise DatasetError(f"Invalid YAML in {path}: {e}") from e
