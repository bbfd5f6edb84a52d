"""
Tests for configuration loading and dataset loading.
"""

import json
import logging

import pytest
import yaml

from vacation_calculator.config.manager import ConfigManager
from vacation_calculator.data.loader import DataLoader
from vacation_calculator.exceptions import DatasetError, VacationCalculatorError

ENV_VARS = [
    "VACATION_DEFAULT_REGION",
    "VACATION_DEFAULT_ALLOWANCE",
    "VACATION_CLAMP_REMAINING",
    "VACATION_CACHE_HOLIDAYS",
    "VACATION_OUTPUT_FORMAT",
    "VACATION_OUTPUT_DIRECTORY",
    "VACATION_API_HOST",
    "VACATION_API_PORT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure no VACATION_* variables leak into the tests."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def config_file(tmp_path):
    """Write a settings file and return its path."""
    path = tmp_path / "settings.yaml"
    path.write_text(
        yaml.safe_dump({
            "region": {"default": "BY"},
            "vacation": {"default_allowance_days": 28, "clamp_remaining": True},
            "output": {"directory": str(tmp_path / "out")},
            "api": {"port": 9000},
        }),
        encoding="utf-8",
    )
    return path


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_default_settings(self):
        config = ConfigManager().load_config()

        assert config.default_region == "DE"
        assert config.default_allowance_days == 30
        assert config.clamp_remaining is False
        assert config.cache_holidays is True
        assert config.api_port == 8000

    def test_yaml_file(self, config_file, tmp_path):
        config = ConfigManager(str(config_file)).load_config()

        assert config.default_region == "BY"
        assert config.default_allowance_days == 28
        assert config.clamp_remaining is True
        assert config.output_directory == str(tmp_path / "out")
        assert config.api_port == 9000
        assert config.api_host == "0.0.0.0"

    def test_missing_file_uses_defaults(self, tmp_path):
        config = ConfigManager(str(tmp_path / "missing.yaml")).load_config()

        assert config.default_region == "DE"

    def test_env_overrides(self, config_file, monkeypatch):
        monkeypatch.setenv("VACATION_DEFAULT_REGION", "HH")
        monkeypatch.setenv("VACATION_DEFAULT_ALLOWANCE", "24.5")
        monkeypatch.setenv("VACATION_CLAMP_REMAINING", "no")
        monkeypatch.setenv("VACATION_API_PORT", "8123")

        config = ConfigManager(str(config_file)).load_config()

        assert config.default_region == "HH"
        assert config.default_allowance_days == 24.5
        assert config.clamp_remaining is False
        assert config.api_port == 8123

    def test_invalid_env_value_ignored(self, config_file, monkeypatch):
        monkeypatch.setenv("VACATION_API_PORT", "not-a-port")

        config = ConfigManager(str(config_file)).load_config()

        assert config.api_port == 9000

    def test_invalid_env_value_logged(self, config_file, monkeypatch, caplog):
        monkeypatch.setenv("VACATION_API_PORT", "not-a-port")

        with caplog.at_level(logging.WARNING, logger="vacation_calculator.config.manager"):
            ConfigManager(str(config_file)).load_config()

        assert "Ignoring invalid value for VACATION_API_PORT: not-a-port" in caplog.text

    def test_unknown_region_rejected(self, monkeypatch):
        monkeypatch.setenv("VACATION_DEFAULT_REGION", "XX")

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager().load_config()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("region: [unclosed", encoding="utf-8")

        with pytest.raises(ValueError):
            ConfigManager(str(path)).load_config()

    def test_save_and_reload(self, config_file, tmp_path):
        manager = ConfigManager(str(config_file))
        config = manager.load_config()

        target = tmp_path / "nested" / "saved.yaml"
        manager.save_config(config, str(target))

        assert ConfigManager(str(target)).load_config() == config


@pytest.fixture
def dataset_dict():
    return {
        "employees": [
            {"id": 1, "name": "Anna Schmidt", "allowance_days": 30, "region_code": "HH"},
            {"id": "e2", "name": "Ben Wolf"},
            {"id": "e3", "allowance_days": 20, "active": False},
        ],
        "vacations": [
            {"id": "v1", "employee_id": 1, "start_date": "2025-03-10", "end_date": "2025-03-14"},
            {"employee_id": "e2", "start_date": "2025-07-07", "end_date": "2025-07-11"},
        ],
    }


class TestDataLoader:
    """Tests for DataLoader."""

    def test_load_json(self, tmp_path, dataset_dict):
        path = tmp_path / "team.json"
        path.write_text(json.dumps(dataset_dict), encoding="utf-8")

        dataset = DataLoader().load(str(path))

        assert [e.id for e in dataset.employees] == ["1", "e2", "e3"]
        assert dataset.vacations[0].employee_id == "1"
        assert dataset.get_employee("1").region_code == "HH"

    def test_load_yaml(self, tmp_path, dataset_dict):
        path = tmp_path / "team.yaml"
        path.write_text(yaml.safe_dump(dataset_dict), encoding="utf-8")

        dataset = DataLoader().load(str(path))

        assert len(dataset.employees) == 3
        assert len(dataset.vacations) == 2

    def test_defaults(self, dataset_dict):
        dataset = DataLoader(default_allowance_days=25).parse(dataset_dict)

        assert dataset.get_employee("e2").allowance_days == 25
        assert dataset.get_employee("e2").region_code == "DE"
        assert dataset.get_employee("e3").active is False
        assert dataset.vacations[1].id == "vac-2"
        assert dataset.get_employee("unknown") is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatasetError, match="not found"):
            DataLoader().load(str(tmp_path / "missing.json"))

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")

        with pytest.raises(DatasetError):
            DataLoader().load(str(path))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(DatasetError, match="Invalid JSON"):
            DataLoader().load(str(path))

    def test_invalid_vacation(self, tmp_path, dataset_dict):
        dataset_dict["vacations"][0]["end_date"] = "2025-03-01"
        path = tmp_path / "team.json"
        path.write_text(json.dumps(dataset_dict), encoding="utf-8")

        with pytest.raises(DatasetError) as exc_info:
            DataLoader().load(str(path))

        assert isinstance(exc_info.value, VacationCalculatorError)
        assert isinstance(exc_info.value, ValueError)
