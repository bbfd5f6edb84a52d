"""
Configuration manager for loading and validating settings.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from vacation_calculator.data.schemas import Config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading from YAML files and environment variables."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the config manager.

        Args:
            config_path: Optional path to config file. If not provided, uses default.
        """
        self.config_path = config_path or self._get_default_config_path()

    def _get_default_config_path(self) -> str:
        """Get the default configuration file path."""
        package_dir = Path(__file__).parent.parent
        return str(package_dir / "config" / "settings.yaml")

    def load_config(self) -> Config:
        """
        Load configuration from YAML file with environment variable overrides.

        Returns:
            Config: Validated configuration object.

        Raises:
            ValueError: If config is invalid.
        """
        # 1. Load from YAML file
        config_dict = self._load_yaml()

        # 2. Apply environment variable overrides
        config_dict = self._apply_env_overrides(config_dict)

        # 3. Validate and create Config object
        try:
            return Config(**config_dict)
        except Exception as e:
            raise ValueError(f"Invalid configuration: {e}")

    def _load_yaml(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        config_path = Path(self.config_path)

        if not config_path.exists():
            logger.debug("Config file not found: %s, using defaults", config_path)
            return {}

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
                logger.debug("Loaded config from: %s", config_path)
                return self._flatten_config(config) if config else {}
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML config file: {e}")

    def _flatten_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Flatten nested YAML config to match Config model fields.

        Args:
            config: Nested configuration dictionary.

        Returns:
            Flattened configuration dictionary.
        """
        result = {}

        # Handle region section
        if "region" in config:
            reg = config["region"]
            if "default" in reg:
                result["default_region"] = reg["default"]

        # Handle vacation section
        if "vacation" in config:
            vac = config["vacation"]
            if "default_allowance_days" in vac:
                result["default_allowance_days"] = vac["default_allowance_days"]
            if "clamp_remaining" in vac:
                result["clamp_remaining"] = vac["clamp_remaining"]
            if "cache_holidays" in vac:
                result["cache_holidays"] = vac["cache_holidays"]

        # Handle output section
        if "output" in config:
            out = config["output"]
            if "format" in out:
                result["output_format"] = out["format"]
            if "directory" in out:
                result["output_directory"] = out["directory"]

        # Handle API section
        if "api" in config:
            api = config["api"]
            if "host" in api:
                result["api_host"] = api["host"]
            if "port" in api:
                result["api_port"] = api["port"]

        return result

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Environment variables:
        - VACATION_DEFAULT_REGION -> default_region
        - VACATION_DEFAULT_ALLOWANCE -> default_allowance_days
        - VACATION_CLAMP_REMAINING -> clamp_remaining
        - VACATION_CACHE_HOLIDAYS -> cache_holidays
        - VACATION_OUTPUT_FORMAT -> output_format
        - VACATION_OUTPUT_DIRECTORY -> output_directory
        - VACATION_API_HOST -> api_host
        - VACATION_API_PORT -> api_port

        Args:
            config_dict: Configuration dictionary from YAML.

        Returns:
            Updated configuration dictionary.
        """
        env_mappings = {
            "VACATION_DEFAULT_REGION": "default_region",
            "VACATION_DEFAULT_ALLOWANCE": ("default_allowance_days", float),
            "VACATION_CLAMP_REMAINING": ("clamp_remaining", self._parse_bool),
            "VACATION_CACHE_HOLIDAYS": ("cache_holidays", self._parse_bool),
            "VACATION_OUTPUT_FORMAT": "output_format",
            "VACATION_OUTPUT_DIRECTORY": "output_directory",
            "VACATION_API_HOST": "api_host",
            "VACATION_API_PORT": ("api_port", int),
        }

        for env_var, mapping in env_mappings.items():
            env_value = os.environ.get(env_var)
            if env_value is not None:
                if isinstance(mapping, tuple):
                    config_key, type_converter = mapping
                    try:
                        config_dict[config_key] = type_converter(env_value)
                    except ValueError:
                        logger.warning("Ignoring invalid value for %s: %s", env_var, env_value)
                else:
                    config_dict[mapping] = env_value

        return config_dict

    def _parse_bool(self, value: str) -> bool:
        """Parse a boolean from string."""
        return value.lower() in ("true", "1", "yes", "on")

    def save_config(self, config: Config, output_path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration object to save.
            output_path: Optional output path. If not provided, uses default.
        """
        output_path = output_path or self.config_path

        config_dict = {
            "region": {
                "default": config.default_region,
            },
            "vacation": {
                "default_allowance_days": config.default_allowance_days,
                "clamp_remaining": config.clamp_remaining,
                "cache_holidays": config.cache_holidays,
            },
            "output": {
                "format": config.output_format,
                "directory": config.output_directory,
            },
            "api": {
                "host": config.api_host,
                "port": config.api_port,
            },
        }

        # Ensure directory exists
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
