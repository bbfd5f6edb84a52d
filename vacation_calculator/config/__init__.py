"""
Configuration loading.
"""

from vacation_calculator.config.manager import ConfigManager

__all__ = ["ConfigManager"]
