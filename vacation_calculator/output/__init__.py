"""
Output formatting and export functionality.
"""

from vacation_calculator.output.formatter import ConsoleFormatter
from vacation_calculator.output.exporter import ResultExporter, holiday_to_dict

__all__ = ["ConsoleFormatter", "ResultExporter", "holiday_to_dict"]
