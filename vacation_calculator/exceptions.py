"""
Exceptions raised by the vacation calculator.
"""


class VacationCalculatorError(Exception):
    """Base class for all vacation calculator errors."""


class InvalidRangeError(VacationCalculatorError, ValueError):
    """Raised when a range starts after it ends."""

    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(f"Start {start} must be before or equal to end {end}")


class DatasetError(VacationCalculatorError, ValueError):
    """Raised when an employee/vacation dataset file cannot be loaded."""
