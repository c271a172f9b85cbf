"""monthcal exceptions for error handling."""

import argparse
from typing import Optional


class MonthCalError(Exception):
    """Base exception for all monthcal errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidDateError(MonthCalError):
    """Exception raised when a year/month cannot be resolved to a real date."""

    def __init__(
        self, message: str, year: Optional[int] = None, month: Optional[int] = None
    ) -> None:
        """Initialize InvalidDateError.

        Args:
            message: Error message
            year: Year that was requested, if known
            month: Month that was requested, if known
        """
        super().__init__(message)
        self.year = year
        self.month = month


class InvalidArgumentError(MonthCalError, argparse.ArgumentTypeError):
    """Exception raised when a command-line value cannot be parsed as an integer.

    Subclasses ``argparse.ArgumentTypeError`` so argparse reports it as a
    normal usage error.
    """


class ConfigurationError(MonthCalError):
    """Exception raised for invalid configuration values."""
