"""Utility functions and helpers package."""

from .dates import days_in_month, first_weekday, get_today, weekday_of
from .exceptions import ConfigurationError, InvalidArgumentError, InvalidDateError, MonthCalError
from .logging import setup_logging

__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
    "InvalidDateError",
    "MonthCalError",
    "days_in_month",
    "first_weekday",
    "get_today",
    "setup_logging",
    "weekday_of",
]
