"""Configuration package for monthcal."""

from .settings import LoggingSettings, MonthCalSettings, get_settings, reset_settings

__all__ = [
    "LoggingSettings",
    "MonthCalSettings",
    "get_settings",
    "reset_settings",
]
