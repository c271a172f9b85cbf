"""Command-line overrides for monthcal settings."""

from typing import Any

from monthcal.config.settings import MonthCalSettings


def apply_cli_overrides(settings: MonthCalSettings, args: Any) -> MonthCalSettings:
    """Apply display-related command-line overrides to settings.

    Args:
        settings: Current settings object, modified in place
        args: Parsed command-line arguments

    Returns:
        The updated settings object
    """
    if getattr(args, "no_highlight", False):
        settings.highlight_today = False

    return settings


__all__ = [
    "apply_cli_overrides",
]
