"""Command-line argument parsing for monthcal.

This module handles all command-line argument parsing functionality,
including setup of argument groups and integer value validation.
"""

import argparse
from pathlib import Path

from monthcal import __version__
from monthcal.utils.exceptions import InvalidArgumentError
from monthcal.utils.logging import LOG_LEVEL_NAMES


def _parse_int(value: str, name: str) -> int:
    try:
        return int(value.strip())
    except ValueError as err:
        raise InvalidArgumentError(f"Invalid {name}: '{value}'. Expected an integer") from err


def parse_year(value: str) -> int:
    """Parse the ``--year`` argument.

    Only the integer form is checked here; whether the year is representable
    is decided by the renderer.

    Raises:
        InvalidArgumentError: If ``value`` is not an integer

    Example:
        >>> parse_year("2024")
        2024
    """
    return _parse_int(value, "year")


def parse_month(value: str) -> int:
    """Parse the ``--month`` argument.

    Raises:
        InvalidArgumentError: If ``value`` is not an integer
    """
    return _parse_int(value, "month")


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser for calendar, report and
            logging options

    Example:
        >>> parser = create_parser()
        >>> args = parser.parse_args(["-y2009", "-m10"])
        >>> (args.year, args.month)
        (2009, 10)
    """
    parser = argparse.ArgumentParser(
        prog="monthcal",
        description="monthcal - show a bordered plain-text calendar for a month",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                    # Show a calendar for the current month
  %(prog)s -y2009 -m10        # Show October 2009
  %(prog)s --year 2024 --month 2
  %(prog)s --today-info       # Describe today instead of drawing a calendar
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show version information",
    )

    # Calendar selection arguments
    calendar_group = parser.add_argument_group("calendar", "Month selection and display options")

    calendar_group.add_argument(
        "--year",
        "-y",
        type=parse_year,
        default=None,
        metavar="YEAR",
        help="Year to show (default: current year)",
    )

    calendar_group.add_argument(
        "--month",
        "-m",
        type=parse_month,
        default=None,
        metavar="MONTH",
        help="Month to show, 1-12 (default: current month)",
    )

    calendar_group.add_argument(
        "--no-highlight",
        action="store_true",
        help="Do not mark today's date in the grid",
    )

    calendar_group.add_argument(
        "--today-info",
        action="store_true",
        help="Print day of week, day of year and month facts for today instead of a calendar",
    )

    # Logging arguments
    logging_group = parser.add_argument_group("logging", "Logging configuration options")

    logging_group.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging on stderr"
    )

    logging_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only show errors on console (sets console level to ERROR)",
    )

    logging_group.add_argument(
        "--log-level",
        choices=LOG_LEVEL_NAMES,
        help="Set both console and file log levels",
    )

    logging_group.add_argument(
        "--log-dir", type=Path, help="Write log files to this directory (enables file logging)"
    )

    logging_group.add_argument(
        "--no-file-logging", action="store_true", help="Disable file logging completely"
    )

    logging_group.add_argument(
        "--no-log-colors", action="store_true", help="Disable colored console output"
    )

    return parser


__all__ = [
    "create_parser",
    "parse_month",
    "parse_year",
]
