"""CLI module for monthcal.

Parses arguments, applies configuration overrides, sets up logging and
prints either the month calendar or the day report for today.
"""

import sys
from datetime import date
from typing import List, Optional, Sequence

from monthcal.config.settings import get_settings
from monthcal.display.calendar_renderer import CalendarRenderer, CalendarRequest, TodayMarker
from monthcal.utils.dates import day_info, get_today
from monthcal.utils.exceptions import MonthCalError
from monthcal.utils.logging import apply_command_line_overrides, get_logger, setup_logging

from .config import apply_cli_overrides
from .parser import create_parser, parse_month, parse_year

logger = get_logger(__name__)


def format_day_info(today: date) -> List[str]:
    """Describe ``today`` the way the day report prints it.

    Returns:
        Report lines without trailing newlines
    """
    info = day_info(today)
    return [
        f"Today is {today.strftime('%A, %B %d, %Y')}",
        f"\tDay of the week: {info.weekday}",
        f"\tDay of the year: {info.day_of_year}",
        f"\tDays in this month: {info.days_in_month}",
        f"\tFirst day of the month: {info.first_weekday_name}",
    ]


def main_entry(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point with argument parsing.

    Args:
        argv: Arguments to parse; ``None`` uses ``sys.argv[1:]``

    Returns:
        Exit code (0 for success, 1 for failure). Usage errors and ``--help``
        exit through argparse.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        # Overrides apply to this run only, never to the shared instance
        settings = get_settings().model_copy(deep=True)
        settings = apply_command_line_overrides(settings, args)
        settings = apply_cli_overrides(settings, args)
        setup_logging(settings)

        # Captured once so the whole render sees the same date
        today = get_today()

        if args.today_info:
            output = format_day_info(today)
        else:
            request = CalendarRequest(
                year=args.year if args.year is not None else today.year,
                month=args.month if args.month is not None else today.month,
            )
            logger.verbose(f"Rendering calendar for {request.year}-{request.month}")
            renderer = CalendarRenderer(settings)
            output = renderer.build(request, TodayMarker.from_date(today))

    except MonthCalError as e:
        logger.debug(f"Aborting: {e.__class__.__name__}: {e}")
        print(f"monthcal: error: {e.message}", file=sys.stderr)
        return 1

    for line in output:
        print(line)
    return 0


__all__ = [
    "apply_cli_overrides",
    "create_parser",
    "format_day_info",
    "main_entry",
    "parse_month",
    "parse_year",
]
