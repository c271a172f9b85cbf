"""Date arithmetic helpers used by the calendar renderer.

Weekday indexes are Sunday-first: 0=Sunday .. 6=Saturday.
"""

import calendar
from dataclasses import dataclass
from datetime import date, timedelta

from .exceptions import InvalidDateError


@dataclass(frozen=True)
class DayInfo:
    """Summary of a single day and the month it falls in."""

    day: date
    weekday: int
    day_of_year: int
    days_in_month: int
    first_weekday_name: str


def get_today() -> date:
    """Return the current local date from the host clock."""
    return date.today()


def _first_of_month(year: int, month: int) -> date:
    try:
        return date(year, month, 1)
    except (TypeError, ValueError) as e:
        raise InvalidDateError(
            f"Invalid date: year={year}, month={month} ({e})", year=year, month=month
        ) from e


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in ``month`` of ``year``.

    Raises:
        InvalidDateError: If month is outside 1-12 or year is out of range
    """
    first = _first_of_month(year, month)
    if month == 12:
        return 31
    return (date(year, month + 1, 1) - first).days


def weekday_of(year: int, month: int, day: int) -> int:
    """Return the Sunday-first weekday index of the given date."""
    try:
        return date(year, month, day).isoweekday() % 7
    except (TypeError, ValueError) as e:
        raise InvalidDateError(
            f"Invalid date: year={year}, month={month}, day={day} ({e})",
            year=year,
            month=month,
        ) from e


def first_weekday(month: int, year: int) -> int:
    """Return the Sunday-first weekday index of day 1 of the month."""
    return weekday_of(year, month, 1)


def weekday_name(weekday: int) -> str:
    """Return the host's full weekday name for a Sunday-first index."""
    return calendar.day_name[(weekday + 6) % 7]


def month_name(month: int) -> str:
    """Return the host's full month name for ``month``.

    Raises:
        InvalidDateError: If month is outside 1-12
    """
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Invalid month: {month}", month=month)
    return calendar.month_name[month]


def day_info(day: date) -> DayInfo:
    """Collect weekday, day-of-year and month facts for ``day``."""
    start_of_year = date(day.year, 1, 1)
    return DayInfo(
        day=day,
        weekday=weekday_of(day.year, day.month, day.day),
        day_of_year=(day - start_of_year + timedelta(days=1)).days,
        days_in_month=days_in_month(day.month, day.year),
        first_weekday_name=weekday_name(first_weekday(day.month, day.year)),
    )
