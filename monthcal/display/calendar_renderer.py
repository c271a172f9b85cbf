"""Bordered plain-text month calendar renderer."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, List, Optional, Tuple

from ..utils.dates import days_in_month, first_weekday, month_name, weekday_name

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7
INTERIOR_WIDTH = 34
LINE_WIDTH = INTERIOR_WIDTH + 2

# Sunday-first two-letter weekday abbreviations
WEEKDAY_HEADERS: Tuple[str, ...] = tuple(weekday_name(i)[:2] for i in range(DAYS_PER_WEEK))

Week = Tuple[Optional[int], ...]


@dataclass(frozen=True)
class CalendarRequest:
    """Year and month to render."""

    year: int
    month: int

    @classmethod
    def for_today(cls, today: date) -> "CalendarRequest":
        return cls(year=today.year, month=today.month)


@dataclass(frozen=True)
class TodayMarker:
    """Date compared against each rendered cell to decide highlighting."""

    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, today: date) -> "TodayMarker":
        return cls(year=today.year, month=today.month, day=today.day)

    def matches(self, year: int, month: int, day: int) -> bool:
        return (self.year, self.month, self.day) == (year, month, day)


@dataclass(frozen=True)
class CalendarGrid:
    """Weeks of a month, each exactly seven cells; ``None`` marks an empty cell."""

    year: int
    month: int
    weeks: Tuple[Week, ...]

    @property
    def days(self) -> List[int]:
        """Day numbers in grid order, empty cells skipped."""
        return [cell for week in self.weeks for cell in week if cell is not None]


def build_grid(year: int, month: int) -> CalendarGrid:
    """Lay out the days of a month into Sunday-first weeks.

    Args:
        year: Calendar year
        month: Month number, 1-12

    Returns:
        CalendarGrid with leading and trailing empty cells padding each week to 7

    Raises:
        InvalidDateError: If the year/month cannot be represented
    """
    total_days = days_in_month(month, year)
    leading = first_weekday(month, year)

    cells: List[Optional[int]] = [None] * leading
    cells.extend(range(1, total_days + 1))
    trailing = -len(cells) % DAYS_PER_WEEK
    cells.extend([None] * trailing)

    weeks = tuple(
        tuple(cells[i : i + DAYS_PER_WEEK]) for i in range(0, len(cells), DAYS_PER_WEEK)
    )
    return CalendarGrid(year=year, month=month, weeks=weeks)


def _border_line() -> str:
    return "+" + "-" * INTERIOR_WIDTH + "+"


def _separator_line() -> str:
    return "+" + "----+" * DAYS_PER_WEEK


def _title_line(year: int, month: int) -> str:
    title = f"{month_name(month)},  {year}"
    padding = max(INTERIOR_WIDTH - len(title), 0)
    left = padding // 2
    # Odd remainders put the extra space on the right
    return "|" + " " * left + title + " " * (padding - left) + "|"


def _header_line() -> str:
    return "".join(f"| {name} " for name in WEEKDAY_HEADERS) + "|"


def _format_cell(day: Optional[int], is_today: bool) -> str:
    if day is None:
        return "|    "
    left, right = ("[", "]") if is_today else (" ", " ")
    return f"|{left}{day:>2}{right}"


def _week_line(
    grid: CalendarGrid, week: Week, today: Optional[TodayMarker], highlight_today: bool
) -> str:
    cells = []
    for day in week:
        is_today = (
            highlight_today
            and today is not None
            and day is not None
            and today.matches(grid.year, grid.month, day)
        )
        cells.append(_format_cell(day, is_today))
    return "".join(cells) + "|"


def build(
    year: int,
    month: int,
    today: Optional[TodayMarker] = None,
    highlight_today: bool = True,
) -> List[str]:
    """Render a month as a list of fixed-width text lines.

    Args:
        year: Calendar year
        month: Month number, 1-12
        today: Date to highlight; ``None`` disables highlighting
        highlight_today: When False, never mark ``today`` even if it is in the month

    Returns:
        Lines of the calendar, each LINE_WIDTH characters, without newlines

    Raises:
        InvalidDateError: If the year/month cannot be represented. Nothing is
            rendered in that case.
    """
    grid = build_grid(year, month)

    lines = [
        _border_line(),
        _title_line(year, month),
        _separator_line(),
        _header_line(),
        _separator_line(),
    ]
    for week in grid.weeks:
        lines.append(_week_line(grid, week, today, highlight_today))
        lines.append(_separator_line())

    logger.debug(f"Rendered {year}-{month:02d}: {len(grid.weeks)} weeks, {len(lines)} lines")
    return lines


class CalendarRenderer:
    """Renders month calendars using the configured highlight preference."""

    def __init__(self, settings: Optional[Any] = None) -> None:
        """Initialize calendar renderer.

        Args:
            settings: Application settings; only ``highlight_today`` is read
        """
        self.highlight_today = bool(getattr(settings, "highlight_today", True))
        logger.debug("Calendar renderer initialized")

    def build(self, request: CalendarRequest, today: Optional[TodayMarker] = None) -> List[str]:
        """Render ``request`` to lines."""
        return build(request.year, request.month, today, highlight_today=self.highlight_today)

    def render(self, request: CalendarRequest, today: Optional[TodayMarker] = None) -> str:
        """Render ``request`` to a single newline-joined string."""
        return "\n".join(self.build(request, today))
