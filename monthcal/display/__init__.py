"""Display package for calendar output."""

from .calendar_renderer import (
    CalendarGrid,
    CalendarRenderer,
    CalendarRequest,
    TodayMarker,
    build,
    build_grid,
)

__all__ = [
    "CalendarGrid",
    "CalendarRenderer",
    "CalendarRequest",
    "TodayMarker",
    "build",
    "build_grid",
]
