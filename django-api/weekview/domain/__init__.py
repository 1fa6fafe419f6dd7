from weekview.domain.header import build_week_header
from weekview.domain.layout import build_week_layout
from weekview.domain.models import CalendarEvent, PositionedEvent, WeekDay, WeekRow
from weekview.domain.value_objects import Color, DayRange, WeekBounds, WeekendDays, WeekStart

__all__ = [
    "build_week_header",
    "build_week_layout",
    "CalendarEvent",
    "PositionedEvent",
    "WeekDay",
    "WeekRow",
    "Color",
    "DayRange",
    "WeekBounds",
    "WeekStart",
    "WeekendDays",
]
