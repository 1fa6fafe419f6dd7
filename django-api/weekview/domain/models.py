"""Domain models for the week grid.

These are pure domain objects with no API input rules.
Request parsing lives in weekview/handlers/serializers.py.
"""

from dataclasses import dataclass, field
from datetime import datetime

from weekview.domain.value_objects import Color, DayRange


@dataclass(frozen=True)
class CalendarEvent:
    """Domain representation of an event supplied by the caller."""

    start: datetime
    end: datetime | None = None
    title: str = ""
    color: Color = field(default_factory=Color.blank)
    all_day: bool = False
    id: str | int | None = None

    @property
    def effective_end(self) -> datetime:
        """End instant, or the start for zero-duration events."""
        return self.end if self.end is not None else self.start

    @property
    def is_inverted(self) -> bool:
        return self.effective_end < self.start


@dataclass(frozen=True)
class WeekDay:
    """One column header of the displayed week."""

    date: datetime
    is_past: bool
    is_today: bool
    is_future: bool
    is_weekend: bool


@dataclass(frozen=True)
class PositionedEvent:
    """An event placed in the week grid.

    `event` is the caller's object itself, never a copy.
    """

    event: CalendarEvent
    offset: int
    span: int
    extends_left: bool
    extends_right: bool

    @property
    def day_range(self) -> DayRange:
        return DayRange(offset=self.offset, span=self.span)


@dataclass(frozen=True)
class WeekRow:
    """A horizontal track of non-overlapping events, in placement order."""

    row: tuple[PositionedEvent, ...] = ()
