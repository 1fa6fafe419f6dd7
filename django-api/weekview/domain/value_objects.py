"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterator, Self

DAYS_IN_WEEK = 7


@dataclass(frozen=True)
class Color:
    """Primary/secondary style tokens of an event."""

    primary: str
    secondary: str

    @classmethod
    def blank(cls) -> Self:
        return cls(primary="", secondary="")


@dataclass(frozen=True)
class WeekStart:
    """First weekday of a displayed week, Sunday = 0 ... Saturday = 6."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Week start must be an integer weekday")
        if not 0 <= self.value < DAYS_IN_WEEK:
            raise ValueError("Week start must be between 0 (Sunday) and 6 (Saturday)")


@dataclass(frozen=True)
class WeekendDays:
    """Weekday numbers rendered as weekend columns."""

    days: frozenset[int]

    def __post_init__(self) -> None:
        for day in self.days:
            if isinstance(day, bool) or not isinstance(day, int) or not 0 <= day < DAYS_IN_WEEK:
                raise ValueError("Weekend days must be between 0 (Sunday) and 6 (Saturday)")


@dataclass(frozen=True)
class WeekBounds:
    """Inclusive instants delimiting a displayed week."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("Week end cannot precede week start")

    @property
    def days(self) -> Iterator[datetime]:
        """Start of day of each displayed day, in order."""
        for i in range(DAYS_IN_WEEK):
            yield self.start + timedelta(days=i)


@dataclass(frozen=True)
class DayRange:
    """Columns occupied by an event within the week grid."""

    offset: int
    span: int

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError("Offset cannot be negative")
        if self.span < 1:
            raise ValueError("Span must cover at least one day")
        if self.offset + self.span > DAYS_IN_WEEK:
            raise ValueError("Day range cannot extend past the end of the week")

    @property
    def last(self) -> int:
        return self.offset + self.span - 1

    def overlaps(self, other: "DayRange") -> bool:
        return not (self.last < other.offset or other.last < self.offset)
