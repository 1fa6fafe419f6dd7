"""Row layout of events in the week grid.

Events overlapping the displayed week are clamped to it, turned into
column geometry, and packed first-fit into the fewest rows such that no two
events in a row share a day column.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime

from loguru import logger

from weekview.domain.calendar import SUNDAY, day_index, get_week_bounds
from weekview.domain.models import CalendarEvent, PositionedEvent, WeekRow
from weekview.domain.value_objects import DayRange, WeekBounds


def event_interval(event: CalendarEvent) -> tuple[datetime, datetime]:
    """Return the (start, end) of an event, swapping an inverted pair."""
    start, end = event.start, event.effective_end
    if end < start:
        return end, start
    return start, end


def get_events_in_week(events: Iterable[CalendarEvent], bounds: WeekBounds) -> list[CalendarEvent]:
    """Events whose interval meets the week, inclusive at both ends, in input order."""
    retained = []
    for event in events:
        if event.is_inverted:
            logger.warning(
                f"[WEEK_VIEW] Event {event.id if event.id is not None else event.title!r} ends before it starts, laying out {event.end} to {event.start}"
            )
        start, end = event_interval(event)
        if start <= bounds.end and end >= bounds.start:
            retained.append(event)
    return retained


def position_event(event: CalendarEvent, bounds: WeekBounds) -> PositionedEvent:
    """Clamp an event that meets the week and compute its grid geometry."""
    start, end = event_interval(event)
    clamped_start = max(start, bounds.start)
    clamped_end = min(end, bounds.end)

    offset = day_index(bounds, clamped_start)
    span = day_index(bounds, clamped_end) - offset + 1
    day_range = DayRange(offset=offset, span=span)

    return PositionedEvent(
        event=event,
        offset=day_range.offset,
        span=day_range.span,
        extends_left=start < bounds.start,
        extends_right=end > bounds.end,
    )


@dataclass
class _Track:
    """Row under construction."""

    ranges: list[DayRange] = field(default_factory=list)
    placed: list[PositionedEvent] = field(default_factory=list)

    def admits(self, day_range: DayRange) -> bool:
        return not any(day_range.overlaps(taken) for taken in self.ranges)

    def place(self, positioned: PositionedEvent) -> None:
        self.ranges.append(positioned.day_range)
        self.placed.append(positioned)


def pack_rows(positioned: Iterable[PositionedEvent]) -> list[WeekRow]:
    """Assign each event, in the given order, to the first row it fits in."""
    tracks: list[_Track] = []
    for item in positioned:
        day_range = item.day_range
        for track in tracks:
            if track.admits(day_range):
                track.place(item)
                break
        else:
            track = _Track()
            track.place(item)
            tracks.append(track)
    return [WeekRow(row=tuple(track.placed)) for track in tracks]


def build_week_layout(
    view_date: date | datetime,
    events: Iterable[CalendarEvent],
    *,
    week_starts_on: int = SUNDAY,
) -> list[WeekRow]:
    """Lay out `events` in rows for the week containing `view_date`.

    Events are sorted by their actual start (ties keep input order) before
    packing, so the output is deterministic for a given input sequence.
    """
    bounds = get_week_bounds(view_date, week_starts_on)
    retained = get_events_in_week(events, bounds)
    retained.sort(key=lambda event: event_interval(event)[0])

    rows = pack_rows(position_event(event, bounds) for event in retained)
    logger.debug(
        f"[WEEK_VIEW] Packed {len(retained)} events into {len(rows)} rows for week {bounds.start.date()}"
    )
    return rows
