"""Unit tests for domain primitives and week boundary arithmetic.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from weekview.domain import (
    CalendarEvent,
    Color,
    DayRange,
    WeekBounds,
    WeekendDays,
    WeekStart,
    build_week_header,
    build_week_layout,
)
from weekview.domain.calendar import (
    day_index,
    end_of_day,
    end_of_week,
    get_week_bounds,
    start_of_day,
    start_of_week,
    weekday_index,
)


class TestDayRange:
    """Tests for DayRange value object."""

    def test_accepts_full_week(self):
        """A range can cover all seven columns."""
        day_range = DayRange(offset=0, span=7)
        assert day_range.last == 6

    def test_rejects_negative_offset(self):
        """DayRange raises ValueError for a negative offset."""
        with pytest.raises(ValueError):
            DayRange(offset=-1, span=2)

    def test_rejects_empty_span(self):
        """DayRange raises ValueError for a span below one day."""
        with pytest.raises(ValueError):
            DayRange(offset=3, span=0)

    def test_rejects_range_past_week_end(self):
        """DayRange raises ValueError when offset + span exceeds 7."""
        with pytest.raises(ValueError):
            DayRange(offset=5, span=3)

    def test_touching_ranges_overlap(self):
        """Ranges sharing a column overlap."""
        assert DayRange(offset=1, span=3).overlaps(DayRange(offset=3, span=1))
        assert DayRange(offset=3, span=1).overlaps(DayRange(offset=1, span=3))

    def test_adjacent_ranges_are_disjoint(self):
        """Ranges in neighbouring columns do not overlap."""
        assert not DayRange(offset=0, span=2).overlaps(DayRange(offset=2, span=5))


class TestWeekStart:
    """Tests for WeekStart value object."""

    @pytest.mark.parametrize("value", [0, 1, 6])
    def test_accepts_weekday_numbers(self, value):
        """WeekStart accepts Sunday (0) through Saturday (6)."""
        assert WeekStart(value).value == value

    @pytest.mark.parametrize("value", [-1, 7, True, "1"])
    def test_rejects_other_values(self, value):
        """WeekStart raises ValueError outside 0..6 or for non-integers."""
        with pytest.raises(ValueError):
            WeekStart(value)


class TestWeekBounds:
    """Tests for WeekBounds value object."""

    def test_rejects_end_before_start(self):
        """WeekBounds raises ValueError when end precedes start."""
        with pytest.raises(ValueError):
            WeekBounds(start=datetime(2016, 7, 2), end=datetime(2016, 6, 26))

    def test_days_are_consecutive(self):
        """days yields the seven start-of-day instants of the week."""
        bounds = get_week_bounds(datetime(2016, 6, 28))
        assert list(bounds.days) == [datetime(2016, 6, 26) + timedelta(days=i) for i in range(7)]

    def test_end_is_last_microsecond_of_the_week(self):
        """The week ends on the last microsecond of its seventh day."""
        bounds = get_week_bounds(datetime(2016, 6, 28))
        assert bounds.end + timedelta(microseconds=1) == datetime(2016, 7, 3)


class TestWeekendDays:
    """Tests for WeekendDays value object."""

    def test_accepts_weekday_numbers(self):
        """WeekendDays accepts any set of weekdays, including none."""
        assert WeekendDays(frozenset({0, 6})).days == {0, 6}
        assert WeekendDays(frozenset()).days == frozenset()

    @pytest.mark.parametrize("days", [{7}, {0, 8}, {-1}, {"6"}])
    def test_rejects_other_values(self, days):
        """WeekendDays raises ValueError for anything outside 0..6."""
        with pytest.raises(ValueError):
            WeekendDays(frozenset(days))


class TestCalendarEvent:
    """Tests for CalendarEvent domain model."""

    def test_effective_end_defaults_to_start(self):
        """An event without an end has zero duration."""
        event = CalendarEvent(start=datetime(2016, 6, 27, 9))
        assert event.effective_end == event.start
        assert not event.is_inverted

    def test_inverted_event(self):
        """An end before the start is reported as inverted."""
        event = CalendarEvent(start=datetime(2016, 6, 24), end=datetime(2016, 5, 25))
        assert event.is_inverted

    def test_default_color_is_blank(self):
        """Color defaults to empty style tokens."""
        assert CalendarEvent(start=datetime(2016, 6, 27)).color == Color(primary="", secondary="")


class TestWeekArithmetic:
    """Tests for day and week boundaries."""

    def test_start_and_end_of_day(self):
        """Day boundaries truncate the time of day."""
        instant = datetime(2016, 6, 28, 13, 45, 12, 500)
        assert start_of_day(instant) == datetime(2016, 6, 28)
        assert end_of_day(instant) == datetime(2016, 6, 28, 23, 59, 59, 999999)

    def test_weekday_index_is_sunday_based(self):
        """Sunday is 0 and Saturday is 6."""
        assert weekday_index(date(2016, 6, 26)) == 0
        assert weekday_index(date(2016, 6, 28)) == 2
        assert weekday_index(date(2016, 7, 2)) == 6

    @pytest.mark.parametrize(
        "instant",
        [
            datetime(2016, 6, 26),
            datetime(2016, 6, 28, 12, 30),
            datetime(2016, 7, 2, 23, 59, 59, 999999),
        ],
    )
    def test_week_is_independent_of_time_of_day(self, instant):
        """Every instant of the week maps to the same boundaries."""
        assert start_of_week(instant) == datetime(2016, 6, 26)
        assert end_of_week(instant) == datetime(2016, 7, 2, 23, 59, 59, 999999)

    def test_week_starting_monday(self):
        """With Monday first, a Sunday belongs to the week that began six days earlier."""
        assert start_of_week(datetime(2016, 6, 26, 10), week_starts_on=1) == datetime(2016, 6, 20)
        assert end_of_week(datetime(2016, 6, 27), week_starts_on=1) == datetime(2016, 7, 3, 23, 59, 59, 999999)

    def test_week_bounds_accept_plain_date(self):
        """A bare date is treated as midnight of that day."""
        bounds = get_week_bounds(date(2016, 6, 28))
        assert bounds.start == datetime(2016, 6, 26)

    def test_week_bounds_keep_timezone(self):
        """Aware inputs produce aware boundaries on their own clock."""
        tz = timezone(timedelta(hours=-7))
        bounds = get_week_bounds(datetime(2016, 6, 28, 22, tzinfo=tz))
        assert bounds.start == datetime(2016, 6, 26, tzinfo=tz)
        assert bounds.start.tzinfo is tz

    def test_invalid_week_start_rejected(self):
        """Week arithmetic rejects a first weekday outside 0..6."""
        with pytest.raises(ValueError):
            start_of_week(datetime(2016, 6, 28), week_starts_on=7)

    def test_day_index_counts_calendar_days(self):
        """day_index ignores the time of day."""
        bounds = get_week_bounds(datetime(2016, 6, 28))
        assert day_index(bounds, datetime(2016, 6, 26, 23, 59)) == 0
        assert day_index(bounds, datetime(2016, 6, 27, 0, 1)) == 1
        assert day_index(bounds, bounds.end) == 6


class TestTimezoneAwareInput:
    """Aware instants are handled on their own local clock."""

    tz = timezone(timedelta(hours=9))

    def test_header_keeps_tzinfo(self):
        """Header days carry the view date's tzinfo and use an aware clock."""
        days = build_week_header(
            datetime(2016, 6, 28, 22, tzinfo=self.tz),
            now=datetime(2016, 6, 28, 23, 30, tzinfo=self.tz),
        )

        assert [day.date for day in days] == [datetime(2016, 6, 26, tzinfo=self.tz) + timedelta(days=i) for i in range(7)]
        assert all(day.date.tzinfo is self.tz for day in days)
        assert [day.is_today for day in days] == [False, False, True, False, False, False, False]
        assert days[1].is_past and days[3].is_future

    def test_header_today_on_the_view_date_clock(self):
        """An aware clock in another zone is classified on the view date's local day."""
        # 2016-06-28 23:30 UTC is already 2016-06-29 08:30 at +09:00
        days = build_week_header(
            datetime(2016, 6, 28, tzinfo=self.tz),
            now=datetime(2016, 6, 28, 23, 30, tzinfo=timezone.utc),
        )
        assert [day.is_today for day in days] == [False, False, False, True, False, False, False]

    def test_layout_with_aware_events(self):
        """Aware events are clamped against aware week bounds."""
        inside = CalendarEvent(start=datetime(2016, 6, 27, 9, tzinfo=self.tz), end=datetime(2016, 6, 29, tzinfo=self.tz))
        spilling = CalendarEvent(start=datetime(2016, 7, 2, 20, tzinfo=self.tz), end=datetime(2016, 7, 4, tzinfo=self.tz))
        before = CalendarEvent(start=datetime(2016, 6, 25, 23, 59, tzinfo=self.tz))

        rows = build_week_layout(datetime(2016, 6, 28, 22, tzinfo=self.tz), [spilling, before, inside])

        (row,) = rows
        assert [(p.event, p.offset, p.span, p.extends_left, p.extends_right) for p in row.row] == [
            (inside, 1, 3, False, False),
            (spilling, 6, 1, False, True),
        ]
