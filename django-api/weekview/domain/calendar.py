"""Day and week boundary arithmetic on the local clock.

Weekdays are numbered Sunday = 0 ... Saturday = 6.
"""

from datetime import date, datetime, time, timedelta

from weekview.domain.value_objects import DAYS_IN_WEEK, WeekBounds, WeekStart

SUNDAY = 0
SATURDAY = 6


def as_datetime(value: date | datetime) -> datetime:
    """Promote a bare date to midnight of that day."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def start_of_day(instant: datetime) -> datetime:
    return instant.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(instant: datetime) -> datetime:
    return instant.replace(hour=23, minute=59, second=59, microsecond=999999)


def weekday_index(instant: date) -> int:
    """Sunday-based weekday number of a date or datetime."""
    return (instant.weekday() + 1) % DAYS_IN_WEEK


def start_of_week(instant: datetime, week_starts_on: int = SUNDAY) -> datetime:
    """Most recent `week_starts_on` weekday at or before `instant`, at 00:00."""
    first = WeekStart(week_starts_on).value
    back = (weekday_index(instant) - first) % DAYS_IN_WEEK
    return start_of_day(instant) - timedelta(days=back)


def end_of_week(instant: datetime, week_starts_on: int = SUNDAY) -> datetime:
    return end_of_day(start_of_week(instant, week_starts_on) + timedelta(days=DAYS_IN_WEEK - 1))


def get_week_bounds(view_date: date | datetime, week_starts_on: int = SUNDAY) -> WeekBounds:
    instant = as_datetime(view_date)
    return WeekBounds(
        start=start_of_week(instant, week_starts_on),
        end=end_of_week(instant, week_starts_on),
    )


def day_index(bounds: WeekBounds, instant: datetime) -> int:
    """Whole calendar days between the week start and the day of `instant`."""
    return (instant.date() - bounds.start.date()).days
