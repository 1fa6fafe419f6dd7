"""Day headers of the displayed week."""

from collections.abc import Collection
from datetime import date, datetime

from weekview.domain.calendar import (
    SATURDAY,
    SUNDAY,
    as_datetime,
    get_week_bounds,
    start_of_day,
    weekday_index,
)
from weekview.domain.models import WeekDay

DEFAULT_WEEKEND_DAYS = (SUNDAY, SATURDAY)


def build_week_header(
    view_date: date | datetime,
    *,
    week_starts_on: int = SUNDAY,
    weekend_days: Collection[int] = DEFAULT_WEEKEND_DAYS,
    now: datetime | None = None,
) -> list[WeekDay]:
    """Return the seven days of the week containing `view_date`.

    Each day is classified against today's start of day. The clock is read
    once, and only when `now` is not given.
    """
    view = as_datetime(view_date)
    if now is None:
        now = datetime.now(view.tzinfo)
    elif view.tzinfo is not None and now.tzinfo is not None:
        now = now.astimezone(view.tzinfo)
    today = start_of_day(now)

    days = []
    for day in get_week_bounds(view, week_starts_on).days:
        days.append(
            WeekDay(
                date=day,
                is_past=day < today,
                is_today=day == today,
                is_future=day > today,
                is_weekend=weekday_index(day) in weekend_days,
            )
        )
    return days
