"""Week view service - all business logic lives here.

Services:
- Depend only on the domain layer
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from collections.abc import Callable, Collection, Iterable
from datetime import UTC, date, datetime

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime
from loguru import logger

from weekview.domain import build_week_header, build_week_layout
from weekview.domain.calendar import SUNDAY, get_week_bounds
from weekview.domain.errors import InvalidViewDateError, InvalidWeekStartError
from weekview.domain.header import DEFAULT_WEEKEND_DAYS
from weekview.domain.models import CalendarEvent, WeekDay, WeekRow
from weekview.domain.value_objects import WeekendDays, WeekStart


class WeekViewService:
    """Service for week header and event layout operations."""

    def __init__(
        self,
        clock: Callable[[], datetime] = datetime.now,
        week_starts_on: int = SUNDAY,
        weekend_days: Collection[int] = DEFAULT_WEEKEND_DAYS,
    ) -> None:
        self._clock = clock
        self._week_starts_on = self._validate_week_start(week_starts_on)
        self._weekend_days = WeekendDays(frozenset(weekend_days)).days

    def get_header(
        self, view_date: str | date | datetime, week_starts_on: int | None = None
    ) -> list[WeekDay]:
        """Return the seven day headers of the week containing view_date.

        Raises:
            InvalidViewDateError: If view_date cannot be parsed.
            InvalidWeekStartError: If week_starts_on is not a weekday number.
        """
        view = self.parse_view_date(view_date)
        first = self._resolve_week_start(week_starts_on)
        days = build_week_header(
            view,
            week_starts_on=first,
            weekend_days=self._weekend_days,
            now=self._clock(),
        )
        logger.info(f"[WEEK_VIEW] Built header for week starting {days[0].date.date()}")
        return days

    def get_layout(
        self,
        view_date: str | date | datetime,
        events: Iterable[CalendarEvent],
        week_starts_on: int | None = None,
    ) -> list[WeekRow]:
        """Return the event rows of the week containing view_date.

        Raises:
            InvalidViewDateError: If view_date cannot be parsed.
            InvalidWeekStartError: If week_starts_on is not a weekday number.
        """
        view = self.parse_view_date(view_date)
        first = self._resolve_week_start(week_starts_on)
        events = list(events)
        rows = build_week_layout(view, events, week_starts_on=first)
        logger.info(
            f"[WEEK_VIEW] Laid out week starting {get_week_bounds(view, first).start.date()}: "
            f"events={len(events)}, placed={sum(len(r.row) for r in rows)}, rows={len(rows)}"
        )
        return rows

    @staticmethod
    def parse_view_date(view_date: str | date | datetime) -> date | datetime:
        """Accept a date, a datetime, or an ISO-8601 date / date-time string.

        Raises:
            InvalidViewDateError: If the value is not a recognised date.
        """
        if isinstance(view_date, (date, datetime)):
            return view_date
        if not isinstance(view_date, str):
            raise InvalidViewDateError(view_date)

        value = view_date.strip()
        try:
            parsed = parse_datetime(value) or parse_date(value)
        except ValueError:
            # well formatted but not a real date, e.g. 2016-02-30
            raise InvalidViewDateError(view_date) from None
        if parsed is None:
            raise InvalidViewDateError(view_date)
        if isinstance(parsed, datetime) and timezone.is_aware(parsed):
            # same conversion DRF applies to event datetimes when USE_TZ is off
            parsed = timezone.make_naive(parsed, UTC)
        return parsed

    def _resolve_week_start(self, week_starts_on: int | None) -> int:
        if week_starts_on is None:
            return self._week_starts_on
        return self._validate_week_start(week_starts_on)

    @staticmethod
    def _validate_week_start(week_starts_on: int) -> int:
        try:
            return WeekStart(week_starts_on).value
        except ValueError:
            raise InvalidWeekStartError(week_starts_on) from None
