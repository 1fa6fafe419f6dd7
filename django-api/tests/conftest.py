"""Pytest configuration and shared fixtures."""

from datetime import datetime

import pytest
from rest_framework.test import APIClient

from weekview.domain import CalendarEvent, Color


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def now() -> datetime:
    """Fixed clock: Tuesday 2016-06-28 at midnight."""
    return datetime(2016, 6, 28)


@pytest.fixture
def view_date() -> datetime:
    """A date inside the week Sun 2016-06-26 .. Sat 2016-07-02."""
    return datetime(2016, 6, 27)


@pytest.fixture
def make_event():
    def _make_event(start: datetime, end: datetime | None = None, title: str = "", **kwargs) -> CalendarEvent:
        return CalendarEvent(start=start, end=end, title=title, color=Color(primary="", secondary=""), **kwargs)

    return _make_event
