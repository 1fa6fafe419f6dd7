"""Domain error codes for the week view module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_VIEW_DATE = "INVALID_VIEW_DATE"
    INVALID_WEEK_START = "INVALID_WEEK_START"
    INVALID_REQUEST = "INVALID_REQUEST"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidViewDateError(DomainError):
    """Raised when a view date cannot be parsed."""

    def __init__(self, view_date: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_VIEW_DATE,
            message="Invalid view date format",
        )
        self.view_date = view_date


class InvalidWeekStartError(DomainError):
    """Raised when the first weekday is outside Sunday..Saturday."""

    def __init__(self, week_starts_on: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_WEEK_START,
            message="Week start must be between 0 (Sunday) and 6 (Saturday)",
        )
        self.week_starts_on = week_starts_on
