"""
Merchandise calendar errors.

Every failure carries the offending value on ``.value`` so callers can
branch on the error kind and still report what was wrong.
"""

from __future__ import annotations

from datetime import date
from typing import Any


class MerchCalendarError(ValueError):
    """Base class for all merchandise calendar failures."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class InvalidDateRangeError(MerchCalendarError):
    """Raised when a date range starts after it ends."""

    def __init__(self, date_range: Any):
        start, end = date_range
        super().__init__(
            f"Invalid date range: start date {start} is after end date {end}",
            value=date_range,
        )


class InvalidMerchWeekError(MerchCalendarError):
    """Raised when a merch week is outside 0-53."""

    def __init__(self, week: int):
        super().__init__(f"Invalid merch week: {week} (must be between 0 and 53)", value=week)


class InvalidPeriodError(MerchCalendarError):
    """Raised when a merch period is outside 1-12."""

    def __init__(self, period: int):
        super().__init__(f"Invalid period: {period} (must be between 1 and 12)", value=period)


class InvalidQuarterError(MerchCalendarError):
    """Raised when a merch quarter is outside 1-5, or quarter 5 is asked of a 52-week year."""

    def __init__(self, quarter: int, reason: str | None = None):
        message = f"Invalid quarter: {quarter} (must be between 1 and 5)"
        if reason:
            message = f"Invalid quarter: {quarter} ({reason})"
        super().__init__(message, value=quarter)


class NoMatchingWeekdayError(MerchCalendarError):
    """Raised when a week range holds no day on the requested weekday."""

    def __init__(self, day: date, date_range: Any):
        start, end = date_range
        super().__init__(
            f"No date between {start} and {end} falls on {day.strftime('%A')} ({day})",
            value=day,
        )
        self.date_range = date_range
