"""Boundary guards for merchandise calendar inputs."""

from __future__ import annotations

from retail.exceptions import (
    InvalidDateRangeError,
    InvalidMerchWeekError,
    InvalidPeriodError,
    InvalidQuarterError,
    MerchCalendarError,
)

MIN_WEEK, MAX_WEEK = 0, 53
MIN_PERIOD, MAX_PERIOD = 1, 12
# Quarter 5 is the 53rd-week pseudo-quarter of long years.
MIN_QUARTER, MAX_QUARTER = 1, 5


def _require_in_range(value: int, low: int, high: int, error: type[MerchCalendarError]) -> int:
    if value < low or value > high:
        raise error(value)
    return value


def validate_date_range(date_range) -> None:
    start, end = date_range
    if start > end:
        raise InvalidDateRangeError(date_range)


def validate_week(week: int) -> int:
    return _require_in_range(week, MIN_WEEK, MAX_WEEK, InvalidMerchWeekError)


def validate_period(period: int) -> int:
    return _require_in_range(period, MIN_PERIOD, MAX_PERIOD, InvalidPeriodError)


def validate_quarter(quarter: int) -> int:
    return _require_in_range(quarter, MIN_QUARTER, MAX_QUARTER, InvalidQuarterError)
