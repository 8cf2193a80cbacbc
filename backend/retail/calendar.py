"""
Retail Calendar: NRF 4-5-4 Merchandise Calendar Primitives.

Converts calendar dates to merchandise coordinates and back:
  - Fiscal year anchoring (52 or 53 weeks per year)
  - Date -> week, period, quarter, season, fiscal year
  - (week | period | quarter | season | year) -> DateRange

The 4-5-4 calendar:
  - Fiscal year starts on the Sunday nearest February 1
    (the day after the Saturday nearest January 31)
  - Each quarter has 3 periods: 4 weeks, 5 weeks, 4 weeks
  - Spring = periods 1-6, Fall = periods 7-12
  - 53-week years add the extra week to period 12
  - For comparisons, a 53-week year is "restated" by dropping its
    first week so it lines up with the following 52-week year
"""

from datetime import date, datetime, timedelta
from enum import Enum
from functools import lru_cache
from typing import NamedTuple

from retail.exceptions import InvalidQuarterError
from retail.validation import validate_period, validate_quarter, validate_week


class Season(str, Enum):
    """Merchandise season."""

    SPRING = "spring"  # periods 1-6
    FALL = "fall"  # periods 7-12

    @property
    def periods(self) -> range:
        start_period = 1 if self is Season.SPRING else 7
        return range(start_period, start_period + 6)


class DateRange(NamedTuple):
    start_date: date
    end_date: date  # inclusive


class FiscalPeriod(NamedTuple):
    fiscal_year: int
    fiscal_quarter: int  # 1-4
    fiscal_month: int  # 1-12
    fiscal_week: int  # 1-52 (or 53)


# 4-5-4 pattern: Period 1=4wk, Period 2=5wk, Period 3=4wk, repeat
# Cumulative weeks at the end of each period
CUMULATIVE_WEEKS = (0, 4, 9, 13, 17, 22, 26, 30, 35, 39, 43, 48, 52)

EXTRA_WEEK = 53


def as_date(value: date) -> date:
    """Drop the time component of a datetime; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


class RetailCalendar:
    """NRF 4-5-4 merchandise calendar primitives."""

    # ── Fiscal year anchoring ────────────────────────────────────────

    @staticmethod
    @lru_cache(maxsize=64)
    def fiscal_year_start(fiscal_year: int) -> date:
        """
        NRF 4-5-4: Fiscal year starts on the Sunday closest to February 1.

        Equivalent to the day after the Saturday closest to January 31,
        which is how retailers usually phrase the year end.
        """
        feb1 = date(fiscal_year, 2, 1)
        day_of_week = feb1.weekday()  # 0=Mon, 6=Sun
        if day_of_week == 6:
            return feb1  # Already Sunday
        days_since_sunday = (day_of_week + 1) % 7
        prev_sunday = feb1 - timedelta(days=days_since_sunday)
        next_sunday = prev_sunday + timedelta(days=7)
        # Seven is odd, so there is never a tie
        if (feb1 - prev_sunday).days < (next_sunday - feb1).days:
            return prev_sunday
        return next_sunday

    @staticmethod
    def fiscal_year_end(fiscal_year: int) -> date:
        """Last day (a Saturday) of the fiscal year."""
        return RetailCalendar.fiscal_year_start(fiscal_year + 1) - timedelta(days=1)

    @staticmethod
    def weeks_in_year(fiscal_year: int) -> int:
        """52, or 53 for long years."""
        start = RetailCalendar.fiscal_year_start(fiscal_year)
        next_start = RetailCalendar.fiscal_year_start(fiscal_year + 1)
        return (next_start - start).days // 7

    @staticmethod
    def is_53_week_year(fiscal_year: int) -> bool:
        return RetailCalendar.weeks_in_year(fiscal_year) == EXTRA_WEEK

    # ── Date -> merchandise coordinates ──────────────────────────────

    @staticmethod
    def get_year(dt: date) -> int:
        """Fiscal year a date belongs to. Late January can belong to the prior year."""
        dt = as_date(dt)
        if dt < RetailCalendar.fiscal_year_start(dt.year):
            return dt.year - 1
        return dt.year

    @staticmethod
    def get_week(dt: date) -> int:
        """Merch week (1-53), never restated."""
        dt = as_date(dt)
        fy_start = RetailCalendar.fiscal_year_start(RetailCalendar.get_year(dt))
        return (dt - fy_start).days // 7 + 1

    @staticmethod
    def get_period(dt: date) -> int:
        fiscal_week = RetailCalendar.get_week(dt)
        for period in range(1, 13):
            if fiscal_week <= CUMULATIVE_WEEKS[period]:
                return period
        return 12  # week 53 belongs to period 12

    @staticmethod
    def get_quarter(dt: date) -> int:
        return (RetailCalendar.get_period(dt) - 1) // 3 + 1

    @staticmethod
    def get_season(dt: date) -> Season:
        return Season.SPRING if RetailCalendar.get_period(dt) <= 6 else Season.FALL

    @staticmethod
    def get_fiscal_period(dt: date) -> FiscalPeriod:
        """
        Convert a calendar date to its full NRF 4-5-4 coordinate.

        Returns (fiscal_year, fiscal_quarter, fiscal_month, fiscal_week).
        """
        fiscal_month = RetailCalendar.get_period(dt)
        return FiscalPeriod(
            fiscal_year=RetailCalendar.get_year(dt),
            fiscal_quarter=(fiscal_month - 1) // 3 + 1,
            fiscal_month=fiscal_month,
            fiscal_week=RetailCalendar.get_week(dt),
        )

    # ── Merchandise coordinates -> DateRange ─────────────────────────

    @staticmethod
    def get_year_date_range(fiscal_year: int) -> DateRange:
        return DateRange(
            RetailCalendar.fiscal_year_start(fiscal_year),
            RetailCalendar.fiscal_year_end(fiscal_year),
        )

    @staticmethod
    def get_period_date_range(period: int, fiscal_year: int) -> DateRange:
        """
        Date range of a merchandise period.

        Period 12 runs to the end of the fiscal year, so it is five weeks
        long in 53-week years.
        """
        validate_period(period)
        fy_start = RetailCalendar.fiscal_year_start(fiscal_year)
        start = fy_start + timedelta(weeks=CUMULATIVE_WEEKS[period - 1])
        if period == 12:
            return DateRange(start, RetailCalendar.fiscal_year_end(fiscal_year))
        end = fy_start + timedelta(weeks=CUMULATIVE_WEEKS[period]) - timedelta(days=1)
        return DateRange(start, end)

    @staticmethod
    def get_quarter_date_range(quarter: int, fiscal_year: int) -> DateRange:
        """
        Date range of a merchandise quarter.

        Quarters 1-4 cover three periods each. Quarter 5 is the 53rd week
        on its own and only exists in 53-week years.
        """
        validate_quarter(quarter)
        if quarter == 5:
            if not RetailCalendar.is_53_week_year(fiscal_year):
                raise InvalidQuarterError(quarter, reason=f"fiscal {fiscal_year} has no 53rd week")
            return RetailCalendar.get_week_date_range(EXTRA_WEEK, fiscal_year)
        first_period = (quarter - 1) * 3 + 1
        return DateRange(
            RetailCalendar.get_period_date_range(first_period, fiscal_year).start_date,
            RetailCalendar.get_period_date_range(first_period + 2, fiscal_year).end_date,
        )

    @staticmethod
    def get_season_date_range(season: Season | str, fiscal_year: int) -> DateRange:
        periods = Season(season).periods
        return DateRange(
            RetailCalendar.get_period_date_range(periods[0], fiscal_year).start_date,
            RetailCalendar.get_period_date_range(periods[-1], fiscal_year).end_date,
        )

    @staticmethod
    def get_week_date_range(week: int, fiscal_year: int, restated: bool = False) -> DateRange:
        """
        Sunday-Saturday range of a merch week.

        With restated=True a 53-week year drops its first week, so week N
        maps to actual week N + 1 and week 0 is the dropped week. Weeks past
        the end of the year spill into the next one.
        """
        validate_week(week)
        shift = 1 if restated and RetailCalendar.is_53_week_year(fiscal_year) else 0
        start = RetailCalendar.fiscal_year_start(fiscal_year) + timedelta(weeks=week - 1 + shift)
        return DateRange(start, start + timedelta(days=6))
