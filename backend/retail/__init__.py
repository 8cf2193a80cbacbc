"""
Retail merchandise calendar package.

NRF 4-5-4 calendar primitives plus the derived-date queries retail
planning and reporting lean on:
  - RetailCalendar           date <-> week / period / quarter / season / year
  - all_dates_between        every day in a range
  - get_comparison_day       same day last year (or any year), restated
  - get_sales_release_*      first Thursday of a period, season or year

Usage:
    from datetime import date
    from retail import Season, get_comparison_day, get_sales_release_dates_for_season

    get_comparison_day(date(2024, 2, 8), 2023)                # -> date(2023, 2, 9)
    get_sales_release_dates_for_season(Season.SPRING, 2024)   # -> 6 Thursdays
"""

from retail.calendar import DateRange, FiscalPeriod, RetailCalendar, Season
from retail.exceptions import (
    InvalidDateRangeError,
    InvalidMerchWeekError,
    InvalidPeriodError,
    InvalidQuarterError,
    MerchCalendarError,
    NoMatchingWeekdayError,
)
from retail.merch_calendar import (
    all_dates_between,
    get_comparison_day,
    get_sales_release_dates_for_season,
    get_sales_release_dates_for_year,
    get_sales_release_day,
    get_sales_release_day_for_date,
)
from retail.validation import validate_date_range, validate_period, validate_quarter, validate_week

__all__ = [
    "DateRange",
    "FiscalPeriod",
    "InvalidDateRangeError",
    "InvalidMerchWeekError",
    "InvalidPeriodError",
    "InvalidQuarterError",
    "MerchCalendarError",
    "NoMatchingWeekdayError",
    "RetailCalendar",
    "Season",
    "all_dates_between",
    "get_comparison_day",
    "get_sales_release_dates_for_season",
    "get_sales_release_dates_for_year",
    "get_sales_release_day",
    "get_sales_release_day_for_date",
    "validate_date_range",
    "validate_period",
    "validate_quarter",
    "validate_week",
]
