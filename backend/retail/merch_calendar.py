"""
Merch Calendar Queries: Derived Business Dates on the 4-5-4 Calendar.

Built on the RetailCalendar primitives:
  - Date-range enumeration (every day between two dates)
  - Comparison day: "the same day" in another fiscal year, for
    year-over-year comp reporting (53-week years restated by default)
  - Sales release day: the first Thursday of a merchandise period,
    by period, by date, for a season, or for a whole year

All functions are pure; nothing is cached or stored.
"""

from datetime import date, timedelta

import structlog

from retail.calendar import DateRange, RetailCalendar, Season, as_date
from retail.exceptions import NoMatchingWeekdayError
from retail.validation import validate_date_range, validate_period

logger = structlog.get_logger()

# Periods start on Sunday, so Sunday + 4 is the first Thursday
SALES_RELEASE_OFFSET_DAYS = 4


def all_dates_between(start: date | DateRange, end: date | None = None) -> list[date]:
    """
    Every calendar day from start through end, inclusive and ascending.

    Accepts either two dates or a single DateRange. Raises
    InvalidDateRangeError when the range runs backwards.
    """
    if end is None:
        start, end = start
    date_range = DateRange(as_date(start), as_date(end))
    validate_date_range(date_range)

    num_days = (date_range.end_date - date_range.start_date).days + 1
    return [date_range.start_date + timedelta(days=offset) for offset in range(num_days)]


def get_comparison_day(day: date, year: int, restated: bool = True) -> date:
    """
    Same merch week and weekday as ``day``, in fiscal ``year``.

    restated=False compares against the raw week layout of 53-week
    years, which shifts the comparison by a week. Not recommended.
    """
    day = as_date(day)
    week = RetailCalendar.get_week(day)
    week_range = RetailCalendar.get_week_date_range(week, year, restated)

    match = next((d for d in all_dates_between(week_range) if d.weekday() == day.weekday()), None)
    if match is None:
        raise NoMatchingWeekdayError(day, week_range)

    logger.debug(
        "merch_calendar.comparison_day",
        day=day.isoformat(),
        week=week,
        year=year,
        restated=restated,
        comparison_day=match.isoformat(),
    )
    return match


def get_sales_release_day(period: int, year: int) -> date:
    """Sales release day (first Thursday) of a merchandise period."""
    validate_period(period)
    period_range = RetailCalendar.get_period_date_range(period, year)
    return period_range.start_date + timedelta(days=SALES_RELEASE_OFFSET_DAYS)


def get_sales_release_day_for_date(day: date) -> date:
    """Sales release day of the period containing ``day``."""
    period = RetailCalendar.get_period(day)
    year = RetailCalendar.get_year(day)
    return get_sales_release_day(period, year)


def get_sales_release_dates_for_season(season: Season | str, year: int) -> list[date]:
    """Sales release days for the six periods of a season, in period order."""
    periods = Season(season).periods
    return [get_sales_release_day(period, year) for period in periods]


def get_sales_release_dates_for_year(year: int) -> list[date]:
    """Sales release days for periods 1 through 12."""
    release_dates = [get_sales_release_day(period, year) for period in range(1, 13)]
    logger.debug("merch_calendar.sales_release_year", year=year, count=len(release_dates))
    return release_dates
