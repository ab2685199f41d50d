"""Session analytics: calendar helpers, aggregation and selection."""

from pokerlog.analytics.aggregation import (
    aggregate_by_day,
    aggregate_by_month,
    aggregate_by_weekday,
    filter_year_to_date,
    summarize,
)
from pokerlog.analytics.calendar import (
    MONTH_NAMES,
    WEEKDAY_NAMES,
    CalendarDay,
    parse_local_day_id,
    to_local_day_id,
)
from pokerlog.analytics.report import available_years, build_report
from pokerlog.analytics.selection import best_bucket

__all__ = [
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "CalendarDay",
    "aggregate_by_day",
    "aggregate_by_month",
    "aggregate_by_weekday",
    "available_years",
    "best_bucket",
    "build_report",
    "filter_year_to_date",
    "parse_local_day_id",
    "summarize",
    "to_local_day_id",
]
