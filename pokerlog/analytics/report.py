"""Year-to-date report composition."""

import logging
from datetime import date, datetime
from typing import Iterable, Union

from pokerlog.analytics.aggregation import (
    aggregate_by_day,
    aggregate_by_month,
    aggregate_by_weekday,
    filter_year_to_date,
    summarize,
)
from pokerlog.analytics.calendar import is_supported_year
from pokerlog.analytics.selection import best_bucket
from pokerlog.db.base import SessionRepository
from pokerlog.models import Session, YearReport

logger = logging.getLogger(__name__)


def build_report(
    repository: SessionRepository,
    year: int,
    as_of: Union[date, datetime],
) -> YearReport:
    """Build the statistics for ``year`` from Jan 1 through ``as_of``.

    The repository is read afresh on every call.

    Args:
        repository: Session repository to load from.
        year: Calendar year to report on.
        as_of: The "today" boundary.

    Returns:
        YearReport with totals, groupings and best buckets.

    Raises:
        ValueError: If ``year`` is outside 1..9999.
    """
    if not is_supported_year(year):
        raise ValueError(f"year {year} is out of range")
    ytd = filter_year_to_date(repository.load(), year, as_of)
    ytd.sort(key=lambda s: s.date, reverse=True)
    logger.debug("Building %d report from %d sessions", year, len(ytd))

    months = aggregate_by_month(ytd)
    weekdays = aggregate_by_weekday(ytd)
    days = aggregate_by_day(ytd)

    return YearReport(
        year=year,
        start=date(year, 1, 1),
        end=date(as_of.year, as_of.month, as_of.day),
        sessions=ytd,
        summary=summarize(ytd),
        months=months,
        weekdays=weekdays,
        days=days,
        best_month=best_bucket(months),
        best_weekday=best_bucket(weekdays),
        best_day=best_bucket(days),
    )


def available_years(sessions: Iterable[Session], today: date) -> list[int]:
    """List the years worth reporting on, newest first.

    Includes every year that appears in a stored date plus the current
    and previous year.
    """
    years = {today.year, today.year - 1}
    for session in sessions:
        prefix = (session.date or "")[:4]
        if len(prefix) == 4 and prefix.isdigit() and int(prefix) > 0:
            years.add(int(prefix))
    return sorted(years, reverse=True)
