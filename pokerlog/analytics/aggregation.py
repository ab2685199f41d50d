"""Year-to-date filtering and bucket aggregation.

All functions are pure: they read the sessions they are given and never
mutate them. Sessions whose date does not parse are skipped everywhere.
"""

from datetime import date, datetime
from typing import Callable, Iterable, Union

from pokerlog.analytics.calendar import (
    MONTH_NAMES,
    WEEKDAY_NAMES,
    CalendarDay,
    end_of_day,
    is_supported_year,
    parse_local_day_id,
    start_of_year,
    to_local_day_id,
)
from pokerlog.models import Bucket, Session, Summary


def filter_year_to_date(
    sessions: Iterable[Session],
    year: int,
    as_of: Union[date, datetime],
) -> list[Session]:
    """Select the sessions played from Jan 1 of ``year`` through ``as_of``.

    Args:
        sessions: Session snapshot.
        year: Calendar year to report on.
        as_of: The "today" boundary; its whole calendar day is included.

    Returns:
        Matching sessions in their input order; empty for a year
        outside 1..9999.
    """
    if not is_supported_year(year):
        return []
    lower = start_of_year(year)
    upper = end_of_day(as_of)

    selected = []
    for session in sessions:
        day = parse_local_day_id(session.date)
        if day is None:
            continue
        if lower <= day.anchor <= upper and day.year == year:
            selected.append(session)
    return selected


def _fold(
    sessions: Iterable[Session],
    keys: list,
    labels: list[str],
    key_of: Callable[[CalendarDay], object],
) -> list[Bucket]:
    totals = {key: [0.0, 0, 0.0] for key in keys}
    for session in sessions:
        day = parse_local_day_id(session.date)
        if day is None:
            continue
        row = totals[key_of(day)]
        row[0] += session.profit
        row[1] += 1
        row[2] += session.hours

    return [
        Bucket(
            key=key,
            label=label,
            profit=totals[key][0],
            sessions=totals[key][1],
            hours=totals[key][2],
        )
        for key, label in zip(keys, labels)
    ]


def aggregate_by_month(sessions: Iterable[Session]) -> list[Bucket]:
    """Roll sessions up into 12 month buckets (Jan=0 ... Dec=11)."""
    return _fold(sessions, list(range(12)), MONTH_NAMES, lambda day: day.month_index)


def aggregate_by_weekday(sessions: Iterable[Session]) -> list[Bucket]:
    """Roll sessions up into 7 weekday buckets (Sun=0 ... Sat=6)."""
    return _fold(sessions, list(range(7)), WEEKDAY_NAMES, lambda day: day.weekday_index)


def aggregate_by_day(sessions: Iterable[Session]) -> list[Bucket]:
    """Roll sessions up into one bucket per calendar day that was played.

    Returns:
        Buckets keyed by ``YYYY-MM-DD``, oldest first.
    """
    sessions = list(sessions)
    days = sorted(
        {
            to_local_day_id(day)
            for day in (parse_local_day_id(s.date) for s in sessions)
            if day is not None
        }
    )
    return _fold(sessions, days, days, to_local_day_id)


def summarize(sessions: Iterable[Session]) -> Summary:
    """Compute totals, average profit per session and hourly rate.

    Rates are 0 when there are no sessions or no recorded hours.
    """
    total_profit = 0.0
    total_hours = 0.0
    count = 0
    for session in sessions:
        total_profit += session.profit
        total_hours += session.hours
        count += 1

    return Summary(
        total_profit=total_profit,
        total_hours=total_hours,
        session_count=count,
        avg_profit_per_session=total_profit / count if count else 0.0,
        hourly_rate=total_profit / total_hours if total_hours > 0 else 0.0,
    )
