"""Shared hypothesis strategies and builders for pokerlog tests."""

from datetime import date, datetime

from hypothesis import strategies as st

from pokerlog.models import Session


def make_session(
    day: str,
    buyin: float = 0.0,
    cashout: float = 0.0,
    hours: float = 0.0,
    sid: str = "",
) -> Session:
    """Build a stored session with profit derived from buyin/cashout."""
    return Session(
        id=sid or f"{day}-{buyin}-{cashout}-{hours}",
        date=day,
        hours=hours,
        buyin=buyin,
        cashout=cashout,
        profit=cashout - buyin,
        created_at=datetime(2024, 1, 1),
    )


def session_strategy(min_day=date(2023, 1, 1), max_day=date(2025, 12, 31)):
    """Generate sessions with whole-number amounts so sums are exact."""
    return st.builds(
        make_session,
        day=st.dates(min_value=min_day, max_value=max_day).map(lambda d: d.isoformat()),
        buyin=st.integers(min_value=0, max_value=5000).map(float),
        cashout=st.integers(min_value=0, max_value=5000).map(float),
        hours=st.integers(min_value=0, max_value=48).map(lambda h: h / 4),
        sid=st.uuids().map(str),
    )
