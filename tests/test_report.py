"""Tests for year-to-date report composition and configuration.

**Feature: poker-tracker**
"""

import tempfile
from datetime import date, datetime
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pokerlog.analytics import available_years, build_report
from pokerlog.config import DEFAULT_DB_PATH, get_currency_symbol, get_db_path, load_config
from pokerlog.db.store import SessionStore
from pokerlog.models import SessionDraft
from tests.strategies import make_session


@pytest.fixture
def temp_store():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield SessionStore(Path(tmpdir) / "test.db")


class TestBuildReport:
    """
    **Feature: poker-tracker, Property 23: Report Composition**

    A report covers Jan 1 through the as-of day, lists its sessions
    newest first, and always reflects the current stored collection.
    """

    def test_reference_scenario(self, temp_store: SessionStore):
        temp_store.save([
            make_session("2024-01-05", buyin=100, cashout=150, hours=2, sid="a"),
            make_session("2024-01-05", buyin=50, cashout=40, hours=1, sid="b"),
            make_session("2024-02-10", buyin=200, cashout=200, hours=3, sid="c"),
            make_session("2024-13-40", buyin=0, cashout=500, hours=9, sid="bad"),
        ])

        report = build_report(temp_store, 2024, datetime(2024, 12, 31, 9, 0))

        assert report.start == date(2024, 1, 1)
        assert report.end == date(2024, 12, 31)
        assert [s.id for s in report.sessions] == ["c", "a", "b"]
        assert report.summary.total_profit == 40
        assert report.summary.session_count == 3
        assert report.summary.total_hours == 6
        assert report.summary.hourly_rate == pytest.approx(40 / 6)
        assert len(report.months) == 12
        assert len(report.weekdays) == 7
        assert [d.key for d in report.days] == ["2024-01-05", "2024-02-10"]
        assert report.best_month.label == "Jan"
        assert report.best_day.key == "2024-01-05"
        # 2024-01-05 was a Friday
        assert report.best_weekday.label == "Fri"

    def test_empty_year(self, temp_store: SessionStore):
        report = build_report(temp_store, 2024, date(2024, 6, 30))

        assert report.sessions == []
        assert report.summary.avg_profit_per_session == 0
        assert report.best_month is None
        assert report.best_weekday is None
        assert report.best_day is None

    def test_reloads_on_every_call(self, temp_store: SessionStore):
        as_of = date(2024, 12, 31)
        first = build_report(temp_store, 2024, as_of)

        temp_store.add(SessionDraft(date=date(2024, 5, 1), buyin=10, cashout=30))
        second = build_report(temp_store, 2024, as_of)

        assert first.summary.session_count == 0
        assert second.summary.session_count == 1
        assert second.summary.total_profit == 20

    def test_oversized_date_does_not_break_report(self, temp_store: SessionStore):
        temp_store.save([
            make_session("3000000000-01-01", buyin=0, cashout=500, sid="huge"),
            make_session("2024-01-05", buyin=10, cashout=30, sid="good"),
        ])

        report = build_report(temp_store, 2024, date(2024, 12, 31))

        assert [s.id for s in report.sessions] == ["good"]
        assert report.summary.total_profit == 20

    @pytest.mark.parametrize("year", [0, -1, 10000])
    def test_unsupported_year_rejected(self, temp_store: SessionStore, year: int):
        with pytest.raises(ValueError, match="out of range"):
            build_report(temp_store, year, date(2024, 12, 31))

    def test_as_of_excludes_later_sessions(self, temp_store: SessionStore):
        temp_store.save([
            make_session("2024-03-01", buyin=0, cashout=10, sid="early"),
            make_session("2024-09-01", buyin=0, cashout=99, sid="late"),
        ])

        report = build_report(temp_store, 2024, date(2024, 6, 1))

        assert [s.id for s in report.sessions] == ["early"]


class TestAvailableYears:
    """
    **Feature: poker-tracker, Property 24: Available Years**

    *For any* stored dates, the year list contains every stored year plus
    the current and previous year, newest first, without duplicates.
    """

    @given(
        days=st.lists(st.dates(min_value=date(1990, 1, 1), max_value=date(2030, 12, 31)), max_size=20),
        today=st.dates(min_value=date(2000, 1, 1), max_value=date(2030, 12, 31)),
    )
    @settings(max_examples=100)
    def test_contains_expected_years(self, days: list[date], today: date):
        sessions = [make_session(d.isoformat(), sid=str(i)) for i, d in enumerate(days)]

        years = available_years(sessions, today)

        assert years == sorted(set(years), reverse=True)
        assert today.year in years and today.year - 1 in years
        assert {d.year for d in days} <= set(years)

    def test_ignores_non_numeric_prefixes(self):
        sessions = [make_session("", sid="a"), make_session("abcd-01-01", sid="b")]

        assert available_years(sessions, date(2024, 5, 5)) == [2024, 2023]


class TestConfig:
    """
    **Feature: poker-tracker, Property 25: Configuration Defaults**

    A missing or unreadable config file yields the defaults; a valid one
    overrides them.
    """

    def test_missing_file_uses_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config = load_config(Path(tmpdir) / "missing.toml")

        assert get_db_path(config) == DEFAULT_DB_PATH
        assert get_currency_symbol(config) == "$"

    def test_values_override_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.toml"
            path.write_text('[storage]\ndb_path = "/tmp/poker.db"\n\n[display]\ncurrency_symbol = "£"\n', encoding="utf-8")

            config = load_config(path)

        assert get_db_path(config) == Path("/tmp/poker.db")
        assert get_currency_symbol(config) == "£"

    def test_unreadable_file_uses_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.toml"
            path.write_text("[storage\nthis is = = broken")

            config = load_config(path)

        assert get_currency_symbol(config) == "$"

    def test_override_wins(self):
        config = load_config(Path("/nonexistent/config.toml"))

        assert get_db_path(config, Path("/tmp/other.db")) == Path("/tmp/other.db")
