"""Property-based tests for the session store.

**Feature: poker-tracker**
"""

import itertools
import tempfile
from datetime import date, datetime
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from pokerlog.db.store import SessionStore
from pokerlog.models import Session, SessionDraft
from tests.strategies import make_session, session_strategy

FIXED_NOW = datetime(2024, 6, 1, 20, 30, 0)


@pytest.fixture
def temp_store():
    """Create a store on a temporary database with deterministic ids."""
    counter = itertools.count(1)
    with tempfile.TemporaryDirectory() as tmpdir:
        db_path = Path(tmpdir) / "test.db"
        yield SessionStore(
            db_path,
            id_factory=lambda: f"session-{next(counter)}",
            clock=lambda: FIXED_NOW,
        )


class TestSchemaCompleteness:
    """
    **Feature: poker-tracker, Property 13: Schema Completeness**

    *For any* fresh database, the sessions table exists and starts empty.
    """

    def test_schema_completeness(self, temp_store: SessionStore):
        tables = temp_store.get_tables()

        for table in SessionStore.REQUIRED_TABLES:
            assert table in tables, f"Required table '{table}' is missing"
        assert temp_store.load() == []

    def test_creates_missing_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            db_path = Path(tmpdir) / "nested" / "dir" / "test.db"
            SessionStore(db_path)

            assert db_path.exists()


class TestSaveLoadRoundTrip:
    """
    **Feature: poker-tracker, Property 14: Whole-Collection Persistence**

    *For any* collection, save then load returns the same sessions in the
    same order, and save always overwrites what was stored before.
    """

    @given(sessions=st.lists(session_strategy(), max_size=25, unique_by=lambda s: s.id))
    @settings(max_examples=30)
    def test_round_trip(self, sessions: list[Session]):
        with tempfile.TemporaryDirectory() as tmpdir:
            store = SessionStore(Path(tmpdir) / "test.db")

            store.save(sessions)

            assert store.load() == sessions

    def test_save_overwrites(self, temp_store: SessionStore):
        temp_store.save([make_session("2024-01-01", sid="a"), make_session("2024-01-02", sid="b")])
        temp_store.save([make_session("2024-02-01", sid="c")])

        assert [s.id for s in temp_store.load()] == ["c"]

    def test_malformed_date_survives_storage(self, temp_store: SessionStore):
        temp_store.save([make_session("2024-13-40", sid="odd")])

        assert temp_store.load()[0].date == "2024-13-40"


class TestCorruptStorage:
    """
    **Feature: poker-tracker, Property 15: Corrupt Storage Fails Soft**

    A database that cannot be read loads as an empty collection.
    """

    def test_garbage_file_loads_empty(self, caplog):
        with tempfile.TemporaryDirectory() as tmpdir:
            db_path = Path(tmpdir) / "test.db"
            db_path.write_bytes(b"this is not a sqlite database" * 100)

            store = SessionStore(db_path)

            assert store.load() == []
            assert "corrupt" in caplog.text or "Could not initialize" in caplog.text

    def test_malformed_row_loads_empty(self, temp_store: SessionStore):
        import sqlite3

        conn = sqlite3.connect(temp_store.db_path)
        conn.execute(
            "INSERT INTO sessions (position, id, date, hours, created_at) VALUES (0, 'x', '2024-01-01', -3, 'never')"
        )
        conn.commit()
        conn.close()

        assert temp_store.load() == []


class TestSessionLifecycle:
    """
    **Feature: poker-tracker, Property 16: Profit Derivation**

    *For any* session created or edited through the repository, the
    stored profit equals cashout minus buyin.
    """

    @given(
        buyin=st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False),
        cashout=st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False),
    )
    @settings(max_examples=30)
    def test_add_derives_profit(self, buyin: float, cashout: float):
        with tempfile.TemporaryDirectory() as tmpdir:
            store = SessionStore(Path(tmpdir) / "test.db")

            session = store.add(SessionDraft(date=date(2024, 3, 1), buyin=buyin, cashout=cashout))

            stored = store.load()
            assert stored == [session]
            assert stored[0].profit == cashout - buyin

    def test_add_uses_issued_id_and_timestamp(self, temp_store: SessionStore):
        first = temp_store.add(SessionDraft(date=date(2024, 3, 1), buyin=100, cashout=150))
        second = temp_store.add(SessionDraft(date=date(2024, 3, 2)))

        assert first.id == "session-1"
        assert second.id == "session-2"
        assert first.created_at == FIXED_NOW
        assert first.date == "2024-03-01"
        assert [s.id for s in temp_store.load()] == ["session-1", "session-2"]

    def test_update_recomputes_profit(self, temp_store: SessionStore):
        session = temp_store.add(SessionDraft(date=date(2024, 3, 1), buyin=100, cashout=150))

        updated = temp_store.update(session.id, cashout=80, notes="tilted")

        assert updated.profit == -20
        assert updated.id == session.id
        assert updated.created_at == session.created_at
        assert temp_store.get(session.id) == updated

    def test_update_ignores_profit_override(self, temp_store: SessionStore):
        session = temp_store.add(SessionDraft(date=date(2024, 3, 1), buyin=100, cashout=150))

        updated = temp_store.update(session.id, profit=1_000_000, date=date(2024, 4, 2))

        assert updated.profit == 50
        assert updated.date == "2024-04-02"

    def test_update_rejects_unknown_field(self, temp_store: SessionStore):
        session = temp_store.add(SessionDraft(date=date(2024, 3, 1), buyin=100, cashout=150))

        with pytest.raises(TypeError, match="casout"):
            temp_store.update(session.id, casout=5)
        assert temp_store.get(session.id) == session

    def test_update_unknown_id(self, temp_store: SessionStore):
        with pytest.raises(KeyError):
            temp_store.update("missing", cashout=10)

    def test_update_rejects_negative_hours(self, temp_store: SessionStore):
        session = temp_store.add(SessionDraft(date=date(2024, 3, 1), hours=2))

        with pytest.raises(ValidationError):
            temp_store.update(session.id, hours=-1)
        assert temp_store.get(session.id).hours == 2

    def test_delete(self, temp_store: SessionStore):
        a = temp_store.add(SessionDraft(date=date(2024, 3, 1)))
        b = temp_store.add(SessionDraft(date=date(2024, 3, 2)))

        assert temp_store.delete(a.id) is True
        assert temp_store.delete(a.id) is False
        assert temp_store.load() == [b]

    def test_clear(self, temp_store: SessionStore):
        temp_store.add(SessionDraft(date=date(2024, 3, 1)))
        temp_store.clear()

        assert temp_store.load() == []

    def test_draft_rejects_negative_hours(self):
        with pytest.raises(ValidationError):
            SessionDraft(hours=-0.5)

    def test_draft_defaults_to_today(self):
        assert SessionDraft().date == date.today()
