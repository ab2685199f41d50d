"""SQLite session store for pokerlog."""

import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, Optional

from pydantic import ValidationError

from pokerlog.db.base import SessionRepository
from pokerlog.models import Session

logger = logging.getLogger(__name__)


class SessionStore(SessionRepository):
    """SQLite-based session repository."""

    REQUIRED_TABLES = ["sessions"]

    def __init__(
        self,
        db_path: Path,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the session store.

        Args:
            db_path: Path to the SQLite database file.
            id_factory: Issues identifiers for new sessions.
            clock: Issues creation timestamps for new sessions.
        """
        super().__init__(id_factory=id_factory, clock=clock)
        self.db_path = Path(db_path)
        self._ensure_db_dir()
        try:
            self._init_schema()
        except sqlite3.DatabaseError as e:
            # load() falls back to an empty collection for this file
            logger.warning("Could not initialize %s: %s", self.db_path, e)

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema on first run."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()

            # position keeps the collection's stored order
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS sessions (
                    position INTEGER PRIMARY KEY,
                    id TEXT NOT NULL UNIQUE,
                    date TEXT NOT NULL,
                    type TEXT NOT NULL DEFAULT '',
                    location TEXT NOT NULL DEFAULT '',
                    stakes TEXT NOT NULL DEFAULT '',
                    hours REAL NOT NULL DEFAULT 0,
                    buyin REAL NOT NULL DEFAULT 0,
                    cashout REAL NOT NULL DEFAULT 0,
                    profit REAL NOT NULL DEFAULT 0,
                    notes TEXT NOT NULL DEFAULT '',
                    created_at TEXT NOT NULL
                )
            """)

            conn.commit()
        finally:
            conn.close()

    def get_tables(self) -> list[str]:
        """Get list of all tables in the database."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
            )
            return [row["name"] for row in cursor.fetchall()]
        finally:
            conn.close()

    # ==================== Sessions ====================

    def load(self) -> list[Session]:
        """Load every session in stored order.

        Returns:
            List of sessions, or an empty list if the database is
            unreadable or holds malformed rows.
        """
        try:
            conn = self._get_connection()
        except sqlite3.Error as e:
            logger.warning("Session storage unavailable, using empty collection: %s", e)
            return []

        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT id, date, type, location, stakes, hours, buyin, cashout,
                       profit, notes, created_at
                FROM sessions
                ORDER BY position
                """
            )
            return [
                Session(
                    id=row["id"],
                    date=row["date"],
                    type=row["type"],
                    location=row["location"],
                    stakes=row["stakes"],
                    hours=row["hours"],
                    buyin=row["buyin"],
                    cashout=row["cashout"],
                    profit=row["profit"],
                    notes=row["notes"],
                    created_at=datetime.fromisoformat(row["created_at"]),
                )
                for row in cursor.fetchall()
            ]
        except (sqlite3.Error, ValidationError, ValueError, TypeError) as e:
            logger.warning("Session storage is corrupt, using empty collection: %s", e)
            return []
        finally:
            conn.close()

    def save(self, sessions: Iterable[Session]) -> None:
        """Overwrite all stored sessions in a single transaction.

        Args:
            sessions: The complete new collection.
        """
        sessions = list(sessions)
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM sessions")
            cursor.executemany(
                """
                INSERT INTO sessions
                (position, id, date, type, location, stakes, hours, buyin, cashout,
                 profit, notes, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                [
                    (
                        position,
                        session.id,
                        session.date,
                        session.type,
                        session.location,
                        session.stakes,
                        session.hours,
                        session.buyin,
                        session.cashout,
                        session.profit,
                        session.notes,
                        session.created_at.isoformat(),
                    )
                    for position, session in enumerate(sessions)
                ],
            )
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
        finally:
            conn.close()
        logger.debug("Saved %d sessions to %s", len(sessions), self.db_path)
