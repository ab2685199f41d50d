"""Session repository interface for pokerlog."""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable, Iterable, Optional

from pokerlog.models import Session, SessionDraft


def new_session_id() -> str:
    """Generate a globally unique session identifier."""
    return str(uuid.uuid4())


class SessionRepository(ABC):
    """Abstract base class for session storage.

    The collection is always read and written as a whole. Implementations
    only provide ``load`` and ``save``; every mutation below is a
    load-modify-save cycle on a fresh snapshot.
    """

    def __init__(
        self,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the repository.

        Args:
            id_factory: Issues identifiers for new sessions.
            clock: Issues creation timestamps for new sessions.
        """
        self._id_factory = id_factory or new_session_id
        self._clock = clock or datetime.now

    @abstractmethod
    def load(self) -> list[Session]:
        """Load the full session collection.

        Returns:
            Sessions in stored order; an empty list if storage is
            missing or corrupt. Never raises.
        """
        pass

    @abstractmethod
    def save(self, sessions: Iterable[Session]) -> None:
        """Overwrite the stored collection with ``sessions``.

        Args:
            sessions: The complete new collection.
        """
        pass

    def add(self, draft: SessionDraft) -> Session:
        """Store a new session built from ``draft``.

        Args:
            draft: User-entered session fields.

        Returns:
            The stored session with its id, timestamp and profit.
        """
        session = draft.to_session(self._id_factory(), self._clock())
        sessions = self.load()
        sessions.append(session)
        self.save(sessions)
        return session

    def get(self, session_id: str) -> Optional[Session]:
        """Get a session by ID.

        Returns:
            Session if found, None otherwise.
        """
        for session in self.load():
            if session.id == session_id:
                return session
        return None

    def update(self, session_id: str, **changes: Any) -> Session:
        """Replace one session with an edited copy.

        Args:
            session_id: ID of the session to edit.
            **changes: Field values to change; profit is recomputed.

        Returns:
            The edited session.

        Raises:
            KeyError: If no session has ``session_id``.
        """
        sessions = self.load()
        for i, session in enumerate(sessions):
            if session.id == session_id:
                sessions[i] = session.revise(**changes)
                self.save(sessions)
                return sessions[i]
        raise KeyError(session_id)

    def delete(self, session_id: str) -> bool:
        """Delete a session by ID.

        Returns:
            True if a session was removed.
        """
        sessions = self.load()
        remaining = [s for s in sessions if s.id != session_id]
        if len(remaining) == len(sessions):
            return False
        self.save(remaining)
        return True

    def replace(self, sessions: Iterable[Session]) -> None:
        """Replace the whole collection (used by backup import)."""
        self.save(list(sessions))

    def clear(self) -> None:
        """Remove every session."""
        self.save([])
