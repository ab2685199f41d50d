"""Backup export and import.

A backup is a JSON document::

    {"version": 2, "exportedAt": "...", "sessions": [...]}

Import replaces the whole collection, or changes nothing at all.
"""

import json
import logging
from datetime import date, datetime
from typing import Union

from pydantic import BaseModel, Field, ValidationError

from pokerlog.db.base import SessionRepository
from pokerlog.models import Session

logger = logging.getLogger(__name__)

BACKUP_FORMAT_VERSION = 2


class InvalidBackupError(ValueError):
    """Raised when a backup payload cannot be imported."""

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__("Invalid backup file.")


class Backup(BaseModel):
    """Serialized form of the full session collection."""

    version: int = Field(default=BACKUP_FORMAT_VERSION, description="Backup format version")
    exported_at: datetime = Field(
        default_factory=datetime.now,
        alias="exportedAt",
        description="Export timestamp",
    )
    sessions: list[Session] = Field(..., description="All sessions")

    model_config = {"frozen": True, "populate_by_name": True}


def backup_filename(today: date) -> str:
    """Default file name for a backup taken on ``today``."""
    return f"poker-tracker-backup-{today.isoformat()}.json"


def export_backup(repository: SessionRepository, now: datetime) -> bytes:
    """Serialize every stored session.

    Args:
        repository: Repository to read from.
        now: Export timestamp to record.

    Returns:
        UTF-8 encoded, indented JSON.
    """
    backup = Backup(version=BACKUP_FORMAT_VERSION, exported_at=now, sessions=repository.load())
    logger.info("Exporting %d sessions", len(backup.sessions))
    return backup.model_dump_json(by_alias=True, indent=2).encode("utf-8")


def parse_backup(payload: Union[bytes, str]) -> list[Session]:
    """Validate a backup payload without touching storage.

    Args:
        payload: Raw backup file contents.

    Returns:
        The sessions contained in the backup.

    Raises:
        InvalidBackupError: If the payload is not JSON, has no
            ``sessions`` list, holds a malformed session, or repeats
            a session id.
    """
    try:
        data = json.loads(payload)
    except (UnicodeDecodeError, ValueError) as e:
        raise InvalidBackupError(f"not JSON: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("sessions"), list):
        raise InvalidBackupError("missing 'sessions' list")

    try:
        sessions = [Session.model_validate(item) for item in data["sessions"]]
    except ValidationError as e:
        raise InvalidBackupError(str(e)) from e

    ids = [s.id for s in sessions]
    if len(set(ids)) != len(ids):
        raise InvalidBackupError("duplicate session ids")
    return sessions


def import_backup(repository: SessionRepository, payload: Union[bytes, str]) -> int:
    """Replace the stored collection with the sessions in ``payload``.

    Args:
        repository: Repository to overwrite.
        payload: Raw backup file contents.

    Returns:
        Number of sessions imported.

    Raises:
        InvalidBackupError: If the payload is rejected; storage is
            left untouched.
    """
    sessions = parse_backup(payload)
    repository.replace(sessions)
    logger.info("Imported %d sessions", len(sessions))
    return len(sessions)
