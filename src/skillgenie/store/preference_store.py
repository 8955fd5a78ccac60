"""Single-record persistence for questionnaire submissions."""

from __future__ import annotations

import json
import logging
import sqlite3
import time
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol, Union

from skillgenie.errors import StorageError
from skillgenie.models.questionnaire import QuestionnaireRecord, StoredRecord

logger = logging.getLogger(__name__)

STORAGE_KEY = "skillgenie_questionnaire_data"
DEFAULT_DB_PATH = Path.home() / ".skillgenie" / "preferences.db"

Submission = Union[QuestionnaireRecord, Mapping[str, Any]]


class PreferenceStore(Protocol):
    """Holds at most one stamped questionnaire record."""

    def save(self, record: Submission) -> StoredRecord | None: ...

    def load(self) -> StoredRecord | None: ...

    def clear(self) -> None: ...


def stamp_record(record: Submission) -> StoredRecord:
    """Validate a submission and stamp it with a fresh id and timestamp.

    Raises ValueError (including pydantic's ValidationError) or TypeError when
    the payload is not a usable submission.
    """
    if isinstance(record, QuestionnaireRecord):
        data = record.model_dump(by_alias=True)
    elif isinstance(record, Mapping):
        data = dict(record)
    else:
        raise TypeError(f"Unsupported submission type: {type(record).__name__}")

    # A resubmitted record always gets a new identity
    data.pop("id", None)
    data.pop("timestamp", None)
    return StoredRecord.model_validate(data)


def _parse_stored(raw: str) -> StoredRecord | None:
    try:
        return StoredRecord.model_validate(json.loads(raw))
    except ValueError:
        logger.warning("Stored questionnaire data is malformed; ignoring it", exc_info=True)
        return None


class SQLitePreferenceStore:
    """SQLite-backed store keeping the submission under one fixed key.

    Every operation is a single statement in its own transaction, so readers
    never see a partially written record. Storage failures are logged and
    reported through the return value rather than raised.
    """

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH, key: str = STORAGE_KEY):
        self.db_path = Path(db_path)
        self.key = key
        try:
            self._init_db()
        except StorageError:
            logger.warning("Preference storage unavailable at %s", self.db_path, exc_info=True)

    def _connect(self) -> sqlite3.Connection:
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            return sqlite3.connect(str(self.db_path))
        except (sqlite3.Error, OSError) as e:
            raise StorageError(f"Cannot open {self.db_path}: {e}") from e

    def _init_db(self) -> None:
        try:
            with self._connect() as conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS preferences (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL,
                        updated_at REAL NOT NULL
                    )
                """)
        except sqlite3.Error as e:
            raise StorageError(str(e)) from e

    def save(self, record: Submission) -> StoredRecord | None:
        """Stamp and persist a submission, replacing any previous one.

        Returns the stamped record, or None if it could not be validated,
        serialized or written.
        """
        try:
            stamped = stamp_record(record)
            payload = stamped.model_dump_json(by_alias=True)
        except (ValueError, TypeError):
            logger.error("Questionnaire data could not be serialized", exc_info=True)
            return None

        try:
            self._init_db()
            with self._connect() as conn:
                conn.execute(
                    """INSERT OR REPLACE INTO preferences (key, value, updated_at)
                       VALUES (?, ?, ?)""",
                    (self.key, payload, time.time()),
                )
        except (StorageError, sqlite3.Error):
            logger.error("Error saving questionnaire data", exc_info=True)
            return None

        logger.info("Questionnaire data saved: id=%s", stamped.id)
        return stamped

    def load(self) -> StoredRecord | None:
        """Return the stored record, or None if absent or unreadable."""
        try:
            with self._connect() as conn:
                row = conn.execute(
                    "SELECT value FROM preferences WHERE key = ?", (self.key,)
                ).fetchone()
        except (StorageError, sqlite3.Error):
            logger.warning("Error retrieving questionnaire data", exc_info=True)
            return None

        if row is None:
            return None
        return _parse_stored(row[0])

    def clear(self) -> None:
        """Remove the stored record. Clearing an empty store is a no-op."""
        try:
            with self._connect() as conn:
                conn.execute("DELETE FROM preferences WHERE key = ?", (self.key,))
        except (StorageError, sqlite3.Error):
            logger.warning("Error clearing questionnaire data", exc_info=True)
            return
        logger.info("Questionnaire data cleared")


class InMemoryPreferenceStore:
    """Process-local store with the same contract, for tests and embedding.

    The record is kept serialized so callers never share mutable state with
    the store.
    """

    def __init__(self) -> None:
        self._value: str | None = None

    def save(self, record: Submission) -> StoredRecord | None:
        try:
            stamped = stamp_record(record)
            self._value = stamped.model_dump_json(by_alias=True)
        except (ValueError, TypeError):
            logger.error("Questionnaire data could not be serialized", exc_info=True)
            return None
        return stamped

    def load(self) -> StoredRecord | None:
        if self._value is None:
            return None
        return _parse_stored(self._value)

    def clear(self) -> None:
        self._value = None
