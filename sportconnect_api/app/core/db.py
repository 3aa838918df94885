"""
Durable snapshot storage.

The match store persists its whole state (users, matches, rankings) as
one JSON record.  ``SnapshotStorage`` is the port the store talks to:
``load`` returns the stored snapshot as a plain dict or ``None`` when
no record exists yet, ``save`` writes a snapshot or raises
``StorageFailure``.

Two implementations are provided.  ``SqliteSnapshotStorage`` keeps the
record in a small key/value table of an SQLite database file;
``MemorySnapshotStorage`` keeps it in process memory and is used by
tests.
"""

import json
import logging
import os
import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from .config import settings
from .exceptions import StorageFailure

logger = logging.getLogger(__name__)


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the configured path is absolute, use it directly.  Otherwise
    resolve it relative to the package root.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # sportconnect_api/
    return str((base_dir / db_url).resolve())


def get_connection(db_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection with name-indexed rows."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: str) -> None:
    """Create the key/value table if it does not exist yet."""
    conn = get_connection(db_path)
    try:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            """
        )
        conn.commit()
    finally:
        conn.close()


class SnapshotStorage(ABC):
    """Port used by the store to read and write its durable snapshot."""

    @abstractmethod
    def load(self) -> Optional[dict]:
        """Return the stored snapshot, or ``None`` if there is none."""

    @abstractmethod
    def save(self, snapshot: dict) -> None:
        """Write ``snapshot``; raise ``StorageFailure`` on failure."""


class SqliteSnapshotStorage(SnapshotStorage):
    """Snapshot storage backed by a single row of an SQLite table.

    Parameters
    ----------
    path : Optional[str]
        Database file path.  Defaults to ``settings.database_url``
        resolved by :func:`get_database_path`.
    key : Optional[str]
        Identifier of the record.  Defaults to ``settings.storage_key``.
    """

    def __init__(self, path: Optional[str] = None, key: Optional[str] = None) -> None:
        self.path = get_database_path(path)
        self.key = key or settings.storage_key
        self._initialised = False

    def _ensure_table(self) -> None:
        if not self._initialised:
            init_db(self.path)
            self._initialised = True

    def load(self) -> Optional[dict]:
        try:
            self._ensure_table()
            conn = get_connection(self.path)
            try:
                row = conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?",
                    (self.key,),
                ).fetchone()
            finally:
                conn.close()
            if row is None:
                return None
            return json.loads(row["value"])
        except (sqlite3.Error, OSError, ValueError) as e:
            logger.error("Failed to load snapshot '%s' from %s: %s", self.key, self.path, e, exc_info=True)
            raise StorageFailure(f"Could not load snapshot '{self.key}': {e}") from e

    def save(self, snapshot: dict) -> None:
        try:
            self._ensure_table()
            payload = json.dumps(snapshot)
            conn = get_connection(self.path)
            try:
                conn.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at)
                    VALUES (?, ?, CURRENT_TIMESTAMP)
                    ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP
                    """,
                    (self.key, payload),
                )
                conn.commit()
            finally:
                conn.close()
        except (sqlite3.Error, OSError, TypeError, ValueError) as e:
            logger.error("Failed to save snapshot '%s' to %s: %s", self.key, self.path, e, exc_info=True)
            raise StorageFailure(f"Could not save snapshot '{self.key}': {e}") from e


class MemorySnapshotStorage(SnapshotStorage):
    """In-process snapshot storage for tests and throwaway instances.

    Snapshots are kept as JSON text so callers never share objects with
    the stored copy.  Setting ``fail_next_save`` makes the next ``save``
    raise ``StorageFailure``; ``save_count`` counts successful writes.
    """

    def __init__(self, initial: Optional[dict] = None) -> None:
        self._data: Optional[str] = json.dumps(initial) if initial is not None else None
        self.fail_next_save = False
        self.save_count = 0

    def load(self) -> Optional[dict]:
        if self._data is None:
            return None
        return json.loads(self._data)

    def save(self, snapshot: dict) -> None:
        if self.fail_next_save:
            self.fail_next_save = False
            raise StorageFailure("Simulated storage failure")
        self._data = json.dumps(snapshot)
        self.save_count += 1
