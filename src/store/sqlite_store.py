# src/store/sqlite_store.py - v1
"""SQLite-based key-value store (STORE_BACKEND=sqlite).

Uses stdlib sqlite3, no external dependency.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any

from stylemorph.core.errors import PersistenceError
from stylemorph.store.base_store import BaseKeyValueStore

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_entries (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT DEFAULT CURRENT_TIMESTAMP
);
"""


class SqliteKeyValueStore(BaseKeyValueStore):
    """SQLite-backed store; one row per key."""

    def __init__(self, db_path: Path | str) -> None:
        self._db_path = Path(db_path).expanduser()
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(str(self._db_path))
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._conn.executescript(_SCHEMA)

    async def get(self, key: str) -> Any | None:
        try:
            row = self._conn.execute(
                "SELECT value FROM kv_entries WHERE key = ?", (key,)
            ).fetchone()
        except sqlite3.Error as e:
            logger.warning("Failed to read stored value %s: %s", key, e)
            return None
        if row is None:
            return None
        try:
            return json.loads(row[0])
        except json.JSONDecodeError as e:
            logger.warning("Failed to decode stored value %s: %s", key, e)
            return None

    async def set(self, key: str, value: Any) -> None:
        try:
            self._conn.execute(
                """INSERT OR REPLACE INTO kv_entries (key, value, updated_at)
                   VALUES (?, ?, CURRENT_TIMESTAMP)""",
                (key, json.dumps(value)),
            )
            self._conn.commit()
        except (TypeError, ValueError, sqlite3.Error) as e:
            raise PersistenceError(f"Cannot write {key!r}: {e}") from e

    async def delete(self, key: str) -> None:
        try:
            self._conn.execute("DELETE FROM kv_entries WHERE key = ?", (key,))
            self._conn.commit()
        except sqlite3.Error as e:
            raise PersistenceError(f"Cannot delete {key!r}: {e}") from e

    def close(self) -> None:
        self._conn.close()
