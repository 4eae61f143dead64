# src/store/json_store.py - v1
"""JSON file-based key-value store (default STORE_BACKEND=json).

Stores each key as an individual JSON file under STORE_ROOT.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from stylemorph.core.errors import PersistenceError
from stylemorph.store.base_store import BaseKeyValueStore

logger = logging.getLogger(__name__)


class JsonKeyValueStore(BaseKeyValueStore):
    """File-based store using one JSON file per key."""

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root).expanduser()
        self._root.mkdir(parents=True, exist_ok=True)

    async def get(self, key: str) -> Any | None:
        path = self._entry_path(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to read stored value %s: %s", key, e)
            return None

    async def set(self, key: str, value: Any) -> None:
        path = self._entry_path(key)
        tmp = path.with_suffix(".json.tmp")
        try:
            payload = json.dumps(value, indent=2)
            tmp.write_text(payload, encoding="utf-8")
            os.replace(tmp, path)
        except (TypeError, ValueError, OSError) as e:
            raise PersistenceError(f"Cannot write {key!r}: {e}") from e

    async def delete(self, key: str) -> None:
        path = self._entry_path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise PersistenceError(f"Cannot delete {key!r}: {e}") from e

    def _entry_path(self, key: str) -> Path:
        """Return file path for a key."""
        safe_key = key.replace("/", "_").replace("\\", "_")
        return self._root / f"{safe_key}.json"
