# src/store/memory_store.py - v1
"""In-process key-value store (STORE_BACKEND=memory).

Values are kept JSON-encoded so behaviour matches the durable backends.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from stylemorph.core.errors import PersistenceError
from stylemorph.store.base_store import BaseKeyValueStore

logger = logging.getLogger(__name__)


class MemoryKeyValueStore(BaseKeyValueStore):
    """Dict-backed store; contents vanish with the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Any | None:
        raw = self._data.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Malformed value for key %s: %s", key, e)
            return None

    async def set(self, key: str, value: Any) -> None:
        try:
            self._data[key] = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"Cannot encode value for {key!r}: {e}") from e

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def raw(self, key: str) -> str | None:
        """Return the encoded value as stored (for inspection)."""
        return self._data.get(key)
