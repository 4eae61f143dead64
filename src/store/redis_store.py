# src/store/redis_store.py - v1
"""Redis-based key-value store (STORE_BACKEND=redis).

Requires 'redis' package: pip install stylemorph[redis].
Lets several machines share templates and run history.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from stylemorph.core.errors import PersistenceError
from stylemorph.store.base_store import BaseKeyValueStore

logger = logging.getLogger(__name__)

_KEY_PREFIX = "stylemorph:kv:"


class RedisKeyValueStore(BaseKeyValueStore):
    """Redis-backed store."""

    def __init__(self, redis_url: str) -> None:
        try:
            import redis
        except ImportError as e:
            raise ImportError(
                "redis package required: pip install redis"
            ) from e

        self._redis_error = redis.RedisError
        self._client = redis.Redis.from_url(redis_url, decode_responses=True)

    async def get(self, key: str) -> Any | None:
        try:
            data = self._client.get(f"{_KEY_PREFIX}{key}")
        except self._redis_error as e:
            logger.warning("Failed to read stored value %s: %s", key, e)
            return None
        if data is None:
            return None
        try:
            return json.loads(data)
        except json.JSONDecodeError as e:
            logger.warning("Failed to decode stored value %s: %s", key, e)
            return None

    async def set(self, key: str, value: Any) -> None:
        try:
            self._client.set(f"{_KEY_PREFIX}{key}", json.dumps(value))
        except (TypeError, ValueError, self._redis_error) as e:
            raise PersistenceError(f"Cannot write {key!r}: {e}") from e

    async def delete(self, key: str) -> None:
        try:
            self._client.delete(f"{_KEY_PREFIX}{key}")
        except self._redis_error as e:
            raise PersistenceError(f"Cannot delete {key!r}: {e}") from e
