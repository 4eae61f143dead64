# src/store/store_factory.py - v1
"""Factory for key-value store instantiation."""

from __future__ import annotations

from stylemorph.config.settings import Settings
from stylemorph.store.base_store import BaseKeyValueStore


def create_store(settings: Settings | None = None) -> BaseKeyValueStore:
    """Instantiate the configured persistence backend.

    Args:
        settings: Application settings. Defaults to an in-memory store.
    """
    backend = "memory" if settings is None else settings.store_backend

    if backend == "memory":
        from stylemorph.store.memory_store import MemoryKeyValueStore
        return MemoryKeyValueStore()

    if backend == "json":
        from stylemorph.store.json_store import JsonKeyValueStore
        return JsonKeyValueStore(root=settings.store_root)

    if backend == "sqlite":
        from stylemorph.store.sqlite_store import SqliteKeyValueStore
        return SqliteKeyValueStore(db_path=settings.store_root / "stylemorph.db")

    if backend == "redis":
        from stylemorph.store.redis_store import RedisKeyValueStore
        if not settings.store_redis_url:
            raise ValueError("STORE_REDIS_URL must be set when STORE_BACKEND=redis")
        return RedisKeyValueStore(redis_url=settings.store_redis_url)

    raise ValueError(f"Unsupported store backend: {backend!r}")
