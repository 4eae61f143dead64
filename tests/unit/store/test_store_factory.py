# tests/unit/store/test_store_factory.py - v1
"""Tests for store/store_factory.py."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from stylemorph.store.json_store import JsonKeyValueStore
from stylemorph.store.memory_store import MemoryKeyValueStore
from stylemorph.store.sqlite_store import SqliteKeyValueStore
from stylemorph.store.store_factory import create_store


class TestCreateStore:
    def test_default_is_memory(self):
        assert isinstance(create_store(), MemoryKeyValueStore)

    def test_memory(self, settings):
        assert isinstance(create_store(settings), MemoryKeyValueStore)

    def test_json(self, settings):
        s = settings.model_copy(update={"store_backend": "json"})
        store = create_store(s)
        assert isinstance(store, JsonKeyValueStore)
        assert s.store_root.is_dir()

    def test_sqlite(self, settings):
        s = settings.model_copy(update={"store_backend": "sqlite"})
        store = create_store(s)
        assert isinstance(store, SqliteKeyValueStore)
        assert (s.store_root / "stylemorph.db").exists()
        store.close()

    def test_redis_requires_url(self):
        s = MagicMock(store_backend="redis", store_redis_url="")
        with pytest.raises(ValueError, match="STORE_REDIS_URL"):
            create_store(s)

    def test_unknown_backend(self):
        s = MagicMock(store_backend="s3")
        with pytest.raises(ValueError, match="Unsupported"):
            create_store(s)
