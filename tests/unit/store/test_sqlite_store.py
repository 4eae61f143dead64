# tests/unit/store/test_sqlite_store.py - v1
"""Tests for store/sqlite_store.py."""

from __future__ import annotations

import pytest

from stylemorph.core.errors import PersistenceError
from stylemorph.store.sqlite_store import SqliteKeyValueStore


@pytest.fixture
def store(tmp_path):
    s = SqliteKeyValueStore(tmp_path / "kv.db")
    yield s
    s.close()


class TestSqliteKeyValueStore:
    @pytest.mark.asyncio
    async def test_set_and_get(self, store):
        await store.set("k", {"x": 1})
        assert await store.get("k") == {"x": 1}

    @pytest.mark.asyncio
    async def test_overwrite(self, store):
        await store.set("k", 1)
        await store.set("k", 2)
        assert await store.get("k") == 2

    @pytest.mark.asyncio
    async def test_missing(self, store):
        assert await store.get("nope") is None

    @pytest.mark.asyncio
    async def test_unencodable_value_raises(self, store):
        with pytest.raises(PersistenceError):
            await store.set("k", object())

    @pytest.mark.asyncio
    async def test_delete(self, store):
        await store.set("k", 1)
        await store.delete("k")
        assert await store.get("k") is None

    @pytest.mark.asyncio
    async def test_persists_across_connections(self, tmp_path):
        first = SqliteKeyValueStore(tmp_path / "kv.db")
        await first.set("k", "v")
        first.close()
        second = SqliteKeyValueStore(tmp_path / "kv.db")
        assert await second.get("k") == "v"
        second.close()

    @pytest.mark.asyncio
    async def test_unreadable_database_reads_as_absent(self, tmp_path):
        broken = SqliteKeyValueStore(tmp_path / "broken.db")
        await broken.set("k", 1)
        broken.close()
        assert await broken.get("k") is None

    @pytest.mark.asyncio
    async def test_delete_failure_raises(self, tmp_path):
        broken = SqliteKeyValueStore(tmp_path / "broken.db")
        broken.close()
        with pytest.raises(PersistenceError, match="Cannot delete"):
            await broken.delete("k")
