# tests/unit/store/test_memory_store.py - v1
"""Tests for store/memory_store.py."""

from __future__ import annotations

import pytest

from stylemorph.core.errors import PersistenceError
from stylemorph.store.memory_store import MemoryKeyValueStore


class TestMemoryKeyValueStore:
    @pytest.mark.asyncio
    async def test_set_and_get(self):
        store = MemoryKeyValueStore()
        await store.set("k", {"a": [1, 2]})
        assert await store.get("k") == {"a": [1, 2]}
        assert store.raw("k") == '{"a": [1, 2]}'

    @pytest.mark.asyncio
    async def test_missing(self):
        assert await MemoryKeyValueStore().get("nope") is None

    @pytest.mark.asyncio
    async def test_malformed_value_reads_as_absent(self):
        store = MemoryKeyValueStore({"k": "{oops"})
        assert await store.get("k") is None

    @pytest.mark.asyncio
    async def test_unencodable_value_raises(self):
        with pytest.raises(PersistenceError):
            await MemoryKeyValueStore().set("k", object())

    @pytest.mark.asyncio
    async def test_delete(self):
        store = MemoryKeyValueStore()
        await store.set("k", 1)
        await store.delete("k")
        await store.delete("k")
        assert await store.get("k") is None
