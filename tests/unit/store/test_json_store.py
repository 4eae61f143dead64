# tests/unit/store/test_json_store.py - v1
"""Tests for store/json_store.py - one JSON file per key."""

from __future__ import annotations

import pytest

from stylemorph.core.errors import PersistenceError
from stylemorph.store.json_store import JsonKeyValueStore


class TestJsonKeyValueStore:
    @pytest.mark.asyncio
    async def test_set_and_get(self, tmp_path):
        store = JsonKeyValueStore(tmp_path)
        await store.set("stylemorph_theme", "light")
        assert await store.get("stylemorph_theme") == "light"
        assert (tmp_path / "stylemorph_theme.json").exists()

    @pytest.mark.asyncio
    async def test_persists_across_instances(self, tmp_path):
        await JsonKeyValueStore(tmp_path).set("k", [1, 2, 3])
        assert await JsonKeyValueStore(tmp_path).get("k") == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_missing(self, tmp_path):
        assert await JsonKeyValueStore(tmp_path).get("nope") is None

    @pytest.mark.asyncio
    async def test_corrupt_file_reads_as_absent(self, tmp_path):
        (tmp_path / "k.json").write_text("{not json", encoding="utf-8")
        assert await JsonKeyValueStore(tmp_path).get("k") is None

    @pytest.mark.asyncio
    async def test_unencodable_value_raises(self, tmp_path):
        with pytest.raises(PersistenceError):
            await JsonKeyValueStore(tmp_path).set("k", {1, 2})
        assert not (tmp_path / "k.json").exists()

    @pytest.mark.asyncio
    async def test_key_with_separators(self, tmp_path):
        store = JsonKeyValueStore(tmp_path)
        await store.set("a/b", 1)
        assert (tmp_path / "a_b.json").exists()

    @pytest.mark.asyncio
    async def test_delete(self, tmp_path):
        store = JsonKeyValueStore(tmp_path)
        await store.set("k", 1)
        await store.delete("k")
        assert await store.get("k") is None

    def test_creates_root(self, tmp_path):
        JsonKeyValueStore(tmp_path / "nested" / "store")
        assert (tmp_path / "nested" / "store").is_dir()

    @pytest.mark.asyncio
    async def test_delete_failure_raises(self, tmp_path):
        (tmp_path / "k.json").mkdir()
        with pytest.raises(PersistenceError, match="Cannot delete"):
            await JsonKeyValueStore(tmp_path).delete("k")
