# src/history/run_history.py - v1
"""Bounded, persisted log of completed runs (newest first).

Every mutation is written through to the key-value store before returning.
Read failures fall back to an empty log and write failures are logged;
neither reaches the caller.
"""

from __future__ import annotations

import logging

from pydantic import TypeAdapter, ValidationError

from stylemorph.core.errors import PersistenceError
from stylemorph.core.models import RunRecord
from stylemorph.store.base_store import RUN_HISTORY_KEY, BaseKeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_CAP = 20

_RECORDS = TypeAdapter(list[RunRecord])


class RunHistoryStore:
    """Append-only run log with oldest-first eviction beyond ``cap``."""

    def __init__(
        self,
        store: BaseKeyValueStore,
        cap: int = DEFAULT_CAP,
        key: str = RUN_HISTORY_KEY,
    ) -> None:
        self._store = store
        self._cap = cap
        self._key = key
        self._records: list[RunRecord] = []

    @property
    def cap(self) -> int:
        return self._cap

    async def load(self) -> list[RunRecord]:
        """Load the persisted log, substituting an empty one on bad data."""
        try:
            raw = await self._store.get(self._key)
        except PersistenceError as e:
            logger.warning("Run history unavailable, starting empty: %s", e)
            raw = None

        records: list[RunRecord] = []
        if raw is not None:
            try:
                records = _RECORDS.validate_python(raw)
            except ValidationError as e:
                logger.warning(
                    "Discarding malformed run history (%d errors)", e.error_count()
                )

        self._records = records[: self._cap]
        logger.info("Loaded %d runs from history", len(self._records))
        return self.list()

    def list(self) -> list[RunRecord]:
        """All records, newest first."""
        return list(self._records)

    def get(self, record_id: str) -> RunRecord | None:
        return next((r for r in self._records if r.id == record_id), None)

    def __len__(self) -> int:
        return len(self._records)

    async def append(self, record: RunRecord) -> None:
        """Prepend a record, evicting the oldest entries beyond the cap."""
        self._records.insert(0, record)
        evicted = self._records[self._cap:]
        del self._records[self._cap:]
        if evicted:
            logger.debug("Evicted %d old runs", len(evicted))
        await self._persist()

    async def remove(self, record_id: str) -> bool:
        """Remove a record by id. Returns False (and writes nothing) if absent."""
        remaining = [r for r in self._records if r.id != record_id]
        if len(remaining) == len(self._records):
            return False
        self._records = remaining
        await self._persist()
        return True

    async def _persist(self) -> None:
        payload = [r.model_dump(mode="json") for r in self._records]
        try:
            await self._store.set(self._key, payload)
        except PersistenceError as e:
            logger.error("Failed to persist run history: %s", e)
