# src/store/base_store.py - v1
"""Abstract key-value store interface.

Values are JSON-serializable Python objects. Backends never raise on a
malformed stored value: they log it and report the key as absent.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

# Keys used by the application.
THEME_KEY = "stylemorph_theme"
TEMPLATES_KEY = "stylemorph_templates"
RUN_HISTORY_KEY = "stylemorph_history"


class BaseKeyValueStore(ABC):
    """Unified interface for persistence backends."""

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Return the decoded value, or None if absent or unreadable."""

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Store a value.

        Raises:
            PersistenceError: If the value cannot be encoded or written.
        """

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove a key. No-op if absent.

        Raises:
            PersistenceError: If the backend cannot remove the value.
        """
