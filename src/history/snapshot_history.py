# src/history/snapshot_history.py - v1
"""Linear undo/redo history over input snapshots.

The history decides for itself whether an edit is recorded: every edit
carries an EditSource, and replayed edits (the result of undo/redo being
applied to the workspace) are never recorded. Structural edits commit
immediately; free-text edits commit after a quiet period through a single
cancellable timer owned by this class.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum

from stylemorph.core.models import InputSnapshot

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_S = 1.0


class EditSource(str, Enum):
    """Origin of a workspace mutation."""

    USER = "user"
    REPLAY = "replay"


class InputSnapshotHistory:
    """Ordered snapshots plus a cursor; committing past an undo truncates.

    Invariant: ``0 <= cursor < len(snapshots)`` at all times.

    Args:
        initial: First snapshot (defaults to no files and an empty prompt).
        debounce_s: Quiet period before a debounced edit is committed.
    """

    def __init__(
        self,
        initial: InputSnapshot | None = None,
        debounce_s: float = DEFAULT_DEBOUNCE_S,
    ) -> None:
        self._snapshots: list[InputSnapshot] = [initial or InputSnapshot()]
        self._cursor = 0
        self._debounce_s = debounce_s
        self._pending_handle: asyncio.TimerHandle | None = None
        self._pending_snapshot: InputSnapshot | None = None

    # --- Inspection ---

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def snapshots(self) -> tuple[InputSnapshot, ...]:
        return tuple(self._snapshots)

    @property
    def current(self) -> InputSnapshot:
        return self._snapshots[self._cursor]

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0 or self.has_pending

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    @property
    def has_pending(self) -> bool:
        return self._pending_handle is not None

    def __len__(self) -> int:
        return len(self._snapshots)

    # --- Recording ---

    def commit(self, snapshot: InputSnapshot) -> None:
        """Append a snapshot, discarding everything after the cursor first."""
        del self._snapshots[self._cursor + 1:]
        self._snapshots.append(snapshot)
        self._cursor = len(self._snapshots) - 1
        logger.debug(
            "Committed snapshot %d (%d files)", self._cursor, len(snapshot.files)
        )

    def record(
        self,
        snapshot: InputSnapshot,
        source: EditSource = EditSource.USER,
        debounce: bool = False,
    ) -> bool:
        """Record an edit according to its source and kind.

        Args:
            snapshot: Workspace state after the edit.
            source: Replayed edits are ignored.
            debounce: Free-text edits wait for a quiet period; a later
                debounced edit replaces the pending one and restarts the timer.

        Returns:
            True if the snapshot was committed immediately.
        """
        if source is EditSource.REPLAY:
            return False

        if debounce:
            self._schedule(snapshot)
            return False

        # The structural snapshot already carries the latest prompt text.
        self.cancel_pending()
        self.commit(snapshot)
        return True

    def flush_pending(self) -> bool:
        """Commit a pending debounced edit now. Returns True if one existed."""
        snapshot = self._pending_snapshot
        if snapshot is None:
            return False
        self.cancel_pending()
        self.commit(snapshot)
        return True

    def cancel_pending(self) -> None:
        """Drop a pending debounced edit without committing it."""
        if self._pending_handle is not None:
            self._pending_handle.cancel()
        self._pending_handle = None
        self._pending_snapshot = None

    def _schedule(self, snapshot: InputSnapshot) -> None:
        self.cancel_pending()
        loop = asyncio.get_running_loop()
        self._pending_snapshot = snapshot
        self._pending_handle = loop.call_later(self._debounce_s, self._fire_pending)

    def _fire_pending(self) -> None:
        snapshot = self._pending_snapshot
        self._pending_handle = None
        self._pending_snapshot = None
        if snapshot is not None:
            self.commit(snapshot)

    # --- Navigation ---

    def undo(self) -> InputSnapshot:
        """Step back one snapshot; returns the current snapshot if at the start.

        Pending free-text is committed first so it can itself be undone.
        """
        self.flush_pending()
        if self._cursor > 0:
            self._cursor -= 1
        return self.current

    def redo(self) -> InputSnapshot:
        """Step forward one snapshot; returns the current snapshot if at the tail."""
        self.flush_pending()
        if self._cursor < len(self._snapshots) - 1:
            self._cursor += 1
        return self.current

    def reset(self, initial: InputSnapshot | None = None) -> None:
        """Replace the whole history with a single snapshot."""
        self.cancel_pending()
        self._snapshots = [initial or InputSnapshot()]
        self._cursor = 0
