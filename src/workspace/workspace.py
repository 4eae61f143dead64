# src/workspace/workspace.py - v1
"""Editable run inputs (file set and prompt) with undo/redo.

Every mutation states its EditSource and InputSnapshotHistory decides
whether to record it. Undo and redo apply the restored snapshot as a
replay, which the history ignores.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from stylemorph.core.models import InputFile, InputSnapshot, StyleTemplate
from stylemorph.history.snapshot_history import (
    DEFAULT_DEBOUNCE_S,
    EditSource,
    InputSnapshotHistory,
)
from stylemorph.workspace.admission import admit

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILES = 4


class InputWorkspace:
    """Current files and prompt, plus their snapshot history.

    Args:
        max_files: Upper bound on the file set, enforced at admission.
        debounce_s: Quiet period before prompt edits are recorded.
    """

    def __init__(
        self,
        max_files: int = DEFAULT_MAX_FILES,
        debounce_s: float = DEFAULT_DEBOUNCE_S,
    ) -> None:
        self._max_files = max_files
        self._files: tuple[InputFile, ...] = ()
        self._prompt = ""
        self._history = InputSnapshotHistory(debounce_s=debounce_s)

    @property
    def files(self) -> tuple[InputFile, ...]:
        return self._files

    @property
    def prompt(self) -> str:
        return self._prompt

    @property
    def history(self) -> InputSnapshotHistory:
        return self._history

    @property
    def max_files(self) -> int:
        return self._max_files

    @property
    def is_full(self) -> bool:
        return len(self._files) >= self._max_files

    def snapshot(self) -> InputSnapshot:
        return InputSnapshot(files=self._files, prompt=self._prompt)

    # --- Mutations ---

    def add_files(
        self, files: Iterable[InputFile], source: EditSource = EditSource.USER
    ) -> list[InputFile]:
        """Append files up to the limit. Returns the files actually added."""
        admitted = admit(self._files, files, self._max_files)
        if not admitted:
            return []
        self._files = (*self._files, *admitted)
        self._history.record(self.snapshot(), source)
        return admitted

    def remove_file(self, file_id: str, source: EditSource = EditSource.USER) -> bool:
        remaining = tuple(f for f in self._files if f.id != file_id)
        if len(remaining) == len(self._files):
            return False
        self._files = remaining
        self._history.record(self.snapshot(), source)
        return True

    def set_prompt(self, text: str, source: EditSource = EditSource.USER) -> None:
        """Free-text edit; recorded after the debounce period."""
        self._prompt = text
        self._history.record(self.snapshot(), source, debounce=True)

    def select_template(
        self, template: StyleTemplate, source: EditSource = EditSource.USER
    ) -> None:
        self._prompt = template.prompt
        self._history.record(self.snapshot(), source)

    # --- History ---

    def undo(self) -> bool:
        """Restore the previous snapshot. Returns False if nothing to undo."""
        if not self._history.can_undo:
            return False
        self._apply(self._history.undo())
        return True

    def redo(self) -> bool:
        """Reapply the next snapshot. Returns False if nothing to redo.

        A pending prompt edit is committed first, which drops the redo tail.
        """
        self._history.flush_pending()
        if not self._history.can_redo:
            return False
        self._apply(self._history.redo())
        return True

    def reset(self) -> None:
        """Start a new project: no files, no prompt, fresh history."""
        self._files = ()
        self._prompt = ""
        self._history.reset()

    def restore_prompt(self, prompt: str) -> None:
        """Reopen a past run: keep only its prompt, with a one-entry history."""
        self._files = ()
        self._prompt = prompt
        self._history.reset(InputSnapshot(prompt=prompt))

    def _apply(self, snapshot: InputSnapshot) -> None:
        self._files = snapshot.files
        self.set_prompt(snapshot.prompt, source=EditSource.REPLAY)
