# src/export/commands.py - v1
"""Command bindings: save-all-artifacts, undo, redo.

Each command is a no-op returning False when its precondition is unmet.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from stylemorph.core.models import GeneratedArtifact
from stylemorph.export.archive import write_archive
from stylemorph.workspace.workspace import InputWorkspace

logger = logging.getLogger(__name__)

KEY_BINDINGS: dict[str, str] = {
    "ctrl+s": "save_all",
    "meta+s": "save_all",
    "ctrl+z": "undo",
    "meta+z": "undo",
    "ctrl+y": "redo",
    "meta+y": "redo",
}


class CommandBindings:
    """Dispatches named commands to the workspace and the archive writer.

    Args:
        workspace: Inputs with undo/redo history.
        artifacts: Callable returning the artifacts currently shown.
        archive_path: Where ``save_all`` writes the zip archive.
    """

    def __init__(
        self,
        workspace: InputWorkspace,
        artifacts: Callable[[], Sequence[GeneratedArtifact]],
        archive_path: Path,
    ) -> None:
        self._workspace = workspace
        self._artifacts = artifacts
        self._archive_path = archive_path

    def save_all(self) -> bool:
        artifacts = self._artifacts()
        if not artifacts:
            return False
        write_archive(artifacts, self._archive_path)
        return True

    def undo(self) -> bool:
        return self._workspace.undo()

    def redo(self) -> bool:
        return self._workspace.redo()

    def dispatch(self, key: str) -> bool:
        """Run the command bound to a key chord such as ``"ctrl+z"``."""
        command = KEY_BINDINGS.get(key.lower())
        if command is None:
            return False
        logger.debug("Key %s -> %s", key, command)
        return getattr(self, command)()
