# src/export/archive.py - v1
"""Zip export of generated artifacts: one flat entry per artifact."""

from __future__ import annotations

import io
import logging
import zipfile
from collections.abc import Sequence
from pathlib import Path

from stylemorph.core.models import GeneratedArtifact

logger = logging.getLogger(__name__)


def build_archive(artifacts: Sequence[GeneratedArtifact]) -> bytes:
    """Zip artifacts using each file name as the entry path.

    Directory components in a file name are dropped so entries stay flat.
    """
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for artifact in artifacts:
            entry = Path(artifact.file_name).name
            zf.writestr(entry, artifact.content)
    return buffer.getvalue()


def write_archive(artifacts: Sequence[GeneratedArtifact], path: Path | str) -> Path:
    """Write the archive to ``path`` and return the resolved path."""
    target = Path(path).expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(build_archive(artifacts))
    logger.info("Wrote %d artifacts to %s", len(artifacts), target)
    return target
