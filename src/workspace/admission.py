# src/workspace/admission.py - v1
"""Turning candidate uploads into InputFiles within the file-count limit."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from stylemorph.core.models import InputFile

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".html", ".htm", ".txt")


def admit(
    current: Sequence[InputFile],
    candidates: Iterable[InputFile],
    max_files: int,
) -> list[InputFile]:
    """Return the prefix of ``candidates`` that fits in the remaining slots.

    Excess candidates are dropped silently (logged only).
    """
    remaining = max(max_files - len(current), 0)
    candidates = list(candidates)
    admitted = candidates[:remaining]
    if len(candidates) > remaining:
        logger.info(
            "File limit %d reached: dropped %d of %d new files",
            max_files, len(candidates) - remaining, len(candidates),
        )
    return admitted


def is_supported(path: Path, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> bool:
    return path.suffix.lower() in extensions


def read_input_files(
    paths: Iterable[Path],
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
) -> list[InputFile]:
    """Read supported files from disk, in the order given.

    Unsupported extensions are skipped; unreadable files raise OSError.
    """
    files: list[InputFile] = []
    for path in paths:
        path = Path(path)
        if not is_supported(path, extensions):
            logger.warning("Skipping unsupported file %s", path.name)
            continue
        files.append(InputFile(name=path.name, content=path.read_text(encoding="utf-8")))
    return files
