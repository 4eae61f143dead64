# src/logging/handlers.py - v1
"""File handler for the optional log file set by LOG_FILE.

LOG_ROTATION is a size such as ``"10MB"``, ``"512KB"`` or a bare byte
count. ``"0"`` or ``"none"`` keeps a single, never-rotated file.
"""

from __future__ import annotations

import logging
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

_SIZE = re.compile(r"^(\d+)\s*(B|KB|MB|GB)?$", re.IGNORECASE)
_MULTIPLIERS = {"B": 1, "KB": 1024, "MB": 1024**2, "GB": 1024**3}


def _parse_size(size_str: str) -> int:
    """Parse '10MB', '512kb' or '1048576' into bytes. 'none' means 0."""
    text = size_str.strip()
    if text.lower() == "none":
        return 0
    match = _SIZE.match(text)
    if not match:
        raise ValueError(f"Invalid size format: {size_str!r}. Use e.g. '10MB'.")
    unit = (match.group(2) or "B").upper()
    return int(match.group(1)) * _MULTIPLIERS[unit]


def create_rotating_handler(
    log_file: str | Path,
    rotation: str = "10MB",
    retention: int = 5,
) -> logging.FileHandler:
    """Create the log-file handler.

    Args:
        log_file: Path to log file; parent directories are created.
        rotation: Max file size before rotation, or "0"/"none" for no rotation.
        retention: Number of rotated files to keep.
    """
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)

    max_bytes = _parse_size(rotation)
    if max_bytes == 0:
        return logging.FileHandler(str(path), encoding="utf-8")

    return RotatingFileHandler(
        filename=str(path),
        maxBytes=max_bytes,
        backupCount=retention,
        encoding="utf-8",
    )
