# src/logging/handlers.py - v1
"""Size-based file rotation for the optional run log.

LOG_ROTATION is checked with parse_size when settings load, before any
document is touched.
"""

from __future__ import annotations

import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

_SIZE_PATTERN = re.compile(r"^(\d+)\s*([KMG])B$", re.IGNORECASE)
_UNIT_BYTES = {"K": 1024, "M": 1024**2, "G": 1024**3}


def parse_size(size: str) -> int:
    """Return the byte count of a size such as ``"10MB"`` or ``"512 kb"``.

    Raises:
        ValueError: If the value is not ``<integer><KB|MB|GB>``.
    """
    match = _SIZE_PATTERN.match(size.strip())
    if match is None:
        raise ValueError(f"Invalid size {size!r}, expected e.g. '10MB'")
    return int(match.group(1)) * _UNIT_BYTES[match.group(2).upper()]


def create_rotating_handler(
    log_file: str,
    rotation: str = "10MB",
    retention: int = 5,
) -> RotatingFileHandler:
    """Open ``log_file`` for appending, rolling over at ``rotation`` bytes."""
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        filename=str(path),
        maxBytes=parse_size(rotation),
        backupCount=retention,
        encoding="utf-8",
    )
