# src/cache/fingerprint.py - v1
"""Directory fingerprinting for the document cache.

The fingerprint is the MD5 of every file's relative path and modification
time. It is a cache key, not an integrity check: a file whose content
changes while its mtime stays the same keeps the same fingerprint.
"""

from __future__ import annotations

import hashlib
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

_PAIR_DELIMITER = ","


def compute_directory_fingerprint(directory: str | Path) -> str:
    """Hash the (relative path, mtime) pairs of all files under ``directory``.

    Args:
        directory: Root directory to fingerprint (walked recursively).

    Returns:
        32-character hex MD5 digest. An empty directory hashes the empty string.

    Raises:
        OSError: If the directory is missing, not a directory, or unreadable.
    """
    root = Path(directory)
    pairs = [f"{rel}:{mtime_ns}" for rel, mtime_ns in _list_files(root)]
    digest = hashlib.md5(_PAIR_DELIMITER.join(pairs).encode("utf-8")).hexdigest()  # noqa: S324
    logger.debug("Fingerprinted %s: %d files -> %s", root, len(pairs), digest)
    return digest


def _list_files(root: Path) -> list[tuple[str, int]]:
    """Return sorted (relative POSIX path, mtime_ns) for every file under root."""
    if not root.exists():
        raise FileNotFoundError(f"Directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    files: list[tuple[str, int]] = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        for name in filenames:
            path = Path(dirpath) / name
            rel = path.relative_to(root).as_posix()
            files.append((rel, path.stat().st_mtime_ns))

    # os.walk order depends on the filesystem, sort for a stable key
    files.sort(key=lambda item: item[0])
    return files


def _raise_walk_error(error: OSError) -> None:
    raise error
