# src/storage/local_writer.py - v1
"""Local filesystem writes with whole-file atomic replace.

Content is written to a sibling temporary file in the target directory
and renamed over the target, so readers only ever see the previous
complete file or the new complete file.
"""

from __future__ import annotations

import asyncio
import os
import tempfile
from pathlib import Path


def write_atomic(path: str | Path, content: bytes | str) -> None:
    """Atomically replace ``path`` with ``content``.

    Raises:
        OSError: If the temporary file cannot be written or renamed.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    data = content.encode("utf-8") if isinstance(content, str) else content

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
    )
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class LocalWriter:
    """Write outputs to the local filesystem."""

    async def write(self, path: str | Path, content: bytes | str) -> None:
        """Atomically write content to a local file path."""
        await asyncio.to_thread(write_atomic, path, content)
