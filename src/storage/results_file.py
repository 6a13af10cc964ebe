# src/storage/results_file.py - v1
"""Incremental persistence of generated questions.

Holds one slot per input document and rewrites the whole JSON array
after every update. Writes are serialized with an asyncio.Lock and the
snapshot is taken under the lock, so the file on disk only ever grows
in completed slots.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from questgen.storage.local_writer import LocalWriter

logger = logging.getLogger(__name__)


class ResultsFile:
    """Index-stable results array backed by a JSON file."""

    def __init__(self, output_path: str | Path, writer: LocalWriter | None = None) -> None:
        self._path = Path(output_path)
        self._writer = writer or LocalWriter()
        self._slots: list[list[str] | None] = []
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def initialize(self, size: int) -> None:
        """Reset to ``size`` empty slots and write the initial snapshot."""
        async with self._lock:
            self._slots = [None] * size
            await self._flush()

    async def set(self, index: int, questions: list[str]) -> None:
        """Store questions at a document's slot and rewrite the file.

        Raises:
            OSError: If the file cannot be rewritten. The slot keeps its
                previous value.
        """
        async with self._lock:
            previous = self._slots[index]
            self._slots[index] = list(questions)
            try:
                await self._flush()
            except OSError:
                self._slots[index] = previous
                raise

    async def _flush(self) -> None:
        payload = json.dumps(self._slots, indent=2, ensure_ascii=False)
        await self._writer.write(self._path, payload)
        logger.debug(
            "Wrote %d/%d completed slots to %s",
            sum(1 for s in self._slots if s is not None), len(self._slots), self._path,
        )
