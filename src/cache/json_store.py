# src/cache/json_store.py - v1
"""JSON file-based document cache.

Each entry is one file named ``<prefix>_<fingerprint>.json`` under the
cache root. There is no expiry, size bound or locking; concurrent
writers of the same entry produce identical content, last one wins.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from questgen.cache.base_cache_store import BaseCacheStore
from questgen.cache.models import CACHE_FORMAT_VERSION, CacheEntry
from questgen.core.models import Document
from questgen.storage.local_writer import write_atomic

logger = logging.getLogger(__name__)


class JsonCacheStore(BaseCacheStore):
    """File-based cache store using one JSON file per fingerprint."""

    def __init__(
        self,
        cache_root: str | Path,
        prefix: str = "QG",
        format_version: str = CACHE_FORMAT_VERSION,
    ) -> None:
        self._root = Path(cache_root).expanduser()
        self._prefix = prefix
        self._format_version = format_version

    async def get(self, fingerprint: str) -> list[Document] | None:
        """Return cached documents, or None if missing, corrupt or stale."""
        path = self.entry_path(fingerprint)
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning("Failed to read cache entry %s: %s", path, e)
            return None

        try:
            entry = CacheEntry(**json.loads(raw))
        except (ValueError, TypeError, ValidationError) as e:
            logger.warning("Ignoring unreadable cache entry %s: %s", path, e)
            return None

        if entry.format_version != self._format_version:
            logger.info(
                "Ignoring cache entry %s with format version %s (current %s)",
                path.name, entry.format_version, self._format_version,
            )
            return None
        return entry.documents

    async def put(self, fingerprint: str, documents: list[Document]) -> None:
        """Store a cache entry.

        Raises:
            OSError: If the entry cannot be written.
        """
        entry = CacheEntry(
            fingerprint=fingerprint,
            format_version=self._format_version,
            created_at=datetime.now(timezone.utc),
            documents=documents,
        )
        write_atomic(self.entry_path(fingerprint), entry.model_dump_json())

    def entry_path(self, fingerprint: str) -> Path:
        """Return file path for a fingerprint."""
        safe_key = fingerprint.replace("/", "_").replace("\\", "_")
        return self._root / f"{self._prefix}_{safe_key}.json"
