# src/ingestion/pipeline.py - v1
"""Ingestion: fingerprint -> cache lookup -> (miss) load + preprocess -> cache store.

The cache holds post-preprocessing documents, so a hit is returned as-is
and is indistinguishable from what a miss would produce for the same
directory state.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Protocol

from questgen.cache.base_cache_store import BaseCacheStore
from questgen.cache.fingerprint import compute_directory_fingerprint
from questgen.core.models import Document
from questgen.ingestion.preprocessor import preprocess_documents
from questgen.logging.context import set_phase

logger = logging.getLogger(__name__)


class DocumentLoader(Protocol):
    """Anything that loads raw documents for one directory."""

    async def load(self) -> list[Document]: ...


class IngestionPipeline:
    """Produces the preprocessed document set for a directory.

    Args:
        loader: Loader bound to the directory being ingested.
        cache_store: Document cache, or None to disable caching entirely.
    """

    def __init__(
        self,
        loader: DocumentLoader,
        cache_store: BaseCacheStore | None = None,
    ) -> None:
        self._loader = loader
        self._cache_store = cache_store
        self.cache_hit: bool | None = None

    async def ingest(self, directory: str | Path) -> list[Document]:
        """Return preprocessed documents for ``directory``.

        Raises:
            OSError: If the directory cannot be read.
        """
        set_phase("ingestion")
        if self._cache_store is None:
            self.cache_hit = None
            return await self._load_and_preprocess()

        fingerprint = await asyncio.to_thread(compute_directory_fingerprint, directory)

        cached = await self._cache_store.get(fingerprint)
        if cached is not None:
            self.cache_hit = True
            logger.info(
                "[%s] Cache hit, skipping document loading and pre-processing (%d documents)",
                fingerprint, len(cached),
            )
            return cached

        self.cache_hit = False
        logger.info("[%s] Loading documents from %s and pre-processing", fingerprint, directory)
        documents = await self._load_and_preprocess()

        try:
            await self._cache_store.put(fingerprint, documents)
        except OSError as e:
            logger.warning("[%s] Failed to write cache entry: %s", fingerprint, e)
        else:
            logger.info("[%s] Cached %d documents from %s", fingerprint, len(documents), directory)

        return documents

    async def _load_and_preprocess(self) -> list[Document]:
        return preprocess_documents(await self._loader.load())
