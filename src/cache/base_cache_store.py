# src/cache/base_cache_store.py - v1
"""Abstract document cache interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from questgen.core.models import Document


class BaseCacheStore(ABC):
    """Maps a directory fingerprint to its preprocessed document set."""

    @abstractmethod
    async def get(self, fingerprint: str) -> list[Document] | None:
        """Return cached documents, or None on a miss. Never raises for a miss."""

    @abstractmethod
    async def put(self, fingerprint: str, documents: list[Document]) -> None:
        """Store documents, overwriting any existing entry."""
