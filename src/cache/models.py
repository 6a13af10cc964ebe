# src/cache/models.py - v1
"""Cache domain models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from questgen.core.models import Document

# Bump when loaders or preprocessing change the shape of cached documents.
CACHE_FORMAT_VERSION = "1"


class CacheEntry(BaseModel):
    """Preprocessed document set stored under a directory fingerprint."""

    fingerprint: str
    format_version: str = CACHE_FORMAT_VERSION
    created_at: datetime
    documents: list[Document] = Field(default_factory=list)
