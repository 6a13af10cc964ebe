# src/cache/cache_factory.py - v1
"""Factory for cache store instantiation."""

from __future__ import annotations

from questgen.cache.base_cache_store import BaseCacheStore
from questgen.cache.json_store import JsonCacheStore
from questgen.config.settings import Settings


def create_cache_store(settings: Settings) -> BaseCacheStore | None:
    """Instantiate the document cache, or None when caching is disabled."""
    if not settings.cache_enabled:
        return None
    return JsonCacheStore(
        cache_root=settings.cache_root, prefix=settings.cache_prefix
    )
