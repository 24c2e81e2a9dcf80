"""Cache package — injectable TTL caches for enrichment data."""

from .store import CacheEntry, MemoryCache, SqliteCache

__all__ = ["CacheEntry", "MemoryCache", "SqliteCache"]
