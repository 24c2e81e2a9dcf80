"""
Caching layer for external enrichment data.

Two interchangeable stores share one contract:
  - get(key)          → value if present and unexpired, else None
  - get_stale(key)    → value if present, ignoring expiry (last-known-good)
  - set(key, value)   → store with expiry = now + ttl
  - invalidate(key)   → drop one key, or everything when key is None
  - expires_at(key)   → expiry timestamp (epoch seconds) or None

Both take a `clock` callable so tests can drive expiry deterministically.
Caches are owned by the caller; nothing here is a module-level singleton.
"""

from __future__ import annotations

import json
import logging
import sqlite3
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

logger = logging.getLogger("insider_risk_index.cache")

Clock = Callable[[], float]


@dataclass
class CacheEntry:
    value: Any
    cached_at: float
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class MemoryCache:
    """In-process cache with TTL-based expiry."""

    def __init__(self, ttl_hours: float = 24, clock: Clock = time.time):
        self.ttl_seconds = ttl_hours * 3600
        self.clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self.clock()):
            logger.debug(f"Cache expired for key: {key}")
            return None
        logger.debug(f"Cache hit for key: {key}")
        return entry.value

    def get_stale(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        return entry.value if entry else None

    def set(self, key: str, value: Any) -> None:
        now = self.clock()
        self._entries[key] = CacheEntry(value, now, now + self.ttl_seconds)
        logger.debug(f"Cached key: {key}")

    def invalidate(self, key: Optional[str] = None) -> None:
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)

    def expires_at(self, key: str) -> Optional[float]:
        entry = self._entries.get(key)
        return entry.expires_at if entry else None


class SqliteCache:
    """
    Persistent cache backed by SQLite.
    Features:
      - TTL-based expiration
      - Last-known-good reads across process restarts
      - Connection-per-call, safe to share between coroutines
      - Stores values as JSON
    """

    def __init__(self, cache_dir: str | Path, ttl_hours: float = 24, clock: Clock = time.time):
        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.db_path = self.cache_dir / "enrichment_cache.db"
        self.ttl_seconds = ttl_hours * 3600
        self.clock = clock
        self._init_db()

    def _init_db(self):
        """Initialize the cache database schema."""
        with sqlite3.connect(str(self.db_path)) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS cache_entries (
                    key TEXT PRIMARY KEY,
                    data TEXT NOT NULL,
                    cached_at REAL NOT NULL,
                    expires_at REAL NOT NULL
                )
            """)
            conn.commit()

    def _row(self, key: str) -> Optional[tuple[str, float]]:
        with sqlite3.connect(str(self.db_path)) as conn:
            return conn.execute(
                "SELECT data, expires_at FROM cache_entries WHERE key = ?",
                (key,),
            ).fetchone()

    def get(self, key: str) -> Optional[Any]:
        row = self._row(key)
        if row is None:
            return None
        data_json, expires_at = row
        if self.clock() >= expires_at:
            logger.debug(f"Cache expired for key: {key}")
            return None
        logger.debug(f"Cache hit for key: {key}")
        return json.loads(data_json)

    def get_stale(self, key: str) -> Optional[Any]:
        row = self._row(key)
        return json.loads(row[0]) if row else None

    def set(self, key: str, value: Any) -> None:
        now = self.clock()
        with sqlite3.connect(str(self.db_path)) as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO cache_entries (key, data, cached_at, expires_at)
                VALUES (?, ?, ?, ?)
                """,
                (key, json.dumps(value, default=str), now, now + self.ttl_seconds),
            )
            conn.commit()
        logger.debug(f"Cached key: {key}")

    def invalidate(self, key: Optional[str] = None) -> None:
        with sqlite3.connect(str(self.db_path)) as conn:
            if key is None:
                conn.execute("DELETE FROM cache_entries")
            else:
                conn.execute("DELETE FROM cache_entries WHERE key = ?", (key,))
            conn.commit()

    def expires_at(self, key: str) -> Optional[float]:
        row = self._row(key)
        return row[1] if row else None

    def clear_expired(self) -> int:
        """Remove all expired entries. Returns the number removed."""
        with sqlite3.connect(str(self.db_path)) as conn:
            deleted = conn.execute(
                "DELETE FROM cache_entries WHERE expires_at <= ?",
                (self.clock(),),
            ).rowcount
            conn.commit()
        if deleted:
            logger.info(f"Cleared {deleted} expired cache entries.")
        return deleted
