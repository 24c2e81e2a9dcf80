"""
Tests for the in-memory and SQLite enrichment caches.

Run: pytest tests/test_cache.py -v
"""

from __future__ import annotations

import pytest

from insider_risk_index.cache import MemoryCache, SqliteCache


@pytest.fixture(params=["memory", "sqlite"])
def cache(request, tmp_path, clock):
    if request.param == "memory":
        return MemoryCache(ttl_hours=1, clock=clock)
    return SqliteCache(tmp_path / "cache", ttl_hours=1, clock=clock)


def test_set_then_get(cache):
    cache.set("k", {"a": 1})
    assert cache.get("k") == {"a": 1}
    assert cache.get("missing") is None


def test_entries_expire_after_ttl(cache, clock):
    cache.set("k", {"a": 1})
    assert cache.expires_at("k") == clock.now + 3600
    clock.advance(3599)
    assert cache.get("k") == {"a": 1}
    clock.advance(1)
    assert cache.get("k") is None


def test_stale_reads_survive_expiry(cache, clock):
    cache.set("k", [1, 2, 3])
    clock.advance(7200)
    assert cache.get("k") is None
    assert cache.get_stale("k") == [1, 2, 3]


def test_invalidate_one_or_all(cache):
    cache.set("a", 1)
    cache.set("b", 2)
    cache.invalidate("a")
    assert cache.get_stale("a") is None
    assert cache.get("b") == 2
    cache.invalidate()
    assert cache.get_stale("b") is None
    assert cache.expires_at("b") is None


def test_sqlite_cache_persists_across_instances(tmp_path, clock):
    SqliteCache(tmp_path, clock=clock).set("k", {"v": 1})
    assert SqliteCache(tmp_path, clock=clock).get("k") == {"v": 1}


def test_sqlite_clear_expired(tmp_path, clock):
    cache = SqliteCache(tmp_path, ttl_hours=1, clock=clock)
    cache.set("old", 1)
    clock.advance(3600)
    cache.set("new", 2)
    assert cache.clear_expired() == 1
    assert cache.get_stale("old") is None
    assert cache.get("new") == 2
