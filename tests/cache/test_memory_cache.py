#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Unit Tests for the In-Memory Cache

Tests cover:
- Basic operations (set, get, delete, exists)
- TTL expiry with an injected clock
- LRU eviction
- Statistics tracking
"""

import threading

import pytest

from orbitools.cache import MemoryCache


@pytest.fixture
def cache(clock):
    return MemoryCache(max_size=3, clock=clock)


class TestBasicOperations:
    """Test set/get/delete"""

    def test_set_get_roundtrip(self, cache):
        cache.set("a", {"x": 1})
        assert cache.get("a") == {"x": 1}

    def test_missing_key(self, cache):
        assert cache.get("missing") is None
        assert not cache.exists("missing")

    def test_delete(self, cache):
        cache.set("a", 1)
        assert cache.delete("a") is True
        assert cache.delete("a") is False
        assert cache.get("a") is None

    def test_clear_returns_count(self, cache):
        cache.set("a", 1)
        cache.set("b", 2)
        assert cache.clear() == 2
        assert list(cache.keys()) == []

    def test_falsy_values_are_hits(self, cache):
        """Empty containers are stored values, not misses"""
        cache.set("empty", ())
        assert cache.get("empty") == ()


class TestExpiry:
    """Test TTL handling"""

    def test_entry_expires(self, cache, clock):
        cache.set("a", 1, ttl=10)
        clock.advance(9)
        assert cache.get("a") == 1
        clock.advance(1)
        assert cache.get("a") is None

    def test_no_ttl_never_expires(self, cache, clock):
        cache.set("a", 1)
        clock.advance(10 ** 9)
        assert cache.get("a") == 1

    def test_default_ttl(self, clock):
        cache = MemoryCache(default_ttl=5, clock=clock)
        cache.set("a", 1)
        clock.advance(5)
        assert not cache.exists("a")

    def test_keys_skip_expired(self, cache, clock):
        cache.set("short", 1, ttl=1)
        cache.set("long", 2, ttl=100)
        clock.advance(2)
        assert list(cache.keys()) == ["long"]

    def test_cleanup_expired(self, cache, clock):
        cache.set("a", 1, ttl=1)
        cache.set("b", 2, ttl=1)
        cache.set("c", 3)
        clock.advance(1)
        assert cache.cleanup_expired() == 2
        assert cache.stats().size == 1


class TestEviction:
    """Test LRU eviction above max_size"""

    def test_oldest_evicted(self, cache):
        for key in ("a", "b", "c", "d"):
            cache.set(key, key)
        assert cache.get("a") is None
        assert cache.get("d") == "d"
        assert cache.stats().evictions == 1

    def test_recently_read_survives(self, cache):
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("c", 3)
        cache.get("a")
        cache.set("d", 4)
        assert cache.get("a") == 1
        assert cache.get("b") is None


class TestStats:
    """Test statistics tracking"""

    def test_hits_and_misses(self, cache):
        cache.set("a", 1)
        cache.get("a")
        cache.get("a")
        cache.get("missing")
        stats = cache.stats()
        assert stats.hits == 2
        assert stats.misses == 1
        assert stats.writes == 1
        assert stats.hit_rate == pytest.approx(2 / 3)
        assert stats.to_dict()["hit_rate"] == "66.7%"

    def test_empty_hit_rate(self, cache):
        assert cache.stats().hit_rate == 0.0


class TestThreadSafety:
    """Test concurrent access"""

    def test_concurrent_writes(self):
        cache = MemoryCache(max_size=10_000)

        def worker(n):
            for i in range(200):
                cache.set(f"{n}:{i}", i)
                cache.get(f"{n}:{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert cache.stats().size == 1600
