"""
Memory Cache

In-process key/value store standing in for the host object cache and
transient storage. Entries expire after their TTL; the oldest entries are
evicted once max_size is exceeded.
"""

import time
import threading
from typing import Any, Callable, Iterator, Optional
from collections import OrderedDict
from dataclasses import dataclass
import logging

from .base import CacheInterface, CacheStats

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """Single cache entry with metadata"""
    value: Any
    created_at: float
    expires_at: Optional[float] = None

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


class MemoryCache(CacheInterface):
    """
    Thread-safe in-memory store with per-entry TTL.

    Features:
    - Optional TTL per entry, falling back to default_ttl
    - Least recently used eviction above max_size
    - Injectable clock so expiry can be driven from tests
    """

    def __init__(
        self,
        max_size: int = 1000,
        default_ttl: Optional[int] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.max_size = max_size
        self.default_ttl = default_ttl
        self._clock = clock
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = threading.RLock()
        self._stats = CacheStats(max_size=max_size)

    def _live_entry(self, key: str) -> Optional[CacheEntry]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            del self._entries[key]
            logger.debug(f"Expired cache entry: {key}")
            return None
        return entry

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._live_entry(key)
            if entry is None:
                self._stats.misses += 1
                return None

            self._entries.move_to_end(key)
            self._stats.hits += 1
            return entry.value

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        with self._lock:
            now = self._clock()
            ttl = ttl or self.default_ttl
            self._entries[key] = CacheEntry(
                value=value,
                created_at=now,
                expires_at=now + ttl if ttl else None,
            )
            self._entries.move_to_end(key)
            self._stats.writes += 1

            while len(self._entries) > self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                self._stats.evictions += 1
                logger.debug(f"Evicted cache entry: {evicted}")

            return True

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def exists(self, key: str) -> bool:
        with self._lock:
            return self._live_entry(key) is not None

    def keys(self) -> Iterator[str]:
        with self._lock:
            now = self._clock()
            live = [k for k, e in self._entries.items() if not e.is_expired(now)]
        return iter(live)

    def clear(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            return count

    def stats(self) -> CacheStats:
        with self._lock:
            self._stats.size = len(self._entries)
            return self._stats

    def cleanup_expired(self) -> int:
        """Remove all expired entries"""
        with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if e.is_expired(now)]
            for key in expired:
                del self._entries[key]
            return len(expired)
