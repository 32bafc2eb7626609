"""
Cache Module

Exports:
- CacheInterface, CacheStats (base cache interface)
- MemoryCache (in-memory TTL store)
- NamespacedCache (typed, namespace-scoped view over a backend)
- create_object_cache, create_transients (stores used across the package)
"""

from typing import Optional

from .base import CacheInterface, CacheStats
from .memory_cache import MemoryCache
from .namespaced import NamespacedCache

from config.constants import CACHE_EXPIRATION, CACHE_GROUP, TRANSIENT_GROUP


def create_object_cache(
    backend: Optional[CacheInterface] = None,
    default_ttl: int = CACHE_EXPIRATION,
) -> NamespacedCache:
    """Object cache used for resolved configuration"""
    return NamespacedCache(backend or MemoryCache(), CACHE_GROUP, default_ttl=default_ttl)


def create_transients(backend: Optional[CacheInterface] = None) -> NamespacedCache:
    """Transient store used for notices and check timestamps"""
    return NamespacedCache(backend or MemoryCache(), TRANSIENT_GROUP)


__all__ = [
    'CacheInterface',
    'CacheStats',
    'MemoryCache',
    'NamespacedCache',
    'create_object_cache',
    'create_transients',
]
