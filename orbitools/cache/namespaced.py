"""
Namespaced Cache

Typed view over a shared backend. All key derivation happens here so
callers never concatenate cache key strings themselves.

Usage:
    backend = MemoryCache()
    objects = NamespacedCache(backend, "orbitools", default_ttl=604800)
    transients = NamespacedCache(backend, "transient")

    objects.set("spacing_config", spacings)
    objects.get("spacing_config")
    objects.clear()   # only entries under "orbitools:"
"""

import logging
from typing import Generic, Optional, TypeVar

from .base import CacheInterface

logger = logging.getLogger(__name__)

T = TypeVar("T")

SEPARATOR = ":"


class NamespacedCache(Generic[T]):
    """Cache scoped to one namespace of a backend"""

    def __init__(
        self,
        backend: CacheInterface,
        namespace: str,
        default_ttl: Optional[int] = None,
    ):
        if not namespace or SEPARATOR in namespace:
            raise ValueError(f"Invalid cache namespace: {namespace!r}")
        self.backend = backend
        self.namespace = namespace
        self.default_ttl = default_ttl

    def _key(self, key: str) -> str:
        return f"{self.namespace}{SEPARATOR}{key}"

    def get(self, key: str) -> Optional[T]:
        return self.backend.get(self._key(key))

    def set(self, key: str, value: T, ttl: Optional[int] = None) -> bool:
        return self.backend.set(self._key(key), value, ttl or self.default_ttl)

    def delete(self, key: str) -> bool:
        return self.backend.delete(self._key(key))

    def exists(self, key: str) -> bool:
        return self.backend.exists(self._key(key))

    def clear(self) -> int:
        """Remove every entry in this namespace, return count removed"""
        prefix = self._key("")
        removed = 0
        for key in list(self.backend.keys()):
            if key.startswith(prefix) and self.backend.delete(key):
                removed += 1
        logger.debug(f"Cleared {removed} entries from cache namespace '{self.namespace}'")
        return removed
