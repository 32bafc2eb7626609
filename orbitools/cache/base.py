"""
Base Cache Interface

Abstract key/value store with per-entry expiry. Backends store raw
string keys; namespacing is layered on top by NamespacedCache.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, Optional
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class CacheStats:
    """Cache statistics"""
    hits: int = 0
    misses: int = 0
    writes: int = 0
    evictions: int = 0
    size: int = 0
    max_size: int = 0
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    def to_dict(self) -> Dict:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": f"{self.hit_rate:.1%}",
            "writes": self.writes,
            "evictions": self.evictions,
            "size": self.size,
            "max_size": self.max_size,
        }


class CacheInterface(ABC):
    """Abstract cache backend"""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Value for key, or None when missing or expired"""

    @abstractmethod
    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """Store value; ttl in seconds, None or 0 = backend default"""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove key, True if something was removed"""

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check if a live (non-expired) entry exists"""

    @abstractmethod
    def keys(self) -> Iterator[str]:
        """Iterate live keys"""

    @abstractmethod
    def clear(self) -> int:
        """Clear all entries, return count cleared"""

    @abstractmethod
    def stats(self) -> CacheStats:
        """Get cache statistics"""
