"""
Provider Registry

Explicit replacement for named-callback registration: providers are
registered under a key and resolved by that key.

Usage:
    fields = Registry[Type[FieldType]]("field type")
    fields.register("text", TextField)
    fields.resolve("text")      # -> TextField
    fields.resolve("missing")   # raises RegistryError
"""

import logging
from typing import Dict, Generic, Iterator, List, Optional, TypeVar

from orbitools import OrbitoolsError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RegistryError(OrbitoolsError, KeyError):
    """Raised when resolving a key nothing was registered under"""
    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"No {kind} registered for '{key}'")

    def __str__(self) -> str:
        return self.args[0]


class Registry(Generic[T]):
    """Key -> provider mapping with explicit lookup failures"""

    def __init__(self, kind: str = "provider"):
        self.kind = kind
        self._providers: Dict[str, T] = {}

    def register(self, key: str, provider: T, replace: bool = True) -> None:
        if not key:
            raise ValueError(f"{self.kind} key must be a non-empty string")
        if key in self._providers:
            if not replace:
                raise ValueError(f"{self.kind} '{key}' is already registered")
            logger.debug(f"Replacing {self.kind} '{key}'")
        self._providers[key] = provider

    def unregister(self, key: str) -> bool:
        return self._providers.pop(key, None) is not None

    def resolve(self, key: str) -> T:
        try:
            return self._providers[key]
        except KeyError:
            raise RegistryError(self.kind, key) from None

    def get(self, key: str, default: Optional[T] = None) -> Optional[T]:
        return self._providers.get(key, default)

    def is_registered(self, key: str) -> bool:
        return key in self._providers

    def keys(self) -> List[str]:
        return list(self._providers)

    def __contains__(self, key: object) -> bool:
        return key in self._providers

    def __iter__(self) -> Iterator[str]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)
