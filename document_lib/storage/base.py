"""Document adapter interface definitions.

Defines the DocumentBackend abstract class that the accessor layer wraps.
A backend is the raw, untyped key/value tree: it stores whatever it is
given and performs no normalization or type checks of its own.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Optional, Tuple

from .interfaces import DocumentProtocol


class DocumentBackend(ABC):
    """Abstract document adapter.

    Implementations must preserve insertion order when iterating and must
    keep the position of a key when it is overwritten.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the value stored under `key`, or None when absent."""

    @abstractmethod
    def put(self, key: str, value: Any) -> Optional[Any]:
        """Store `value` under `key` and return the previous value, if any."""

    @abstractmethod
    def remove_field(self, key: str) -> Optional[Any]:
        """Remove `key`. Must not raise when the key does not exist."""

    @abstractmethod
    def contains_field(self, key: str) -> bool:
        """Return True if `key` exists (even when its value is None)."""

    @abstractmethod
    def keys(self) -> Iterable[str]:
        """Return the keys in insertion order."""

    def items(self) -> Iterator[Tuple[str, Any]]:
        for key in list(self.keys()):
            yield key, self.get(key)

    def to_dict(self) -> dict:
        """Deep copy into plain dicts and lists."""
        return {key: to_plain(value) for key, value in self.items()}

    def __iter__(self) -> Iterator[str]:
        return iter(list(self.keys()))

    def __len__(self) -> int:
        return len(list(self.keys()))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains_field(key)


def to_plain(value: Any) -> Any:
    if isinstance(value, DocumentBackend):
        return value.to_dict()
    if isinstance(value, DocumentProtocol):
        return {key: to_plain(value.get(key)) for key in value.keys()}
    if isinstance(value, list):
        return [to_plain(v) for v in value]
    return value
