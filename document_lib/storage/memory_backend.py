"""Simple memory-backed document adapter

Stores fields in an insertion-ordered dict. Sub-documents are nested
`BasicDocument` instances and arrays are `BasicDocumentList` instances.
"""
from threading import RLock
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple

from .base import DocumentBackend, to_plain


class BasicDocument(DocumentBackend):
    def __init__(self, fields: Optional[Mapping[str, Any]] = None):
        self._lock = RLock()
        self._store: Dict[str, Any] = {}
        self._partial = False
        if fields:
            for key, value in fields.items():
                self._store[key] = value

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._store.get(key)

    def put(self, key: str, value: Any) -> Optional[Any]:
        with self._lock:
            previous = self._store.get(key)
            self._store[key] = value
            return previous

    def remove_field(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._store.pop(key, None)

    def contains_field(self, key: str) -> bool:
        with self._lock:
            return key in self._store

    def keys(self) -> Iterable[str]:
        with self._lock:
            return list(self._store.keys())

    def items(self) -> Iterator[Tuple[str, Any]]:
        with self._lock:
            snapshot = list(self._store.items())
        return iter(snapshot)

    def put_all(self, other: Mapping[str, Any]) -> None:
        with self._lock:
            for key, value in other.items():
                self._store[key] = value

    def is_partial_object(self) -> bool:
        return self._partial

    def mark_as_partial_object(self) -> None:
        # A partial object came from a projected query; saving it back would drop fields.
        self._partial = True

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DocumentBackend):
            return dict(self.items()) == dict(other.items())
        if isinstance(other, Mapping):
            return dict(self.items()) == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BasicDocument({dict(self.items())!r})"


class BasicDocumentList(list):
    """Array value of a document. Elements may be scalars or documents."""

    def to_list(self) -> list:
        return [to_plain(v) for v in self]

    def __repr__(self) -> str:
        return f"BasicDocumentList({list.__repr__(self)})"
