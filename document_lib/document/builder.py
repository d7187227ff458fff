"""Incremental document construction."""
from __future__ import annotations

import logging
from typing import Any, Iterable, Tuple

from document_lib.storage.memory_backend import BasicDocument

from .accessor import TypedDocument
from .normalize import normalize, unwrap_optional

logger = logging.getLogger(__name__)


class DocumentBuilder:
    """Accumulates key/value pairs into a document.

    Values are normalized as they are added. Insertion order is kept and a
    repeated key keeps its first position with the last value. `result`
    does not reset the builder; call `clear` before reusing it.
    """

    def __init__(self) -> None:
        self._elems = BasicDocument()

    def add(self, key: str, value: Any) -> 'DocumentBuilder':
        self._elems.put(key, unwrap_optional(normalize(value)))
        return self

    def add_all(self, pairs: Iterable[Tuple[str, Any]]) -> 'DocumentBuilder':
        for key, value in pairs:
            self.add(key, value)
        return self

    def __iadd__(self, kv: Tuple[str, Any]) -> 'DocumentBuilder':
        key, value = kv
        return self.add(key, value)

    def clear(self) -> None:
        self._elems = BasicDocument()

    def result(self) -> TypedDocument:
        logger.debug('Built document with %d fields', len(self._elems))
        return TypedDocument(self._elems)
