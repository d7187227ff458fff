"""Factory functions for building typed documents."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Tuple

from document_lib.storage.interfaces import DocumentProtocol

from .accessor import TypedDocument
from .builder import DocumentBuilder
from .normalize import normalize


def empty() -> TypedDocument:
    return TypedDocument()


def new_builder() -> DocumentBuilder:
    return DocumentBuilder()


def of(*pairs: Tuple[str, Any], **fields: Any) -> TypedDocument:
    """Build a document from ``(key, value)`` pairs, then keyword fields."""
    return DocumentBuilder().add_all(pairs).add_all(fields.items()).result()


def from_pairs(pairs: Iterable[Tuple[str, Any]]) -> TypedDocument:
    return DocumentBuilder().add_all(pairs).result()


def to_document(value: Any) -> DocumentProtocol:
    """Canonical document for a TypedDocument, a document, a mapping or pairs.

    Documents are returned as-is (not copied); mappings and pairs produce a
    new BasicDocument.
    """
    if isinstance(value, TypedDocument):
        return value.as_document()
    if isinstance(value, DocumentProtocol):
        return value
    if isinstance(value, Mapping):
        return normalize(value)
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise TypeError(f"Cannot convert {type(value).__name__} to a document")
    return from_pairs(value).as_document()
