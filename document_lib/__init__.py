"""Typed, dot-path accessors over schema-less documents."""

from .document import (
    NOTHING,
    DocumentBuilder,
    Some,
    TypedDocument,
    TypedList,
    ValueKind,
    empty,
    from_pairs,
    new_builder,
    normalize,
    of,
    to_document,
)
from .errors import ConfigError, DocumentCastError, DocumentError, NoSuchElementError
from .storage import BasicDocument, BasicDocumentList, DocumentBackend, DocumentProtocol

__all__ = [
    "TypedDocument",
    "TypedList",
    "DocumentBuilder",
    "empty",
    "from_pairs",
    "new_builder",
    "of",
    "to_document",
    "normalize",
    "NOTHING",
    "Some",
    "ValueKind",
    "DocumentError",
    "NoSuchElementError",
    "DocumentCastError",
    "ConfigError",
    "BasicDocument",
    "BasicDocumentList",
    "DocumentBackend",
    "DocumentProtocol",
]
