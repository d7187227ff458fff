"""Typed access to nested documents."""

from .accessor import TypedDocument, TypedList
from .builder import DocumentBuilder
from .factory import empty, from_pairs, new_builder, of, to_document
from .normalize import normalize, unwrap_optional
from .values import NOTHING, Some, ValueKind, kind_of

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
    "unwrap_optional",
    "NOTHING",
    "Some",
    "ValueKind",
    "kind_of",
]
