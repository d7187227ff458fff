"""Value normalization applied before anything reaches a document adapter."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Tuple

from document_lib.storage.interfaces import DocumentProtocol
from document_lib.storage.memory_backend import BasicDocument

from .values import NOTHING, Some, _Nothing


def normalize(value: Any) -> Any:
    """Convert `value` into its canonical stored form.

    - TypedDocument / TypedList: unwrapped to the underlying document or list
    - plain mappings: converted to BasicDocument, recursively
    - Some(x): Some(normalize(x)); NOTHING stays NOTHING
    - everything else is returned unchanged

    Already-canonical values come back as the same object.
    """
    from .accessor import TypedDocument, TypedList

    if isinstance(value, TypedDocument):
        return value.as_document()
    if isinstance(value, TypedList):
        return value.as_list()
    if isinstance(value, Some):
        return Some(normalize(value.value))
    if isinstance(value, Mapping) and not isinstance(value, DocumentProtocol):
        return _mapping_to_document(value)
    return value


def unwrap_optional(value: Any) -> Any:
    """Some(x) -> x, NOTHING -> None, anything else unchanged.

    Nested wrappers are stripped completely: Some(Some(NOTHING)) -> None.
    """
    while isinstance(value, Some):
        value = value.value
    if isinstance(value, _Nothing):
        return None
    return value


def _mapping_to_document(root: Mapping) -> BasicDocument:
    # Nested mappings are handled with an explicit stack rather than recursion.
    result = BasicDocument()
    pending: List[Tuple[Mapping, BasicDocument]] = [(root, result)]
    while pending:
        source, target = pending.pop()
        for key, value in source.items():
            if isinstance(value, Mapping) and not isinstance(value, DocumentProtocol):
                child = BasicDocument()
                target.put(key, child)
                pending.append((value, child))
            else:
                target.put(key, unwrap_optional(normalize(value)))
    return result


__all__ = ["normalize", "unwrap_optional", "NOTHING", "Some"]
