"""Dot-path traversal over nested documents.

A path such as ``"a.b.c"`` is split at the first dot into the next key and
the remaining path. Every intermediate key must hold a document; the walk
stops at the first segment that is missing or not document-shaped. Walks
are loops, so stack use does not grow with path depth.

Functions take a `TypedDocument` and wrap intermediate documents with the
same class.
"""
from __future__ import annotations

from typing import Any, Optional, Tuple

from document_lib.errors import DocumentCastError, NoSuchElementError

from .values import Expected, check_expected, matches


def split_path(path: str) -> Tuple[str, Optional[str]]:
    """Split at the first dot. The remainder is None when there is no dot."""
    idx = path.find('.')
    if idx < 0:
        return path, None
    return path[:idx], path[idx + 1:]


def _walk(doc: Any, path: str) -> Tuple[Optional[Any], str]:
    """Follow intermediate segments of `path`.

    Returns the document holding the leaf and the leaf key, or ``(None, "")``
    when an intermediate segment is missing, not a document, or the path
    ends in a dot.
    """
    cls = type(doc)
    current = doc
    remaining = path
    while True:
        head, rest = split_path(remaining)
        if rest is None:
            return current, head
        if rest == '':
            return None, ''
        nxt = current.get_as(head, cls)
        if not isinstance(nxt, cls):
            return None, ''
        current, remaining = nxt, rest


def expand(doc: Any, path: str, expected: Expected = object) -> Optional[Any]:
    """Safe lookup of a dotted path. Any failure yields None."""
    check_expected(expected)
    holder, leaf = _walk(doc, path)
    if holder is None:
        return None
    return holder.get_as(leaf, expected)


def resolve(doc: Any, path: str, expected: Expected = object) -> Any:
    """Unsafe lookup of a dotted path.

    A missing leaf is handed to the holding document's `default()`, like a
    single-key `as_`; the value it supplies must still satisfy `expected`.
    Intermediate documents are wrapped with `type(doc)`, so a subclass
    `default()` applies at every level while an instance `default_factory`
    only covers top-level keys. A missing or non-document intermediate
    segment always raises NoSuchElementError.

    Raises NoSuchElementError when the path does not lead to a value and
    DocumentCastError when the value has the wrong type.
    """
    holder, leaf = _walk(doc, path)
    if holder is None:
        raise NoSuchElementError(path)
    try:
        value = holder.as_(leaf, expected)
    except NoSuchElementError as e:
        raise NoSuchElementError(path) from e
    except DocumentCastError as e:
        raise DocumentCastError(path, e.expected, e.actual) from e
    if not matches(value, expected):
        raise DocumentCastError(path, expected, value)
    return value


def set_path(doc: Any, path: str, value: Any) -> Optional[Any]:
    """Store `value` at a dotted path, creating intermediate documents.

    An intermediate value that is not a document is replaced by an empty
    one. Returns the previous leaf value. A path ending in a dot names no
    leaf and raises ValueError, matching the read side.
    """
    if path.endswith('.'):
        raise ValueError(f"Path {path!r} ends with '.'")
    cls = type(doc)
    current = doc
    remaining = path
    while True:
        head, rest = split_path(remaining)
        if rest is None:
            return current.put(head, value)
        nxt = current.get_as(head, cls)
        if not isinstance(nxt, cls):
            nxt = cls()
            current.put(head, nxt)
        current, remaining = nxt, rest


def delete_path(doc: Any, path: str) -> Optional[Any]:
    """Remove the leaf of a dotted path. Missing paths are ignored."""
    holder, leaf = _walk(doc, path)
    if holder is None:
        return None
    return holder.remove_field(leaf)


__all__ = ["split_path", "expand", "resolve", "set_path", "delete_path"]
