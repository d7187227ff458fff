"""Typed accessors over document adapters.

`TypedDocument` wraps a single document adapter by reference and adds
typed retrieval on top of the raw get/put contract. Lookups come in two
families:

- unsafe (`as_`, `as_path`, ``doc[key]``): raise `NoSuchElementError` when
  nothing is found and `DocumentCastError` when the value has another type
- safe (`get_as`, `get_as_path`, `get_as_or_else`, `expand`): return None
  for both outcomes

Every write goes through `normalize`, so plain dicts, `Some`/`NOTHING` and
other `TypedDocument` instances never reach the adapter.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from document_lib.config import get_config
from document_lib.errors import DocumentCastError, NoSuchElementError
from document_lib.storage.base import to_plain
from document_lib.storage.interfaces import DocumentProtocol
from document_lib.storage.memory_backend import BasicDocument, BasicDocumentList
from document_lib.storage.serializer import JSONSerializer

from . import paths
from .normalize import normalize, unwrap_optional
from .values import ID_TYPES, Expected, ValueKind, cast_value, check_expected, kind_of, matches

logger = logging.getLogger(__name__)


class TypedDocument:
    """Typed view over one document adapter.

    The adapter is never copied: writes through the view mutate it in place
    and `as_document` hands back the same object.
    """

    def __init__(
        self,
        underlying: Optional[DocumentProtocol] = None,
        default_factory: Optional[Callable[[str], Any]] = None,
    ) -> None:
        if isinstance(underlying, TypedDocument):
            underlying = underlying.as_document()
        self._underlying = underlying if underlying is not None else BasicDocument()
        self._default_factory = default_factory

    # -- Raw access ------------------------------------------------------

    def get(self, key: str) -> Optional[Any]:
        return self._underlying.get(key)

    def put(self, key: str, value: Any) -> Optional[Any]:
        """Normalize and store `value`, returning the previous value or None.

        `NOTHING` stores None: the key exists afterwards with a null value.
        """
        return self._underlying.put(key, unwrap_optional(normalize(value)))

    def remove_field(self, key: str) -> Optional[Any]:
        return self._underlying.remove_field(key)

    def contains_field(self, key: str) -> bool:
        return self._underlying.contains_field(key)

    def put_all(self, other: Any) -> None:
        for key, value in _items(other):
            self.put(key, value)

    def keys(self) -> List[str]:
        return list(self._underlying.keys())

    def items(self) -> Iterator[Tuple[str, Any]]:
        for key in self.keys():
            yield key, self._underlying.get(key)

    def as_document(self) -> DocumentProtocol:
        return self._underlying

    @property
    def underlying(self) -> DocumentProtocol:
        return self._underlying

    def to_dict(self) -> dict:
        return to_plain(self._underlying)

    # -- Typed access ----------------------------------------------------

    def default(self, key: str) -> Any:
        """Value used by `as_` when `key` is absent.

        Raises NoSuchElementError unless a `default_factory` was given or a
        subclass overrides this method.
        """
        if self._default_factory is not None:
            return self._default_factory(key)
        raise NoSuchElementError(key)

    def as_(self, key: str, expected: Expected = object) -> Any:
        raw = self._underlying.get(key)
        if raw is None:
            return self.default(key)
        return _coerce(raw, expected, key)

    def as_path(self, *keys: str, expected: Expected = object) -> Any:
        return paths.resolve(self, '.'.join(keys), expected)

    def get_as(self, key: str, expected: Expected = object) -> Optional[Any]:
        check_expected(expected)
        try:
            value = self.as_(key, expected)
        except (LookupError, TypeError) as e:
            logger.debug('get_as(%r) found nothing: %s', key, e)
            return None
        # a default supplied for a missing key is not checked by as_
        if not matches(value, expected):
            logger.debug('get_as(%r) default has type %s', key, type(value).__name__)
            return None
        return value

    def get_as_path(self, *keys: str, expected: Expected = object) -> Optional[Any]:
        return paths.expand(self, '.'.join(keys), expected)

    def get_as_or_else(self, key: str, default: Callable[[], Any], expected: Expected = object) -> Any:
        value = self.get_as(key, expected)
        if value is None:
            return default()
        return value

    def expand(self, path: str, expected: Expected = object) -> Optional[Any]:
        return paths.expand(self, path, expected)

    def set_path(self, path: str, value: Any) -> Optional[Any]:
        return paths.set_path(self, path, value)

    def delete_path(self, path: str) -> Optional[Any]:
        return paths.delete_path(self, path)

    def kind(self, key: str) -> Optional[ValueKind]:
        """Kind of the value stored under `key`, or None when absent."""
        if not self._underlying.contains_field(key):
            return None
        return kind_of(self._underlying.get(key))

    @property
    def id(self) -> Optional[Any]:
        """The identity field, when present and of an identity type."""
        raw = self._underlying.get(get_config().id_field)
        return raw if matches(raw, ID_TYPES) else None

    # -- Composition -----------------------------------------------------

    def concat(self, *pairs: Tuple[str, Any]) -> 'TypedDocument':
        """New document with this document's fields followed by `pairs`."""
        from .builder import DocumentBuilder

        return DocumentBuilder().add_all(self.items()).add_all(pairs).result()

    def merged(self, other: Any) -> 'TypedDocument':
        """New document with this document's fields followed by `other`'s."""
        from .builder import DocumentBuilder

        return DocumentBuilder().add_all(self.items()).add_all(_items(other)).result()

    def cons(self, elem: Any) -> List[DocumentProtocol]:
        """Two-element list with `elem` in front of this document.

        `elem` is either a single ``(key, value)`` pair or anything
        `to_document` accepts. Meant for composing query fragments.
        """
        from .factory import of, to_document

        if _is_pair(elem):
            first = of(elem).as_document()
        else:
            first = to_document(elem)
        return [first, self._underlying]

    def add(self, key: str, value: Any) -> 'TypedDocument':
        self.put(key, value)
        return self

    def discard(self, key: str) -> 'TypedDocument':
        self._underlying.remove_field(key)
        return self

    def __add__(self, other: Any) -> 'TypedDocument':
        if _is_pair(other):
            return self.concat(other)
        if isinstance(other, (TypedDocument, Mapping, DocumentProtocol)):
            return self.merged(other)
        if isinstance(other, (list, tuple)):
            return self.concat(*other)
        return NotImplemented

    def __iadd__(self, kv: Tuple[str, Any]) -> 'TypedDocument':
        key, value = kv
        return self.add(key, value)

    def __isub__(self, key: str) -> 'TypedDocument':
        return self.discard(key)

    # -- Adapter passthrough ---------------------------------------------

    def is_partial_object(self) -> bool:
        check = getattr(self._underlying, 'is_partial_object', None)
        return bool(check()) if check is not None else False

    def mark_as_partial_object(self) -> None:
        mark = getattr(self._underlying, 'mark_as_partial_object', None)
        if mark is not None:
            mark()

    def __getitem__(self, key: str) -> Any:
        return self.as_(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.put(key, value)

    def __delitem__(self, key: str) -> None:
        self._underlying.remove_field(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._underlying.contains_field(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self.keys())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TypedDocument):
            return self._underlying == other._underlying
        return bool(self._underlying == other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return JSONSerializer(indent=get_config().json_indent).dump(self._underlying).decode('utf-8')

    def __repr__(self) -> str:
        return f"TypedDocument({self.to_dict()!r})"


class TypedList(Sequence):
    """Read-mostly view over a `BasicDocumentList`.

    Returned by `TypedDocument.as_` when the stored value is a document list.
    """

    def __init__(self, underlying: Optional[BasicDocumentList] = None) -> None:
        self._underlying = underlying if underlying is not None else BasicDocumentList()

    def __getitem__(self, index):
        return self._underlying[index]

    def __len__(self) -> int:
        return len(self._underlying)

    def get_as(self, index: int, expected: Expected = object) -> Optional[Any]:
        try:
            raw = self._underlying[index]
        except IndexError:
            return None
        if raw is None:
            return None
        try:
            return _coerce(raw, expected, str(index))
        except DocumentCastError:
            return None

    def append(self, value: Any) -> None:
        self._underlying.append(unwrap_optional(normalize(value)))

    def extend(self, values: Iterable[Any]) -> None:
        for value in values:
            self.append(value)

    def as_list(self) -> BasicDocumentList:
        return self._underlying

    def to_list(self) -> list:
        return to_plain(self._underlying)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TypedList):
            return self._underlying == other._underlying
        if isinstance(other, list):
            return list(self._underlying) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TypedList({self.to_list()!r})"


def _coerce(raw: Any, expected: Expected, key: str) -> Any:
    """Wrap a raw stored value as requested and check its type."""
    if isinstance(raw, BasicDocumentList):
        wrapped = TypedList(raw)
        if matches(wrapped, expected):
            return wrapped
        return cast_value(raw, expected, key)
    if (
        isinstance(expected, type)
        and issubclass(expected, TypedDocument)
        and isinstance(raw, DocumentProtocol)
        and not isinstance(raw, TypedDocument)
    ):
        return expected(raw)
    return cast_value(raw, expected, key)


def _is_pair(value: Any) -> bool:
    return isinstance(value, tuple) and len(value) == 2 and isinstance(value[0], str)


def _items(other: Any) -> Iterable[Tuple[str, Any]]:
    if isinstance(other, TypedDocument):
        return other.items()
    if isinstance(other, Mapping):
        return other.items()
    if isinstance(other, DocumentProtocol):
        return ((key, other.get(key)) for key in other.keys())
    return other
