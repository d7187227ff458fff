"""Value kinds and runtime casting for document fields.

Stored values belong to a closed set of variants (`ValueKind`). Callers ask
for a field by naming what they expect: a Python type, a tuple of types, or
a `ValueKind`. `cast_value` checks the runtime value against that request
and either returns it or raises `DocumentCastError`.
"""
from __future__ import annotations

import datetime
import uuid
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Tuple, Type, Union, get_origin

from document_lib.errors import DocumentCastError
from document_lib.storage.interfaces import DocumentProtocol


class ValueKind(Enum):
    NULL = auto()
    BOOL = auto()
    INT = auto()
    FLOAT = auto()
    STRING = auto()
    BYTES = auto()
    DATETIME = auto()
    UUID = auto()
    DOCUMENT = auto()
    LIST = auto()
    OTHER = auto()


Expected = Union[Type[Any], Tuple[Type[Any], ...], ValueKind]

# Types accepted for the identity field.
ID_TYPES: Tuple[type, ...] = (str, int, bytes, uuid.UUID)


@dataclass(frozen=True)
class Some:
    """A present optional value. `put(key, Some(x))` stores `x`."""

    value: Any


class _Nothing:
    """Singleton for an absent optional value; stored as None."""

    _instance: "_Nothing | None" = None

    def __new__(cls) -> "_Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOTHING"

    def __bool__(self) -> bool:
        return False


NOTHING = _Nothing()


def kind_of(value: Any) -> ValueKind:
    """Classify a stored value."""
    if value is None:
        return ValueKind.NULL
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.INT
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (bytes, bytearray)):
        return ValueKind.BYTES
    if isinstance(value, (datetime.datetime, datetime.date)):
        return ValueKind.DATETIME
    if isinstance(value, uuid.UUID):
        return ValueKind.UUID
    if isinstance(value, DocumentProtocol):
        return ValueKind.DOCUMENT
    if isinstance(value, Sequence):
        return ValueKind.LIST
    return ValueKind.OTHER


def check_expected(expected: Any) -> None:
    """Reject requests `isinstance` cannot answer, such as `List[int]` or `Optional[int]`."""
    if expected is Any or expected is None or isinstance(expected, ValueKind):
        return
    if isinstance(expected, tuple):
        for t in expected:
            check_expected(t)
        return
    if get_origin(expected) is not None or not isinstance(expected, type):
        raise TypeError(
            f"Unsupported expected type {expected!r}: use a class, a tuple of classes or a ValueKind"
        )


def matches(value: Any, expected: Expected) -> bool:
    """Return True if `value` satisfies `expected`.

    Raises TypeError for requests rejected by `check_expected`.
    """
    check_expected(expected)
    if expected is object or expected is Any:
        return True
    if isinstance(expected, ValueKind):
        return kind_of(value) is expected
    if isinstance(expected, tuple):
        return any(matches(value, t) for t in expected)
    if expected is None or expected is type(None):
        return value is None
    if isinstance(value, bool) and expected in (int, float):
        return False
    return isinstance(value, expected)


def cast_value(value: Any, expected: Expected, key: str = "") -> Any:
    if matches(value, expected):
        return value
    raise DocumentCastError(key, expected, value)
