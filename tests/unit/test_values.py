import datetime
import uuid
from typing import Dict, List, Optional

import pytest

from document_lib.document.values import NOTHING, Some, ValueKind, cast_value, check_expected, kind_of, matches
from document_lib.errors import DocumentCastError
from document_lib.storage.memory_backend import BasicDocument, BasicDocumentList


@pytest.mark.parametrize(
    'value, kind',
    [
        (None, ValueKind.NULL),
        (True, ValueKind.BOOL),
        (3, ValueKind.INT),
        (2.5, ValueKind.FLOAT),
        ('s', ValueKind.STRING),
        (b'raw', ValueKind.BYTES),
        (datetime.datetime(2020, 1, 1), ValueKind.DATETIME),
        (uuid.UUID(int=1), ValueKind.UUID),
        (BasicDocument(), ValueKind.DOCUMENT),
        (BasicDocumentList([1]), ValueKind.LIST),
        ([1, 2], ValueKind.LIST),
        (object(), ValueKind.OTHER),
    ],
)
def test_kind_of(value, kind):
    assert kind_of(value) is kind


def test_matches_rejects_bool_for_numbers():
    assert matches(True, bool)
    assert not matches(True, int)
    assert not matches(False, float)
    assert matches(1, int)


def test_matches_does_not_widen_int_to_float():
    assert not matches(1, float)
    assert matches(1, (int, float))


def test_matches_object_and_kinds():
    assert matches('anything', object)
    assert matches(None, type(None))
    assert matches(5, ValueKind.INT)
    assert not matches(5, ValueKind.STRING)


def test_cast_value_returns_or_raises():
    assert cast_value('x', str) == 'x'
    with pytest.raises(DocumentCastError) as exc:
        cast_value('x', int, key='n')
    err = exc.value
    assert err.key == 'n'
    assert err.expected is int
    assert err.actual == 'x'
    assert 'expected int' in str(err)
    # a cast failure is also a TypeError
    assert isinstance(err, TypeError)


def test_optional_wrappers():
    assert Some(1) == Some(1)
    assert Some(1) != Some(2)
    assert not NOTHING
    assert type(NOTHING)() is NOTHING


@pytest.mark.parametrize('expected', [List[int], Optional[str], Dict[str, int], list[int], (int, List[int])])
def test_generic_aliases_are_not_accepted_as_expected(expected):
    with pytest.raises(TypeError, match='Unsupported expected type'):
        matches(1, expected)
    with pytest.raises(TypeError, match='Unsupported expected type'):
        check_expected(expected)


def test_check_expected_accepts_supported_forms():
    for expected in (int, (int, str), ValueKind.STRING, object):
        check_expected(expected)
    assert matches(None, (int, type(None)))
