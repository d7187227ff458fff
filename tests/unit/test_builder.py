import pytest

from document_lib.document import empty, from_pairs, new_builder, of, to_document
from document_lib.document.accessor import TypedDocument
from document_lib.document.builder import DocumentBuilder
from document_lib.document.values import NOTHING, Some
from document_lib.storage.memory_backend import BasicDocument


def test_builder_last_write_wins_first_position_kept():
    b = DocumentBuilder()
    for k, v in [('x', 1), ('y', 2), ('x', 3)]:
        b.add(k, v)
    doc = b.result()
    assert isinstance(doc, TypedDocument)
    assert doc.get('x') == 3
    assert doc.keys() == ['x', 'y']


def test_builder_chaining_and_iadd():
    b = new_builder().add('a', 1).add_all([('b', 2), ('c', 3)])
    b += ('d', 4)
    assert b.result().keys() == ['a', 'b', 'c', 'd']


def test_builder_normalizes_values():
    doc = (
        DocumentBuilder()
        .add('m', {'x': 1})
        .add('o', NOTHING)
        .add('s', Some('v'))
        .add('t', of(('k', 1)))
        .result()
    )
    assert isinstance(doc.get('m'), BasicDocument)
    assert doc.contains_field('o') and doc.get('o') is None
    assert doc.get('s') == 'v'
    assert isinstance(doc.get('t'), BasicDocument)


def test_result_does_not_clear_and_clear_resets():
    b = DocumentBuilder().add('a', 1)
    first = b.result()
    assert b.result().get('a') == 1
    b.clear()
    assert b.result().get('a') is None
    assert len(b.result()) == 0
    # documents produced before clear() are left alone
    assert first.get('a') == 1


def test_factories():
    assert len(empty()) == 0
    doc = of(('a', 1), ('b', 2), c=3)
    assert doc.keys() == ['a', 'b', 'c']
    assert from_pairs([('a', 1), ('b', 2)]) == {'a': 1, 'b': 2}


def test_to_document_accepts_supported_shapes():
    typed = of(('a', 1))
    raw = BasicDocument({'a': 1})
    assert to_document(typed) is typed.as_document()
    assert to_document(raw) is raw
    assert to_document({'a': {'b': 1}}) == {'a': {'b': 1}}
    assert isinstance(to_document({'a': 1}), BasicDocument)
    assert to_document([('a', 1)]) == {'a': 1}


@pytest.mark.parametrize('bad', ['text', 5, None])
def test_to_document_rejects_other_values(bad):
    with pytest.raises(TypeError):
        to_document(bad)
