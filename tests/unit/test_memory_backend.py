from document_lib.storage.memory_backend import BasicDocument, BasicDocumentList


def test_memory_basic_operations():
    m = BasicDocument()

    # put/get
    assert m.put('k', 'v') is None
    assert m.get('k') == 'v'
    assert m.put('k', 'w') == 'v'

    # remove_field returns the removed value and tolerates missing keys
    assert m.remove_field('k') == 'w'
    assert m.get('k') is None
    assert m.remove_field('k') is None

    # contains_field distinguishes a stored None from a missing key
    m.put('n', None)
    assert m.contains_field('n') is True
    assert m.contains_field('missing') is False


def test_memory_keys_keep_insertion_order():
    m = BasicDocument()
    m.put('x', 1)
    m.put('y', 2)
    m.put('x', 3)
    assert list(m.keys()) == ['x', 'y']
    assert list(m.items()) == [('x', 3), ('y', 2)]
    assert len(m) == 2
    assert 'y' in m


def test_memory_to_dict_is_deep():
    inner = BasicDocument({'b': 1})
    m = BasicDocument({'a': inner, 'l': BasicDocumentList([BasicDocument({'c': 2}), 3])})
    plain = m.to_dict()
    assert plain == {'a': {'b': 1}, 'l': [{'c': 2}, 3]}
    assert type(plain['a']) is dict
    assert type(plain['l']) is list


def test_memory_equality():
    assert BasicDocument({'a': 1}) == BasicDocument({'a': 1})
    assert BasicDocument({'a': 1}) == {'a': 1}
    assert BasicDocument({'a': 1}) != {'a': 2}
    assert BasicDocument({'a': 1}) != 1


def test_memory_partial_flag():
    m = BasicDocument()
    assert m.is_partial_object() is False
    m.mark_as_partial_object()
    assert m.is_partial_object() is True
