import pytest

from mock_storage.core.proxy import ProtocolViolationError, StorageProxy, create_storage
from mock_storage.core.storage import OWN_MEMBERS, Storage

@pytest.fixture
def proxied():
    return create_storage()

@pytest.fixture
def populated():
    storage = create_storage()
    storage.a = 123
    storage.setItem('b', 456)
    return storage

def test_set_value_using_attribute(proxied):
    proxied.test = 123
    assert proxied.test == '123'
    assert proxied.getItem('test') == '123'

def test_missing_attribute_returns_none(proxied):
    assert proxied.test is None

def test_remove_value_using_del(proxied):
    proxied.test = 123
    assert proxied.test == '123'
    del proxied.test
    assert proxied.test is None
    assert proxied.length == 0

def test_del_missing_attribute_succeeds(proxied):
    del proxied.missing
    assert proxied.length == 0

def test_item_access_converts_keys(proxied):
    proxied[123] = True
    assert proxied['123'] == 'true'
    assert proxied.getItem(123) == 'true'
    del proxied[123]
    assert proxied[123] is None

def test_assigning_length_does_not_break_accessor(proxied):
    assert proxied.length == 0
    proxied.length = 123
    assert proxied.length == 1
    assert proxied.getItem('length') == '123'

@pytest.mark.parametrize("name", ['clear', 'getItem', 'setItem', 'removeItem', 'key', 'toString'])
def test_cannot_replace_own_methods(proxied, name):
    setattr(proxied, name, 123)
    assert callable(getattr(proxied, name))
    assert proxied.getItem(name) == '123'

def test_extracted_methods_stay_bound_to_the_storage(proxied):
    set_item = proxied.setItem
    get_item = proxied.getItem
    set_item('a', 1)
    assert get_item('a') == '1'
    assert proxied.a == '1'

def test_private_names_are_entries(proxied):
    assert proxied._target is None
    assert proxied._entries is None
    proxied._entries = 'x'
    assert proxied.getItem('_entries') == 'x'
    assert proxied.length == 1

def test_iteration_yields_entry_names(populated):
    assert list(populated) == ['a', 'b']

def test_len_matches_length(populated):
    assert len(populated) == 2
    assert populated.length == 2

def test_empty_storage_is_truthy(proxied):
    assert proxied

def test_contains(populated):
    assert 'a' in populated
    assert 'c' not in populated
    for name in OWN_MEMBERS:
        assert name in populated

def test_contains_converts_keys(proxied):
    proxied.setItem(1, 'one')
    assert 1 in proxied
    assert None not in proxied

def test_accessor_assignment_is_refused(proxied):
    with pytest.raises(ProtocolViolationError):
        proxied.test = property(lambda self: 'sneaky')
    assert proxied.length == 0

def test_function_assignment_stores_source(proxied):
    def handler():
        pass

    proxied.fn = handler
    assert proxied.fn.startswith('def handler():')

def test_special_attribute_write_fails(proxied):
    with pytest.raises(AttributeError):
        proxied.__custom__ = 1
    assert proxied.length == 0

def test_class_reassignment_is_refused(proxied):
    with pytest.raises(ProtocolViolationError):
        proxied.__class__ = dict

def test_reports_storage_identity(proxied):
    assert proxied.__class__ is Storage
    assert isinstance(proxied, Storage)
    assert isinstance(proxied, StorageProxy)

def test_str_and_repr(populated):
    assert str(populated) == '[object Storage]'
    assert repr(populated) == "Storage({'a': '123', 'b': '456'})"

def test_clear_through_proxy(populated):
    populated.clear()
    assert list(populated) == []
    assert populated.a is None

def test_proxied_storage_as_value(proxied):
    proxied.self = proxied
    assert proxied.self == '[object Storage]'

@pytest.mark.parametrize("name", ['__x__', '__init__', '_private', 'trailing_', '__len__', '___'])
def test_item_access_to_underscore_names(proxied, name):
    proxied.setItem(name, 'v')
    assert name in proxied
    assert proxied[name] == 'v'
    del proxied[name]
    assert name not in proxied
    assert proxied[name] is None
    assert proxied.length == 0

def test_item_write_stores_underscore_names(proxied):
    proxied['__class__'] = 'x'
    assert proxied.getItem('__class__') == 'x'
    assert proxied.__class__ is Storage

def test_enumerated_names_round_trip_through_items(proxied):
    for name in ['__x__', '__init__', '_a', 'b_', 'plain']:
        proxied.setItem(name, name.upper())
    assert [proxied[k] for k in proxied] == ['__X__', '__INIT__', '_A', 'B_', 'PLAIN']
    for k in list(proxied):
        assert k in proxied
        del proxied[k]
    assert list(proxied) == []

def test_del_missing_special_item_succeeds(proxied):
    del proxied['__missing__']
    assert proxied.length == 0
