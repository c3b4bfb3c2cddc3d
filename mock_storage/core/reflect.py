"""
Reflection helpers for wrapped storages.

These are the counterparts of JavaScript's `Object.keys()`,
`Object.getOwnPropertyDescriptor()`, `Object.defineProperty()` and friends,
dispatched to the StorageProxyHandler traps of a StorageProxy. They only
accept wrapped storages: a bare Storage has ordinary Python attributes.
"""
from typing import Any, List, Optional, Tuple
from .convert import UNDEFINED, convert
from .proxy import StorageProxy, StorageProxyHandler, _unwrap
from .storage import Storage
from .types import PropertyDescriptor

def _traps(obj: Any) -> Tuple[Storage, StorageProxyHandler]:
    if type(obj) is not StorageProxy:
        raise TypeError(f"Expected a storage created by create_storage(), got {type(obj).__name__}")
    return _unwrap(obj)

def keys(obj: StorageProxy) -> List[str]:
    target, handler = _traps(obj)
    return handler.own_keys(target)

def values(obj: StorageProxy) -> List[str]:
    target, handler = _traps(obj)
    return [target.getItem(name) for name in handler.own_keys(target)]

def entries(obj: StorageProxy) -> List[Tuple[str, str]]:
    target, handler = _traps(obj)
    return [(name, target.getItem(name)) for name in handler.own_keys(target)]

def get_own_property_descriptor(obj: StorageProxy, name: Any) -> Optional[PropertyDescriptor]:
    target, handler = _traps(obj)
    return handler.get_own_property_descriptor(target, convert(name))

def define_property(obj: StorageProxy, name: Any, value: Any = UNDEFINED, get: Any = None, set: Any = None) -> bool:
    """
    Defines `name` on a wrapped storage.

    Data properties are stored like any other entry. Accessor properties
    (`get` or `set` given) raise ProtocolViolationError, since they would
    bypass string conversion.
    """
    target, handler = _traps(obj)
    return handler.define_property(target, convert(name), value, get=get, set=set)

def is_extensible(obj: StorageProxy) -> bool:
    target, handler = _traps(obj)
    return handler.is_extensible(target)

def prevent_extensions(obj: StorageProxy) -> bool:
    target, handler = _traps(obj)
    return handler.prevent_extensions(target)

def get_prototype_of(obj: StorageProxy) -> type:
    target, handler = _traps(obj)
    return handler.get_prototype_of(target)

def set_prototype_of(obj: StorageProxy, prototype: Any) -> bool:
    target, handler = _traps(obj)
    return handler.set_prototype_of(target, prototype)
