from typing import Any, Iterator, List, Optional, Tuple
from loguru import logger
from .convert import UNDEFINED, convert
from .storage import OWN_MEMBERS, STORE_ATTRIBUTE, Storage
from .types import PropertyDescriptor, StorageOptions

class ProtocolViolationError(TypeError):
    def __init__(self, operation: str):
        super().__init__(f"Cannot {operation} on 'Storage'")
        self.operation = operation

def _is_special(name: str) -> bool:
    return len(name) > 4 and name.startswith('__') and name.endswith('__')

def _is_accessor(value: Any) -> bool:
    # property and other data descriptors; plain functions only define __get__
    kind = type(value)
    return hasattr(kind, '__get__') and (hasattr(kind, '__set__') or hasattr(kind, '__delete__'))

class StorageProxyHandler:
    """
    Trap table for a wrapped Storage.

    Every property operation on a StorageProxy lands in one of these traps,
    which either resolves one of the Storage's own members or routes the name
    to getItem/setItem/removeItem. Names are classified against the fixed
    OWN_MEMBERS set, never against the stored entries.
    """

    def get(self, target: Storage, name: str, receiver: 'StorageProxy', attribute: bool = True) -> Any:
        # special names belong to Python's attribute protocol, never to item access
        if attribute and _is_special(name):
            return object.__getattribute__(receiver, name)
        if name in OWN_MEMBERS:
            # bound to the target, so extracted methods keep working
            return getattr(target, name)
        return target.getItem(name)

    def set(self, target: Storage, name: str, value: Any, attribute: bool = True) -> bool:
        if attribute and name == '__class__':
            return self.set_prototype_of(target, value)
        if _is_accessor(value):
            logger.warning(f"Refused accessor property '{name}' on Storage")
            raise ProtocolViolationError(f"define accessor property '{name}'")
        if attribute and _is_special(name):
            logger.debug(f"Refused write to special attribute '{name}' on Storage")
            raise AttributeError(f"Cannot assign to special attribute '{name}' on 'Storage'")
        target.setItem(name, value)
        return True

    def has(self, target: Storage, name: str) -> bool:
        if name in OWN_MEMBERS:
            return True
        return target.getItem(name) is not None

    def delete_property(self, target: Storage, name: str, attribute: bool = True) -> bool:
        if attribute and _is_special(name):
            raise AttributeError(f"Cannot delete special attribute '{name}' on 'Storage'")
        target.removeItem(name)
        return True

    def own_keys(self, target: Storage) -> List[str]:
        return list(getattr(target, STORE_ATTRIBUTE))

    def get_own_property_descriptor(self, target: Storage, name: str) -> Optional[PropertyDescriptor]:
        entries = getattr(target, STORE_ATTRIBUTE)
        if name == STORE_ATTRIBUTE or name not in entries:
            return None
        return PropertyDescriptor(value=entries[name], configurable=True, enumerable=True, writable=True)

    def define_property(self, target: Storage, name: str, value: Any = UNDEFINED, get: Any = None, set: Any = None) -> bool:
        if get is not None or set is not None:
            logger.warning(f"Refused accessor property '{name}' on Storage")
            raise ProtocolViolationError(f"define accessor property '{name}'")
        return self.set(target, name, value, attribute=False)

    def is_extensible(self, target: Storage) -> bool:
        return True

    def prevent_extensions(self, target: Storage) -> bool:
        logger.warning("Refused to prevent extensions on Storage")
        raise ProtocolViolationError('prevent extensions')

    def get_prototype_of(self, target: Storage) -> type:
        return Storage

    def set_prototype_of(self, target: Storage, prototype: Any) -> bool:
        logger.warning(f"Refused to set prototype of Storage to {prototype!r}")
        raise ProtocolViolationError('set prototype')

def _unwrap(proxy: 'StorageProxy') -> Tuple[Storage, StorageProxyHandler]:
    return object.__getattribute__(proxy, '_target'), object.__getattribute__(proxy, '_handler')

def _storage_class(proxy: 'StorageProxy') -> type:
    target, handler = _unwrap(proxy)
    return handler.get_prototype_of(target)

class StorageProxy:
    """
    A Storage whose arbitrary attributes and items are its stored entries.

    `storage.foo = 1` behaves like `storage.setItem('foo', 1)`, `storage.foo`
    like `storage.getItem('foo')` and `del storage.foo` like
    `storage.removeItem('foo')`, while the Storage methods and `length` stay
    reachable under their own names. Use `create_storage()` to build one.
    """
    __slots__ = ('_target', '_handler')

    __class__ = property(_storage_class)

    def __init__(self, target: Storage, handler: Optional[StorageProxyHandler] = None):
        object.__setattr__(self, '_target', target)
        object.__setattr__(self, '_handler', handler or StorageProxyHandler())

    def __getattribute__(self, name: str) -> Any:
        target, handler = _unwrap(self)
        return handler.get(target, name, self)

    def __setattr__(self, name: str, value: Any) -> None:
        target, handler = _unwrap(self)
        handler.set(target, name, value)

    def __delattr__(self, name: str) -> None:
        target, handler = _unwrap(self)
        handler.delete_property(target, name)

    def __getitem__(self, key: Any) -> Any:
        target, handler = _unwrap(self)
        return handler.get(target, convert(key), self, attribute=False)

    def __setitem__(self, key: Any, value: Any) -> None:
        target, handler = _unwrap(self)
        handler.set(target, convert(key), value, attribute=False)

    def __delitem__(self, key: Any) -> None:
        target, handler = _unwrap(self)
        handler.delete_property(target, convert(key), attribute=False)

    def __contains__(self, key: Any) -> bool:
        target, handler = _unwrap(self)
        return handler.has(target, convert(key))

    def __iter__(self) -> Iterator[str]:
        target, handler = _unwrap(self)
        return iter(handler.own_keys(target))

    def __len__(self) -> int:
        target, _ = _unwrap(self)
        return target.length

    def __bool__(self) -> bool:
        return True

    def __str__(self) -> str:
        target, _ = _unwrap(self)
        return str(target)

    def __repr__(self) -> str:
        target, _ = _unwrap(self)
        return repr(target)

def create_storage(options: Optional[StorageOptions] = None) -> StorageProxy:
    """Creates a Storage wrapped so that attribute access reads and writes its entries."""
    return StorageProxy(Storage(options))
