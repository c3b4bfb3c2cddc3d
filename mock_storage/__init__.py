from .core import reflect
from .core.convert import UNDEFINED, convert
from .core.protocol import WebStorage
from .core.proxy import ProtocolViolationError, StorageProxy, StorageProxyHandler, create_storage
from .core.storage import OWN_MEMBERS, ArityError, Storage
from .core.types import PropertyDescriptor, StorageOptions
from .globals import StorageArea

__all__ = [
    'Storage',
    'StorageProxy',
    'StorageProxyHandler',
    'create_storage',
    'StorageOptions',
    'PropertyDescriptor',
    'WebStorage',
    'ArityError',
    'ProtocolViolationError',
    'StorageArea',
    'OWN_MEMBERS',
    'UNDEFINED',
    'convert',
    'reflect'
]
