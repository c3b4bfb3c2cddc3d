from typing import Dict, Optional
from loguru import logger

from .core.proxy import StorageProxy, create_storage
from .core.types import StorageOptions

class StorageArea:
    """
    Process-wide named storages, the way a browser exposes `localStorage`
    and `sessionStorage` as globals.
    """
    LOCAL = 'localStorage'
    SESSION = 'sessionStorage'

    _instances: Dict[str, StorageProxy] = {}

    @classmethod
    def get_instance(cls, name: str = LOCAL, options: Optional[StorageOptions] = None) -> StorageProxy:
        if name in cls._instances:
            return cls._instances[name]

        instance = create_storage(options)
        cls._instances[name] = instance
        logger.debug(f"[{name}] Storage area created")
        return instance

    @classmethod
    def reset_instance(cls, name: str):
        if name in cls._instances:
            del cls._instances[name]

    @classmethod
    def reset_all(cls):
        cls._instances.clear()
