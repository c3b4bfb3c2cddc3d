from typing import Any, Dict, Optional, Tuple
from loguru import logger
from .convert import UNDEFINED, convert
from .types import StorageOptions

# Attribute holding the entries, hidden from dynamic property introspection
STORE_ATTRIBUTE = '_entries'

# Default for omitted arguments; an explicit UNDEFINED is a supplied argument
_MISSING = object()

# Members declared on Storage itself. A wrapped storage resolves these names
# normally; every other name is a stored entry.
OWN_MEMBERS = frozenset({
    'clear',
    'getItem',
    'setItem',
    'removeItem',
    'key',
    'length',
    'toString',
    'get_item',
    'set_item',
    'remove_item',
})

class ArityError(TypeError):
    def __init__(self, method: str, required: int, present: int):
        noun = 'argument' if required == 1 else 'arguments'
        super().__init__(
            f"Failed to execute '{method}' on 'Storage': {required} {noun} required, but only {present} present."
        )
        self.method = method
        self.required = required
        self.present = present

class Storage:
    """
    A mock of the Web Storage API's Storage class, as exposed by `localStorage`
    and `sessionStorage`, for testing in environments where it does not exist.

    Intended solely for tests. It does not fire `storage` events and does not
    enforce a storage quota, so `setItem` never fails for exceeding one.

    In most cases `create_storage()` should be used instead, so that attribute
    access on the instance is routed to the stored entries.
    """
    def __init__(self, options: Optional[StorageOptions] = None):
        self._options = options or StorageOptions()
        self._entries: Dict[str, str] = {}
        logger.trace(f"Storage created (strict={self._options.strict})")

    def clear(self) -> None:
        """Removes all entries."""
        self._entries.clear()
        logger.debug("Storage cleared")

    def getItem(self, key: Any = _MISSING) -> Optional[str]:
        """Returns the value stored under `key`, or None if there is none."""
        key, = self._arguments('getItem', 1, key)
        return self._entries.get(convert(key))

    def setItem(self, key: Any = _MISSING, value: Any = _MISSING) -> None:
        """Stores `value` under `key`. Existing values are replaced."""
        key, value = self._arguments('setItem', 2, key, value)
        self._entries[convert(key)] = convert(value)

    def removeItem(self, key: Any = _MISSING) -> None:
        """Removes `key` if it exists."""
        key, = self._arguments('removeItem', 1, key)
        self._entries.pop(convert(key), None)

    def key(self, index: Any = _MISSING) -> Optional[str]:
        """
        Returns the name of the n-th entry, or None when `index` is out of range.

        The order of keys varies by user-agent and should not be relied upon.
        `index` is converted like any key; only canonical non-negative integers
        ("0", "1", ...) address an entry.
        """
        index, = self._arguments('key', 1, index)
        name = convert(index)
        if not (name.isascii() and name.isdigit()) or (len(name) > 1 and name[0] == '0'):
            return None
        position = int(name)
        if position >= len(self._entries):
            return None
        return list(self._entries)[position]

    @property
    def length(self) -> int:
        return len(self._entries)

    def toString(self) -> str:
        return '[object Storage]'

    get_item = getItem
    set_item = setItem
    remove_item = removeItem

    def _arguments(self, method: str, required: int, *args: Any) -> Tuple[Any, ...]:
        present = sum(1 for a in args if a is not _MISSING)
        if self._options.strict and present < required:
            raise ArityError(method, required, present)
        return tuple(UNDEFINED if a is _MISSING else a for a in args)

    def __str__(self) -> str:
        return self.toString()

    def __repr__(self) -> str:
        return f"Storage({self._entries!r})"
