from typing import Any, Optional, Protocol, runtime_checkable

@runtime_checkable
class WebStorage(Protocol):
    """Method surface shared by Storage and wrapped storages."""

    def clear(self) -> None:
        ...

    def getItem(self, key: Any) -> Optional[str]:
        ...

    def setItem(self, key: Any, value: Any) -> None:
        ...

    def removeItem(self, key: Any) -> None:
        ...

    def key(self, index: Any) -> Optional[str]:
        ...

    def toString(self) -> str:
        ...
