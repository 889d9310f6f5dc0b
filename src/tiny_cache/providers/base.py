"""
Provider contract: the storage backend behind the cache facade.
Why: memory today; any backend implementing set/get/clear can be swapped in.
"""

from datetime import datetime
from typing import Any, Optional, Protocol, Type, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class CacheProvider(Protocol):
    def set(self, key: str, value: Any, expires_at: datetime) -> None:
        """Insert or overwrite the entry for ``key``."""
        ...

    def get(self, type_: Type[T], key: str) -> Optional[T]:
        """Return the live value for ``key`` if it is a ``type_``, else None."""
        ...

    def clear(self) -> None:
        """Drop every entry, live or expired."""
        ...
