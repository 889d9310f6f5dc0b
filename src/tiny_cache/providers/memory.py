"""
In-process cache provider backed by a dict.
Why: zero dependencies, no timer thread; expired entries are swept on read.
"""

import threading
from datetime import datetime
from typing import Any, Dict, Optional, Type, TypeVar

from tiny_cache.core.clock import Clock, ensure_aware, system_clock
from tiny_cache.core.entry import CacheEntry
from tiny_cache.core.logging import get_logger
from tiny_cache.core.types import matches_type

T = TypeVar("T")

_LOG = get_logger(__name__)


class MemoryCacheProvider:
    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock = clock or system_clock
        self._data: Dict[str, CacheEntry] = {}
        self._lock = threading.RLock()

    def set(self, key: str, value: Any, expires_at: datetime) -> None:
        entry = CacheEntry(value=value, expires_at=ensure_aware(expires_at))
        with self._lock:
            self._data[key] = entry

    def get(self, type_: Type[T], key: str) -> Optional[T]:
        with self._lock:
            self._remove_expired()
            entry = self._data.get(key)
        if entry is None:
            return None
        if not matches_type(entry.value, type_):
            _LOG.debug(
                "type mismatch",
                extra={"key": key, "stored_type": type(entry.value).__name__},
            )
            return None
        return entry.value

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def _remove_expired(self) -> int:
        now = ensure_aware(self._clock.now())
        expired = [k for k, entry in self._data.items() if not entry.is_live(now)]
        for key in expired:
            del self._data[key]
        if expired:
            _LOG.debug("evicted expired entries", extra={"evicted": len(expired)})
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data
