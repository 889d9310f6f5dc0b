"""
Cache facade routing calls to the active provider.
Why: one entrypoint for callers; the storage backend stays swappable.
"""

import threading
from datetime import datetime
from typing import Any, Optional, Type, TypeVar

from tiny_cache.config.settings import settings
from tiny_cache.core.clock import Clock, add_minutes, ensure_aware, system_clock
from tiny_cache.core.duration import CacheDuration
from tiny_cache.core.logging import get_logger
from tiny_cache.providers.base import CacheProvider
from tiny_cache.providers.memory import MemoryCacheProvider

T = TypeVar("T")

_LOG = get_logger(__name__)


class TinyCache:
    """A small cache for arbitrary values with a time-to-live.

    Holds exactly one active :class:`CacheProvider`. Values are looked up by
    key and requested type; a missing, expired or differently typed value
    reads back as ``None``.
    """

    def __init__(
        self,
        provider: Optional[CacheProvider] = None,
        *,
        clock: Optional[Clock] = None,
        default_duration: CacheDuration = CacheDuration.MEDIUM,
    ) -> None:
        self._clock = clock or system_clock
        if provider is None:
            provider = MemoryCacheProvider(clock=self._clock)
        self._provider = self._check_provider(provider)
        self.default_duration = default_duration
        self._lock = threading.RLock()

    @property
    def provider(self) -> CacheProvider:
        return self._provider

    def configure(self, provider: CacheProvider) -> None:
        """Install ``provider``, clearing the outgoing provider first."""
        self._check_provider(provider)
        with self._lock:
            self._provider.clear()
            previous = type(self._provider).__name__
            self._provider = provider
        _LOG.info(
            f"cache provider swapped from={previous}",
            extra={"provider": type(provider).__name__},
        )

    def cache(
        self,
        key: str,
        value: Any,
        duration: Optional[CacheDuration] = None,
        *,
        expiration: Optional[datetime] = None,
    ) -> None:
        """Store ``value`` under ``key``.

        Args:
            key: Key used to read the value back.
            value: Payload to store. ``None`` is ignored.
            duration: How long to keep the value; defaults to ``default_duration``.
            expiration: Absolute expiry instant. Takes precedence over ``duration``.
        """
        if value is None:
            _LOG.debug("skipped caching None", extra={"key": key})
            return
        with self._lock:
            if expiration is not None:
                expires_at = ensure_aware(expiration)
            else:
                minutes = (duration or self.default_duration).minutes
                expires_at = add_minutes(ensure_aware(self._clock.now()), minutes)
            self._provider.set(key, value, expires_at)

    def value(self, type_: Type[T], key: str) -> Optional[T]:
        """Return the cached value for ``key`` if it is live and a ``type_``."""
        with self._lock:
            return self._provider.get(type_, key)

    def clear(self) -> None:
        """Remove every value immediately, ignoring expiration."""
        with self._lock:
            self._provider.clear()

    @staticmethod
    def _check_provider(provider: Any) -> CacheProvider:
        if not isinstance(provider, CacheProvider):
            raise TypeError(
                f"{type(provider).__name__} does not implement set/get/clear"
            )
        return provider


default_cache = TinyCache(default_duration=settings.default_duration)
