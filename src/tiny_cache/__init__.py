"""A minimal in-process cache with time-to-live expiry and pluggable providers."""

from .core.cache import TinyCache, default_cache
from .core.clock import Clock, SystemClock
from .core.duration import CacheDuration
from .core.entry import CacheEntry
from .providers import CacheProvider, MemoryCacheProvider

__all__ = [
    "CacheDuration",
    "CacheEntry",
    "CacheProvider",
    "Clock",
    "MemoryCacheProvider",
    "SystemClock",
    "TinyCache",
    "default_cache",
]
