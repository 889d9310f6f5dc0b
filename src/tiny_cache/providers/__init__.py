"""Cache storage backends."""

from .base import CacheProvider
from .memory import MemoryCacheProvider

__all__ = ["CacheProvider", "MemoryCacheProvider"]
