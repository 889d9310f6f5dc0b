"""Configuration settings for the cache."""
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from tiny_cache.core.duration import CacheDuration

load_dotenv()


@dataclass
class CacheSettings:
    default_duration: CacheDuration = field(default_factory=lambda: CacheDuration.MEDIUM)
    log_level: str = "INFO"


def load_settings() -> CacheSettings:
    """Read settings from the environment (and .env, if present)."""
    duration = os.getenv("TINY_CACHE_DEFAULT_DURATION", "medium")
    return CacheSettings(
        default_duration=CacheDuration.from_name(duration),
        log_level=os.getenv("TINY_CACHE_LOG_LEVEL", "INFO").upper(),
    )


settings = load_settings()
