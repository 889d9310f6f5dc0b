"""
Minimal JSON logging for cache events.
Why: consistent, machine-readable logs with low noise.
"""

import json
import logging
from typing import Any, Dict, Optional, Union

from tiny_cache.config.settings import settings


# Cache fields passed through `extra=` on log calls.
CACHE_FIELDS = ("key", "provider", "evicted", "stored_type")


class CacheJsonFormatter(logging.Formatter):
    """One JSON object per record, with any cache fields attached."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for field in CACHE_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: Optional[Union[int, str]] = None) -> None:
    """Attach a JSON stream handler to the root logger once.

    The level defaults to ``TINY_CACHE_LOG_LEVEL``.
    """
    root = logging.getLogger()
    if any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(CacheJsonFormatter())
    root.setLevel(level or settings.log_level)
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
