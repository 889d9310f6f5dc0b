"""Cache entries: a value paired with its expiration instant."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass
class CacheEntry:
    value: Any
    expires_at: datetime

    def is_live(self, now: datetime) -> bool:
        # Expired from the instant now reaches expires_at.
        return now < self.expires_at
