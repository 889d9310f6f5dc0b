"""Duration specifiers used to compute an expiration at insert time."""

from dataclasses import dataclass
from typing import ClassVar, Dict, Optional


@dataclass(frozen=True)
class CacheDuration:
    """How long a value stays cached.

    Four presets plus a custom variant carrying its own minute count:

    - ``EXTRA_SHORT``: 1 minute
    - ``SHORT``: 10 minutes
    - ``MEDIUM``: 30 minutes (default)
    - ``LONG``: 60 minutes
    - ``CacheDuration.minutes_of(n)``: n minutes
    """

    name: str
    custom_minutes: Optional[int] = None

    _PRESETS: ClassVar[Dict[str, int]] = {
        "extra_short": 1,
        "short": 10,
        "medium": 30,
        "long": 60,
    }

    EXTRA_SHORT: ClassVar["CacheDuration"]
    SHORT: ClassVar["CacheDuration"]
    MEDIUM: ClassVar["CacheDuration"]
    LONG: ClassVar["CacheDuration"]

    def __post_init__(self) -> None:
        if self.custom_minutes is None and self.name not in self._PRESETS:
            raise ValueError(f"Unknown cache duration: {self.name!r}")

    @classmethod
    def minutes_of(cls, minutes: int) -> "CacheDuration":
        return cls(name="minutes", custom_minutes=int(minutes))

    @classmethod
    def from_name(cls, name: str) -> "CacheDuration":
        """Resolve a preset name ("short", "long", ...) or a bare minute count."""
        key = name.strip().lower().replace("-", "_")
        if key in cls._PRESETS:
            return cls(name=key)
        try:
            return cls.minutes_of(int(key))
        except ValueError:
            raise ValueError(f"Unknown cache duration: {name!r}") from None

    @property
    def minutes(self) -> int:
        if self.custom_minutes is not None:
            return self.custom_minutes
        return self._PRESETS[self.name]

    def __repr__(self) -> str:
        if self.custom_minutes is not None:
            return f"CacheDuration.minutes_of({self.custom_minutes})"
        return f"CacheDuration.{self.name.upper()}"


CacheDuration.EXTRA_SHORT = CacheDuration("extra_short")
CacheDuration.SHORT = CacheDuration("short")
CacheDuration.MEDIUM = CacheDuration("medium")
CacheDuration.LONG = CacheDuration("long")
