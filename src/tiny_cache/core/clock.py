"""
Clock abstraction and instant arithmetic.
Why: expiry is a passive comparison against "now"; tests need to control it.
"""

from datetime import datetime, timedelta, timezone
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


def ensure_aware(instant: datetime) -> datetime:
    """Return an aware datetime; naive values are read as local time."""
    if instant.tzinfo is None or instant.utcoffset() is None:
        return instant.astimezone()
    return instant


def add_seconds(instant: datetime, seconds: int) -> datetime:
    return instant + timedelta(seconds=seconds)


def add_minutes(instant: datetime, minutes: int) -> datetime:
    return add_seconds(instant, 60 * minutes)


def add_hours(instant: datetime, hours: int) -> datetime:
    return add_minutes(instant, 60 * hours)


def add_days(instant: datetime, days: int) -> datetime:
    return add_hours(instant, 24 * days)


system_clock = SystemClock()
