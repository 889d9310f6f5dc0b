"""Shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


@pytest.fixture
def clock():
    """A controllable clock fixed at a known instant."""
    return FakeClock(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))
