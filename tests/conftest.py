from datetime import datetime, timedelta

import pytest


class FakeClock:
    """Settable clock passed as ``time_func``."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 1, 15, 12, 0, 0))

