"""Shared pytest fixtures for the logsink test suite."""

import threading
from datetime import datetime, timedelta

import pytest


class FakeClock:
    """Controllable local clock; call it like ``time_func``."""

    def __init__(self, start: datetime):
        self._now = start
        self._lock = threading.Lock()

    def __call__(self) -> datetime:
        with self._lock:
            return self._now

    def set(self, moment: datetime):
        with self._lock:
            self._now = moment

    def advance(self, **kwargs):
        with self._lock:
            self._now += timedelta(**kwargs)


@pytest.fixture()
def clock() -> FakeClock:
    """A clock at 2025-01-15 23:59:58 local time, two seconds before midnight."""
    return FakeClock(datetime(2025, 1, 15, 23, 59, 58))
