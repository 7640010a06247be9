"""Pytest configuration and fixtures."""

import logging

import pytest

from softverify.poller import Poller, PollResult


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Reset softverify loggers after each test so handlers don't leak."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if not name.startswith("softverify"):
            continue
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


class FakeClock:
    """Manually driven clock; ``sleep`` advances time instead of blocking.

    ``step`` advances time on every read, for loops that never sleep.
    """

    def __init__(self, step: float = 0.0):
        self.now = 0.0
        self.step = step
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        current = self.now
        self.now += self.step
        return current

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def poller(clock):
    return Poller(clock=clock, sleep=clock.sleep)


@pytest.fixture
def outcome():
    """Build a PollResult without polling."""

    def _make(satisfied: bool, value=None, attempts: int = 1, elapsed: int = 0):
        return PollResult(
            satisfied=satisfied,
            last_value=value,
            attempts=attempts,
            elapsed_millis=elapsed,
        )

    return _make
