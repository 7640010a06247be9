"""Retry loop that re-evaluates a condition until it holds or a deadline passes."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable

from softverify.errors import CallerMisuseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PollResult:
    """Outcome of a single :meth:`Poller.poll` call.

    Attributes:
        satisfied: Whether the last attempt evaluated to true.
        last_value: The actual value read by the last attempt, or the
            exception it raised.
        attempts: Number of evaluations performed (always >= 1).
        elapsed_millis: Wall-clock time spent polling.
    """

    satisfied: bool
    last_value: Any
    attempts: int
    elapsed_millis: int

    @property
    def error(self) -> BaseException | None:
        if isinstance(self.last_value, BaseException):
            return self.last_value
        return None


class Poller:
    """Evaluates conditions, retrying at a fixed interval until a deadline.

    Deadline semantics: the deadline is checked before each sleep. Once the
    poller decides to sleep, the attempt after that sleep is always made, so
    the attempt that crosses the deadline is still evaluated. Polling stops
    as soon as an attempt succeeds or elapsed time has reached the deadline.

    ``clock`` and ``sleep`` are injectable so tests can drive time by hand.
    ``clock`` returns seconds, ``sleep`` takes seconds.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._clock = clock
        self._sleep = sleep

    def poll(
        self, condition: Callable[[], bool], wait_seconds: int, interval_millis: int
    ) -> PollResult:
        if condition is None:
            raise CallerMisuseError("poll requires a condition, got None")
        if wait_seconds is None or wait_seconds < 0:
            raise CallerMisuseError(
                f"wait_seconds must be >= 0, got {wait_seconds}"
            )
        if interval_millis is None or interval_millis < 0:
            raise CallerMisuseError(
                f"interval_millis must be >= 0, got {interval_millis}"
            )

        deadline_millis = wait_seconds * 1000
        start = self._clock()

        satisfied, last_value = self._attempt(condition)
        attempts = 1

        if not satisfied and wait_seconds > 0:
            while self._elapsed_millis(start) < deadline_millis:
                if interval_millis > 0:
                    self._sleep(interval_millis / 1000)
                satisfied, last_value = self._attempt(condition)
                attempts += 1
                if satisfied:
                    break

        elapsed = self._elapsed_millis(start)
        logger.debug(
            f"Polled condition {attempts} time(s) in {elapsed}ms "
            f"(wait={wait_seconds}s, interval={interval_millis}ms): satisfied={satisfied}"
        )
        return PollResult(
            satisfied=satisfied,
            last_value=last_value,
            attempts=attempts,
            elapsed_millis=elapsed,
        )

    def _elapsed_millis(self, start: float) -> int:
        return int(round((self._clock() - start) * 1000))

    @staticmethod
    def _attempt(condition: Callable[[], bool]) -> tuple[bool, Any]:
        try:
            satisfied = bool(condition())
        except Exception as e:
            # source may be transiently unavailable; the caller only sees the
            # error if this turns out to be the final attempt
            logger.debug(f"Condition raised {type(e).__name__}: {e}")
            return False, e
        return satisfied, getattr(condition, "last_actual", None)
