"""Glue between leaf checks, the poller and a verification queue."""

from __future__ import annotations

import logging

from softverify.config import VerifyConfig, VerifyOptions, default_config
from softverify.errors import CallerMisuseError
from softverify.poller import Poller
from softverify.queue import VerificationQueue
from softverify.record import VerificationRecord, represent
from softverify.state import Condition

logger = logging.getLogger(__name__)

_NO_OPTIONS = VerifyOptions()


class Verifier:
    """Runs conditions through the poller and records the outcome.

    Args:
        queue: Where outcomes are recorded. A fresh soft queue by default.
        config: Wait/interval defaults. ``default_config()`` if omitted.
        poller: Poller to use; inject one with a fake clock in tests.
    """

    def __init__(
        self,
        queue: VerificationQueue | None = None,
        config: VerifyConfig | None = None,
        poller: Poller | None = None,
    ):
        self.config = config or default_config()
        self.queue = queue if queue is not None else VerificationQueue(
            print_passed=self.config.print_passed
        )
        self.poller = poller or Poller()

    def verify(
        self,
        condition: Condition,
        *,
        default_message: str,
        uses_diff_style: bool,
        options: VerifyOptions | None = None,
        waiting: bool = True,
    ) -> VerificationRecord:
        """Poll *condition* and record the result.

        ``waiting=False`` marks instant checks: unless the caller sets
        ``wait_seconds`` explicitly the condition is evaluated once.
        """
        if condition is None:
            raise CallerMisuseError("verify requires a condition, got None")
        options = options or _NO_OPTIONS

        wait_seconds = self._wait_seconds(options, waiting)
        interval_millis = self._interval_millis(options)
        message = resolve_message(options, default_message)

        outcome = self.poller.poll(condition, wait_seconds, interval_millis)
        return self.queue.record(
            outcome,
            message=message,
            uses_diff_style=uses_diff_style,
            expected_repr=represent(condition.expected),
            wait_seconds=wait_seconds,
            interval_millis=interval_millis,
        )

    def wait(self, condition: Condition, options: VerifyOptions | None = None) -> bool:
        """Poll *condition* and return whether it held, without recording."""
        options = options or _NO_OPTIONS
        outcome = self.poller.poll(
            condition, self._wait_seconds(options, True), self._interval_millis(options)
        )
        return outcome.satisfied

    def finalize(self, header: str = "") -> None:
        self.queue.finalize(header)

    def _wait_seconds(self, options: VerifyOptions, waiting: bool) -> int:
        if options.wait_seconds is not None:
            return options.wait_seconds
        return self.config.default_wait_seconds if waiting else 0

    def _interval_millis(self, options: VerifyOptions) -> int:
        if options.interval_millis is not None:
            return options.interval_millis
        return self.config.default_interval_millis


def resolve_message(options: VerifyOptions, default_message: str) -> str:
    """Caller message with ``%`` params applied, or the leaf's default."""
    if not options.message:
        return default_message
    if not options.params:
        return options.message
    try:
        return options.message % options.params
    except (TypeError, ValueError) as e:
        raise CallerMisuseError(
            f"message {options.message!r} does not match params {options.params!r}: {e}"
        ) from e
