"""Session-scoped collectors of verification records."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from softverify.errors import AggregateVerificationError
from softverify.poller import PollResult
from softverify.record import VerificationRecord, represent

logger = logging.getLogger(__name__)


class VerificationQueue:
    """Collects verification outcomes and reports failures in aggregate.

    ``record`` never raises for assertion outcomes. Failures surface only
    when the pending records are drained by :meth:`finalize` (or one of its
    ``any``/``none`` variants). Appends and drains share one lock, so a queue
    may be fed from several threads, although one queue per test session is
    the expected use.

    Pass/fail counters are session totals and are not reset by finalize.
    ``history`` keeps every record ever appended for reporting.
    """

    def __init__(self, print_passed: bool = False):
        self.print_passed = print_passed
        self._lock = threading.Lock()
        self._pending: list[VerificationRecord] = []
        self._history: list[VerificationRecord] = []
        self._passed = 0
        self._failed = 0

    def record(
        self,
        outcome: PollResult,
        message: str,
        uses_diff_style: bool,
        expected_repr: str,
        wait_seconds: int,
        interval_millis: int,
    ) -> VerificationRecord:
        """Build a record from a poll outcome and append it."""
        record = VerificationRecord(
            passed=outcome.satisfied,
            message=message,
            uses_diff_style=uses_diff_style,
            expected_repr=expected_repr,
            actual_repr=represent(outcome.last_value),
            wait_seconds=wait_seconds,
            interval_millis=interval_millis,
            attempts=outcome.attempts,
            elapsed_millis=outcome.elapsed_millis,
        )
        self._append(record)
        return record

    def _append(self, record: VerificationRecord) -> None:
        with self._lock:
            self._pending.append(record)
            self._history.append(record)
            if record.passed:
                self._passed += 1
            else:
                self._failed += 1
        self._log(record)

    def _log(self, record: VerificationRecord) -> None:
        if not record.passed:
            logger.error(record.format())
        elif self.print_passed:
            logger.info(record.format())
        else:
            logger.debug(record.format())

    def _drain(self) -> list[VerificationRecord]:
        with self._lock:
            drained = self._pending
            self._pending = []
        return drained

    def finalize(self, header: str = "") -> None:
        """Raise if any pending record failed; always drains the pending list."""
        self._settle(
            header,
            "Verify All",
            passed=lambda records: all(r.passed for r in records),
            offending=lambda records: [r for r in records if not r.passed],
        )

    assert_all = finalize

    def finalize_any(self, header: str = "") -> None:
        """Raise unless at least one pending record passed.

        On failure every pending record is listed, since none of them passed,
        so the report shows each alternative that was tried.
        """
        self._settle(
            header,
            "Verify Any",
            passed=lambda records: any(r.passed for r in records),
            offending=lambda records: list(records),
        )

    def finalize_none(self, header: str = "") -> None:
        """Raise if any pending record passed."""
        self._settle(
            header,
            "Verify None",
            passed=lambda records: not any(r.passed for r in records),
            offending=lambda records: [r for r in records if r.passed],
        )

    def _settle(
        self,
        header: str,
        kind: str,
        passed: Callable[[list[VerificationRecord]], bool],
        offending: Callable[[list[VerificationRecord]], list[VerificationRecord]],
    ) -> None:
        records = self._drain()
        if not records:
            return
        if passed(records):
            logger.debug(f"{kind} passed for {len(records)} record(s)")
            return
        error = AggregateVerificationError(
            offending(records), header=header, title=f"{kind} Failed"
        )
        logger.error(str(error))
        raise error

    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)

    def passed_count(self) -> int:
        return self._passed

    def failed_count(self) -> int:
        return self._failed

    @property
    def history(self) -> tuple[VerificationRecord, ...]:
        with self._lock:
            return tuple(self._history)


class StrictVerificationQueue(VerificationQueue):
    """Queue that fails fast: a failed record raises as soon as it is recorded."""

    def _append(self, record: VerificationRecord) -> None:
        super()._append(record)
        if not record.passed:
            self._drain()
            raise AggregateVerificationError([record], title="Verification Failed")
