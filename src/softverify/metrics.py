from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Iterable

import numpy as np

from softverify.record import VerificationRecord


@dataclass
class MetricStatistics:
    """Statistics for a single metric across records."""

    avg: float | None
    min: float | None
    max: float | None
    stddev: float | None

    def to_dict(self) -> dict[str, float | None]:
        return asdict(self)


@dataclass
class SessionSummary:
    """Counts and poll timing for a set of verification records."""

    total: int
    passed: int
    failed: int
    pass_rate: float
    waited: int
    attempts: MetricStatistics
    elapsed_millis: MetricStatistics

    @property
    def all_passed(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "pass_rate": self.pass_rate,
            "waited": self.waited,
            "attempts": self.attempts.to_dict(),
            "elapsed_millis": self.elapsed_millis.to_dict(),
        }


def compute_stats(values: list[float | int | None]) -> MetricStatistics:
    """Compute avg, min, max, stddev for a list of numeric values."""
    nums = [v for v in values if v is not None]
    if not nums:
        return MetricStatistics(avg=None, min=None, max=None, stddev=None)

    arr = np.array(nums)
    return MetricStatistics(
        avg=round(float(np.mean(arr)), 4),
        min=round(float(np.min(arr)), 4),
        max=round(float(np.max(arr)), 4),
        stddev=round(float(np.std(arr)), 4),
    )


def summarize(records: Iterable[VerificationRecord]) -> SessionSummary:
    """Summarize records, typically ``queue.history``."""
    records = list(records)
    passed = sum(1 for r in records if r.passed)
    failed = len(records) - passed
    pass_rate = (passed / len(records) * 100) if records else 0.0

    return SessionSummary(
        total=len(records),
        passed=passed,
        failed=failed,
        pass_rate=round(pass_rate, 2),
        # records that were allowed to retry, as opposed to instant checks
        waited=sum(1 for r in records if r.wait_seconds > 0),
        attempts=compute_stats([r.attempts for r in records]),
        elapsed_millis=compute_stats([r.elapsed_millis for r in records]),
    )
