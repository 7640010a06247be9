"""Immutable outcome of one verification and its text rendering."""

from __future__ import annotations

import difflib
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any

NULL_REPR = "<NULL>"


def represent(value: Any) -> str:
    """Render a value for verification messages.

    ``None`` becomes ``<NULL>`` and exceptions become ``<Type: message>``.
    Values whose ``__str__`` raises render as ``<unprintable Type>``; this is
    called while recording, which must not fail.
    """
    if value is None:
        return NULL_REPR
    try:
        if isinstance(value, BaseException):
            return f"<{type(value).__name__}: {value}>"
        if isinstance(value, (set, frozenset)):
            return str(sorted(value, key=repr))
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def inline_diff(expected: str, actual: str) -> str:
    """Compact character diff: ``[-removed-]`` and ``{+inserted+}``."""
    matcher = difflib.SequenceMatcher(a=expected, b=actual, autojunk=False)
    parts: list[str] = []
    for op, a0, a1, b0, b1 in matcher.get_opcodes():
        if op == "equal":
            parts.append(expected[a0:a1])
            continue
        if op in ("delete", "replace"):
            parts.append(f"[-{expected[a0:a1]}-]")
        if op in ("insert", "replace"):
            parts.append(f"{{+{actual[b0:b1]}+}}")
    return "".join(parts)


@dataclass(frozen=True)
class VerificationRecord:
    """Snapshot of one verification outcome.

    Attributes:
        passed: Whether the condition held.
        message: Fully resolved human-readable description.
        uses_diff_style: Render failures as expected/actual diff rather than
            the one-line descriptive form.
        expected_repr: Rendered expected value.
        actual_repr: Rendered last actual value (or the final attempt's error).
        wait_seconds: Wait budget the poll ran with (0 means instant).
        interval_millis: Retry interval the poll ran with.
        attempts: Number of evaluations performed.
        elapsed_millis: Time spent polling.
        created_at: UTC time the record was created.
    """

    passed: bool
    message: str
    uses_diff_style: bool
    expected_repr: str
    actual_repr: str
    wait_seconds: int
    interval_millis: int
    attempts: int
    elapsed_millis: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def format(self) -> str:
        message = self.message.strip()
        if self.passed:
            return f"PASS ::> {message} Exp: '{self.expected_repr}', Act: '{self.actual_repr}'"
        if self.uses_diff_style:
            diff = inline_diff(self.expected_repr, self.actual_repr)
            return (
                f"FAIL ::> {message}\n"
                f"Diff: '{diff}',\n"
                f"Exp: '{self.expected_repr}',\n"
                f"Act: '{self.actual_repr}'"
            )
        return f"FAIL ::> {message} Exp: '{self.expected_repr}', Act: '{self.actual_repr}'"

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat()
        return data
