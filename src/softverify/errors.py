"""Exception types raised by the verification engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from softverify.record import VerificationRecord

_HEADER_LINE = "-" * 60


class CallerMisuseError(ValueError):
    """A verification call was made with invalid arguments.

    Raised synchronously at the call site and never recorded in a queue:
    it points at a defect in the calling code, not in the system under test.
    """


class AggregateVerificationError(AssertionError):
    """One or more soft verifications failed.

    Attributes:
        failures: The failed records, in the order they were recorded.
        header: Optional caption printed above the failure list.
    """

    def __init__(
        self,
        failures: Iterable[VerificationRecord],
        header: str = "",
        title: str = "Verify All Failed",
    ):
        self.failures = tuple(failures)
        self.header = header
        self.title = title
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        lines = [f"============== {self.title} =============="]
        if self.header.strip():
            lines += [_HEADER_LINE, self.header, _HEADER_LINE]
        lines += [record.format() for record in self.failures]
        return "\n".join(lines)
