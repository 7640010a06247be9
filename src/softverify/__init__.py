"""Polling soft-assertion engine for test automation."""

from softverify.config import VerifyConfig, VerifyOptions, load_config
from softverify.engine import Verifier
from softverify.errors import AggregateVerificationError, CallerMisuseError
from softverify.poller import Poller, PollResult
from softverify.queue import StrictVerificationQueue, VerificationQueue
from softverify.record import VerificationRecord
from softverify.state import Condition, StateAccessor

__all__ = [
    "AggregateVerificationError",
    "CallerMisuseError",
    "Condition",
    "PollResult",
    "Poller",
    "StateAccessor",
    "StrictVerificationQueue",
    "VerificationQueue",
    "VerificationRecord",
    "Verifier",
    "VerifyConfig",
    "VerifyOptions",
    "load_config",
]
