"""Representative leaf checks built on :class:`~softverify.engine.Verifier`.

Each check binds a null-safe predicate to a state accessor, picks a default
message and reporting style, and hands the result to the engine. The
``actual`` argument is either a :class:`StateAccessor`, read afresh on every
attempt, or a plain value compared as is. Callables are plain values too, so
wrap a getter in ``StateAccessor(getter)`` to poll it.
"""

from __future__ import annotations

import re
from collections.abc import Sized
from typing import Any, Callable

from softverify.config import VerifyOptions
from softverify.engine import Verifier
from softverify.record import VerificationRecord
from softverify.state import Condition, StateAccessor


def as_accessor(actual: Any) -> StateAccessor:
    if isinstance(actual, StateAccessor):
        return actual
    return StateAccessor.of(actual)


# -- null-safe predicates -----------------------------------------------------


def is_equal(actual: Any, expected: Any) -> bool:
    if actual is None or expected is None:
        return actual is None and expected is None
    return actual == expected


def does_contain(actual: Any, expected: Any) -> bool:
    if actual is None or expected is None:
        return False
    try:
        return expected in actual
    except TypeError:
        return False


def does_match(actual: Any, pattern: Any) -> bool:
    if actual is None or pattern is None:
        return False
    return re.search(pattern, str(actual)) is not None


def has_size(actual: Any, expected: Any) -> bool:
    if not isinstance(actual, Sized):
        return False
    return len(actual) == expected


# -- leaf checks --------------------------------------------------------------


def _check(
    verifier: Verifier,
    actual: Any,
    predicate: Callable[[Any, Any], bool],
    expected: Any,
    default_message: str,
    uses_diff_style: bool,
    options: VerifyOptions | None,
    negate: bool = False,
    waiting: bool = True,
) -> VerificationRecord:
    condition = Condition(as_accessor(actual), predicate, expected)
    if negate:
        condition = condition.negate()
    return verifier.verify(
        condition,
        default_message=default_message,
        uses_diff_style=uses_diff_style,
        options=options,
        waiting=waiting,
    )


def equals(verifier, actual, expected, options=None) -> VerificationRecord:
    return _check(
        verifier, actual, is_equal, expected,
        "Value Equals To Expected Value", True, options,
    )


def not_equals(verifier, actual, expected, options=None) -> VerificationRecord:
    return _check(
        verifier, actual, is_equal, expected,
        "Value Does Not Equal To Expected Value", False, options, negate=True,
    )


def contains(verifier, actual, expected, options=None) -> VerificationRecord:
    return _check(
        verifier, actual, does_contain, expected,
        "Value Contains Expected Value", False, options,
    )


def not_contains(verifier, actual, expected, options=None) -> VerificationRecord:
    return _check(
        verifier, actual, does_contain, expected,
        "Value Does Not Contain Expected Value", False, options, negate=True,
    )


def matches(verifier, actual, pattern, options=None) -> VerificationRecord:
    return _check(
        verifier, actual, does_match, pattern,
        "Value Matches Pattern", False, options,
    )


def is_true(verifier, actual, options=None) -> VerificationRecord:
    return _check(
        verifier, actual, lambda a, e: a is True, True,
        "Value Is True", False, options,
    )


def is_false(verifier, actual, options=None) -> VerificationRecord:
    return _check(
        verifier, actual, lambda a, e: a is False, False,
        "Value Is False", False, options,
    )


def is_none(verifier, actual, options=None) -> VerificationRecord:
    return _check(
        verifier, actual, is_equal, None,
        "Value Is Null", False, options, waiting=False,
    )


def is_not_none(verifier, actual, options=None) -> VerificationRecord:
    return _check(
        verifier, actual, is_equal, None,
        "Value Is Not Null", False, options, negate=True, waiting=False,
    )


def size_equals(verifier, actual, expected: int, options=None) -> VerificationRecord:
    return _check(
        verifier, actual, has_size, expected,
        "Size Equals To Expected Value", False, options,
    )
