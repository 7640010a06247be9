"""Live state accessors and the conditions evaluated against them."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from softverify.errors import CallerMisuseError

T = TypeVar("T")


class StateAccessor(Generic[T]):
    """Reads the current "actual" value on demand.

    Every call to :meth:`get` re-invokes the supplier. Nothing is cached and
    exceptions raised by the supplier propagate unchanged.
    """

    def __init__(self, supplier: Callable[[], T]):
        if not callable(supplier):
            raise CallerMisuseError(
                f"StateAccessor supplier must be callable, got {type(supplier).__name__}"
            )
        self._supplier = supplier

    @classmethod
    def of(cls, value: T) -> StateAccessor[T]:
        """Accessor over a fixed value."""
        return cls(lambda: value)

    def get(self) -> T:
        return self._supplier()

    def __repr__(self) -> str:
        return f"StateAccessor({self._supplier!r})"


class Condition(Generic[T]):
    """A boolean check of an accessor's current value against an expectation.

    The predicate receives ``(actual, expected)`` and is applied to a fresh
    read of the accessor on each evaluation. ``last_actual`` holds the value
    read by the most recent evaluation so callers can report it.
    """

    def __init__(
        self,
        accessor: StateAccessor[T],
        predicate: Callable[[T, Any], bool],
        expected: Any = None,
    ):
        if accessor is None:
            raise CallerMisuseError("Condition requires a StateAccessor, got None")
        if not callable(predicate):
            raise CallerMisuseError("Condition predicate must be callable")
        self.accessor = accessor
        self.predicate = predicate
        self.expected = expected
        self.last_actual: Any = None

    def __call__(self) -> bool:
        actual = self.accessor.get()
        self.last_actual = actual
        return bool(self.predicate(actual, self.expected))

    def negate(self) -> Condition[T]:
        """Return a condition that holds exactly when this one does not."""
        predicate = self.predicate
        return Condition(
            self.accessor,
            lambda actual, expected: not predicate(actual, expected),
            self.expected,
        )
