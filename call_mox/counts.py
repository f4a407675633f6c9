"""Count predicates comparing a number of matching calls to a threshold."""

from __future__ import annotations

import dataclasses as dc
import enum
import operator
import typing as t

from ._validators import validate_count


class CountKind(enum.StrEnum):
    """How a filtered invocation count is compared to its threshold."""

    EXACTLY = "exactly"
    AT_LEAST = "at least"
    AT_MOST = "at most"


_COMPARISONS: dict[CountKind, t.Callable[[int, int], bool]] = {
    CountKind.EXACTLY: operator.eq,
    CountKind.AT_LEAST: operator.ge,
    CountKind.AT_MOST: operator.le,
}


def _times(n: int) -> str:
    return "1 time" if n == 1 else f"{n} times"


@dc.dataclass(frozen=True, slots=True)
class CountPredicate:
    """Check an invocation count against the threshold ``n``."""

    kind: CountKind
    n: int

    def __post_init__(self) -> None:
        """Validate the threshold and normalise ``kind``."""
        object.__setattr__(self, "kind", CountKind(self.kind))
        validate_count(self.n, name="n")

    def __call__(self, count: int) -> bool:
        """Return ``True`` when *count* satisfies the threshold."""
        return _COMPARISONS[self.kind](count, self.n)

    def describe(self) -> str:
        """Return a phrase such as ``"at least 2 times"``."""
        return f"{self.kind} {_times(self.n)}"


def exactly(n: int) -> CountPredicate:
    """Require exactly *n* matching invocations."""
    return CountPredicate(CountKind.EXACTLY, n)


def at_least(n: int = 1) -> CountPredicate:
    """Require *n* or more matching invocations."""
    return CountPredicate(CountKind.AT_LEAST, n)


def at_most(n: int) -> CountPredicate:
    """Allow no more than *n* matching invocations."""
    return CountPredicate(CountKind.AT_MOST, n)


__all__ = ["CountKind", "CountPredicate", "at_least", "at_most", "exactly"]
