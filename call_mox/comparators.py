"""Argument verifiers used to match individual call arguments.

Every verifier is a callable taking one recorded argument and returning
``True`` when it matches. ``None`` stands for an absent argument. A value
of the wrong type is never an error here: the verifier simply reports a
mismatch so the invocation is excluded from the match.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import re
import typing as t

logger = logging.getLogger(__name__)


class Comparator(t.Protocol):
    """Callable returning ``True`` when a value matches."""

    def __call__(self, value: object) -> bool:
        """Return ``True`` if *value* satisfies the comparison."""
        ...


def _comparable(expected: object, actual: object) -> bool:
    """Return ``True`` when *expected* and *actual* may be compared for equality."""
    if isinstance(expected, bool) != isinstance(actual, bool):
        return False
    return isinstance(actual, type(expected)) or isinstance(expected, type(actual))


def values_equal(expected: object, actual: object) -> bool:
    """Compare two argument values, treating ``None`` as absence."""
    if expected is None or actual is None:
        return expected is actual
    if not _comparable(expected, actual):
        return False
    try:
        return bool(actual == expected)
    except Exception:  # noqa: BLE001 - a failing __eq__ is a mismatch
        logger.debug("Equality check %r == %r raised", actual, expected, exc_info=True)
        return False


@dc.dataclass(frozen=True, slots=True)
class Any:
    """Match any value, including ``None``."""

    def __call__(self, value: object) -> bool:
        """Return ``True`` for any input."""
        return True


@dc.dataclass(frozen=True, slots=True)
class Equals:
    """Match arguments equal to ``value``.

    ``Equals(None)`` matches only an absent argument.
    """

    value: object

    def __call__(self, value: object) -> bool:
        """Return ``True`` when *value* equals the expected value."""
        return values_equal(self.value, value)


@dc.dataclass(frozen=True, slots=True)
class IsNil:
    """Match an absent (``None``) argument."""

    def __call__(self, value: object) -> bool:
        """Return ``True`` when *value* is ``None``."""
        return value is None


@dc.dataclass(frozen=True, slots=True, init=False)
class AnyOf:
    """Match arguments equal to at least one of ``options``.

    ``None`` entries in ``options`` allow an absent argument to match.
    """

    options: tuple[object, ...]

    def __init__(self, options: t.Iterable[object]) -> None:
        object.__setattr__(self, "options", tuple(options))

    def __call__(self, value: object) -> bool:
        """Return ``True`` if *value* equals any option."""
        return any(values_equal(option, value) for option in self.options)


@dc.dataclass(frozen=True, slots=True)
class Satisfies:
    """Use a custom ``predicate`` to determine a match.

    ``None`` is rejected without consulting the predicate unless
    ``accepts_none`` is set. When ``expects`` is given, arguments that are
    not instances of it are rejected the same way. Exceptions raised by the
    predicate count as a mismatch.
    """

    predicate: t.Callable[[t.Any], object]
    accepts_none: bool = False
    expects: type | tuple[type, ...] | None = None

    def __call__(self, value: object) -> bool:
        """Return ``True`` if ``predicate(value)`` is truthy."""
        if value is None and not self.accepts_none:
            return False
        if (
            value is not None
            and self.expects is not None
            and not isinstance(value, self.expects)
        ):
            return False
        try:
            return bool(self.predicate(value))
        except Exception:  # noqa: BLE001 - predicate failures are mismatches
            logger.debug(
                "Predicate %r raised for %r; treating as mismatch",
                self.predicate,
                value,
                exc_info=True,
            )
            return False


@dc.dataclass(frozen=True, slots=True)
class IsA:
    """Match instances of ``typ``."""

    typ: type | tuple[type, ...]

    def __call__(self, value: object) -> bool:
        """Return ``True`` when *value* is an instance of ``typ``."""
        return isinstance(value, self.typ)


@dc.dataclass(frozen=True, slots=True, init=False)
class Regex:
    """Match string arguments found by ``pattern``.

    A ``bytes`` pattern matches ``bytes`` arguments only.
    """

    pattern: str | bytes
    _compiled: re.Pattern[t.Any] = dc.field(repr=False, compare=False)

    def __init__(self, pattern: str | bytes) -> None:
        object.__setattr__(self, "pattern", pattern)
        object.__setattr__(self, "_compiled", re.compile(pattern))

    def __call__(self, value: object) -> bool:
        """Return ``True`` if the regex matches *value*."""
        if not isinstance(value, type(self.pattern)):
            return False
        return self._compiled.search(value) is not None


@dc.dataclass(frozen=True, slots=True)
class Contains:
    """Match container arguments holding ``item``.

    Iterators are never consumed: they do not match.
    """

    item: object

    def __call__(self, value: object) -> bool:
        """Return ``True`` if ``item`` is in *value*."""
        if value is None or isinstance(value, cabc.Iterator):
            return False
        try:
            return self.item in value  # type: ignore[operator]
        except Exception:  # noqa: BLE001 - a failing __contains__ is a mismatch
            logger.debug(
                "Membership test %r in %r raised", self.item, value, exc_info=True
            )
            return False


@dc.dataclass(frozen=True, slots=True)
class StartsWith:
    """Match ``str`` or ``bytes`` arguments beginning with ``prefix``."""

    prefix: str | bytes

    def __call__(self, value: object) -> bool:
        """Return ``True`` if *value* starts with ``prefix``."""
        if not isinstance(value, type(self.prefix)):
            return False
        return value.startswith(self.prefix)  # type: ignore[arg-type]


__all__ = [
    "Any",
    "AnyOf",
    "Comparator",
    "Contains",
    "Equals",
    "IsA",
    "IsNil",
    "Regex",
    "Satisfies",
    "StartsWith",
    "values_equal",
]
