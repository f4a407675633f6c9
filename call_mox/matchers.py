"""Matchers combining an invocation filter with a count predicate."""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as t

from ._validators import validate_method_id, validate_verifiers
from .counts import CountPredicate, at_least, at_most, exactly
from .errors import InvalidSubjectError
from .filters import InvocationFilter
from .invocation import Invocation, InvocationLog, MethodID, method_name

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .comparators import Comparator

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class MatcherConfig:
    """Everything needed to build a :class:`Matcher`.

    Parameters
    ----------
    method:
        Identifier of the method the expectation is about.
    verifiers:
        Per-position argument verifiers. Empty means "any arguments".
    count:
        Threshold for the number of matching calls. Defaults to
        "at least once".
    """

    method: MethodID
    verifiers: tuple[Comparator, ...] = ()
    count: CountPredicate = dc.field(default_factory=at_least)

    def __post_init__(self) -> None:
        """Validate the method id and freeze ``verifiers`` into a tuple."""
        validate_method_id(self.method)
        object.__setattr__(self, "verifiers", validate_verifiers(self.verifiers))


@dc.dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of evaluating a :class:`Matcher` against a mock."""

    matched: bool
    message: str
    actual_count: int
    matching: tuple[Invocation, ...]
    recorded: tuple[Invocation, ...]

    def __bool__(self) -> bool:
        """Return whether the expectation was met."""
        return self.matched


def invocation_log_of(subject: object) -> InvocationLog:
    """Return the invocation log of *subject*.

    Raises
    ------
    InvalidSubjectError
        If *subject* is not a mock exposing an :class:`InvocationLog`.
    """
    log = getattr(subject, "invocation_log", None)
    if not isinstance(log, InvocationLog):
        msg = f"{InvalidSubjectError.DEFAULT_MESSAGE} (got {type(subject).__name__})"
        raise InvalidSubjectError(msg)
    return log


@dc.dataclass(frozen=True, slots=True)
class Matcher:
    """A reusable, named expectation about the calls a mock received."""

    message: str
    invocation_filter: InvocationFilter
    count: CountPredicate

    @property
    def method(self) -> MethodID:
        """Return the method this matcher is about."""
        return self.invocation_filter.method

    def evaluate(self, subject: object) -> MatchResult:
        """Check *subject*'s recorded calls against this expectation."""
        recorded = invocation_log_of(subject).snapshot()
        matching = self.invocation_filter.apply(recorded)
        matched = self.count(len(matching))
        logger.debug(
            "%s: %d matching invocation(s) -> %s",
            self.message,
            len(matching),
            "pass" if matched else "fail",
        )
        return MatchResult(
            matched=matched,
            message=self.message,
            actual_count=len(matching),
            matching=matching,
            recorded=recorded,
        )

    def matches(self, subject: object) -> bool:
        """Return ``True`` if *subject* satisfies this expectation."""
        return self.evaluate(subject).matched

    __call__ = matches

    def __str__(self) -> str:
        """Return the diagnostic label."""
        return self.message


def _describe(config: MatcherConfig) -> str:
    """Return the diagnostic label for *config*."""
    message = f"receive <{method_name(config.method)}> {config.count.describe()}"
    if config.verifiers:
        verifiers = ", ".join(repr(verifier) for verifier in config.verifiers)
        message = f"{message} with arguments ({verifiers})"
    return message


def build_matcher(config: MatcherConfig) -> Matcher:
    """Create a :class:`Matcher` from *config*."""
    return Matcher(
        message=_describe(config),
        invocation_filter=InvocationFilter(config.method, config.verifiers),
        count=config.count,
    )


def receive_exactly(
    method: MethodID, n: int, with_args: t.Iterable[Comparator] = ()
) -> Matcher:
    """Expect exactly *n* calls of *method* whose arguments match *with_args*."""
    return build_matcher(MatcherConfig(method, tuple(with_args), exactly(n)))


def receive_at_least(
    method: MethodID, n: int = 1, with_args: t.Iterable[Comparator] = ()
) -> Matcher:
    """Expect *n* or more calls of *method* (default: at least one)."""
    return build_matcher(MatcherConfig(method, tuple(with_args), at_least(n)))


def receive_at_most(
    method: MethodID, n: int, with_args: t.Iterable[Comparator] = ()
) -> Matcher:
    """Expect no more than *n* calls of *method*."""
    return build_matcher(MatcherConfig(method, tuple(with_args), at_most(n)))


__all__ = [
    "MatchResult",
    "Matcher",
    "MatcherConfig",
    "build_matcher",
    "invocation_log_of",
    "receive_at_least",
    "receive_at_most",
    "receive_exactly",
]
