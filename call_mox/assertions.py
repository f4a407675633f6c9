"""Assertion helpers raising readable errors for failed matchers."""

from __future__ import annotations

import dataclasses as dc
import typing as t

from .diagnostics import describe_failure
from .errors import UnexpectedInvocationError, UnfulfilledExpectationError

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .matchers import Matcher, MatchResult


@dc.dataclass(frozen=True, slots=True)
class Expectation:
    """Assertions about the calls received by ``subject``."""

    subject: object

    def to(self, matcher: Matcher) -> MatchResult:
        """Assert that ``subject`` satisfies *matcher*.

        Raises
        ------
        UnfulfilledExpectationError
            When the recorded calls do not satisfy *matcher*.
        InvalidSubjectError
            When ``subject`` is not a mock.
        """
        result = matcher.evaluate(self.subject)
        if not result.matched:
            msg = describe_failure("Unfulfilled expectation.", matcher, result)
            raise UnfulfilledExpectationError(msg)
        return result

    def to_not(self, matcher: Matcher) -> MatchResult:
        """Assert that ``subject`` does *not* satisfy *matcher*.

        Raises
        ------
        UnexpectedInvocationError
            When the recorded calls satisfy *matcher*.
        InvalidSubjectError
            When ``subject`` is not a mock.
        """
        result = matcher.evaluate(self.subject)
        if result.matched:
            msg = describe_failure("Unexpected invocation match.", matcher, result)
            raise UnexpectedInvocationError(msg)
        return result

    not_to = to_not


def expect(subject: object) -> Expectation:
    """Start an assertion about the calls *subject* received."""
    return Expectation(subject)


__all__ = ["Expectation", "expect"]
