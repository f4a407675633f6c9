"""Exception hierarchy for call_mox."""

from __future__ import annotations

import typing as t


class CallMoxError(Exception):
    """Base class for all call_mox errors."""


class InvalidSubjectError(CallMoxError, TypeError):
    """Raised when a matcher is evaluated against something that is not a mock.

    This is a programming error in the test, not an assertion outcome, so it
    deliberately does not derive from :class:`AssertionError`.
    """

    DEFAULT_MESSAGE: t.ClassVar[str] = (
        "subject does not expose an invocation log; expected a mock"
    )


class VerificationError(CallMoxError, AssertionError):
    """Base class for failed invocation expectations."""


class UnfulfilledExpectationError(VerificationError):
    """A mock did not receive the calls it was expected to receive."""


class UnexpectedInvocationError(VerificationError):
    """A mock received calls that it was expected not to receive."""


__all__ = [
    "CallMoxError",
    "InvalidSubjectError",
    "UnexpectedInvocationError",
    "UnfulfilledExpectationError",
    "VerificationError",
]
