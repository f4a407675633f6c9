"""Invocation recording and matching for hand-written Python test doubles.

Mocks record every call into an append-only :class:`InvocationLog`;
matchers built with :func:`receive_exactly`, :func:`receive_at_least` and
:func:`receive_at_most` answer whether a method was called the expected
number of times with arguments accepted by the given verifiers.
"""

from __future__ import annotations

from .assertions import Expectation, expect
from .comparators import (
    Any,
    AnyOf,
    Comparator,
    Contains,
    Equals,
    IsA,
    IsNil,
    Regex,
    Satisfies,
    StartsWith,
)
from .counts import CountKind, CountPredicate, at_least, at_most, exactly
from .errors import (
    CallMoxError,
    InvalidSubjectError,
    UnexpectedInvocationError,
    UnfulfilledExpectationError,
    VerificationError,
)
from .filters import InvocationFilter
from .invocation import Invocation, InvocationLog, MethodID
from .matchers import (
    Matcher,
    MatcherConfig,
    MatchResult,
    build_matcher,
    receive_at_least,
    receive_at_most,
    receive_exactly,
)
from .mock import Mock, SupportsInvocationLog
from .tracker import MockTracker

__all__ = [
    "Any",
    "AnyOf",
    "CallMoxError",
    "Comparator",
    "Contains",
    "CountKind",
    "CountPredicate",
    "Equals",
    "Expectation",
    "InvalidSubjectError",
    "Invocation",
    "InvocationFilter",
    "InvocationLog",
    "IsA",
    "IsNil",
    "MatchResult",
    "Matcher",
    "MatcherConfig",
    "MethodID",
    "Mock",
    "MockTracker",
    "Regex",
    "Satisfies",
    "StartsWith",
    "SupportsInvocationLog",
    "UnexpectedInvocationError",
    "UnfulfilledExpectationError",
    "VerificationError",
    "at_least",
    "at_most",
    "build_matcher",
    "exactly",
    "expect",
    "receive_at_least",
    "receive_at_most",
    "receive_exactly",
]
