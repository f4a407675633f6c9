# ruff: noqa: S101
"""pytest-bdd assertions that validate matcher outcomes."""

from __future__ import annotations

import typing as t

from pytest_bdd import parsers, then

from call_mox.errors import InvalidSubjectError
from call_mox.filters import InvocationFilter
from call_mox.unittests._dummy import DummyMock
from tests.helpers.arguments import build_step_matcher, equals_verifiers

if t.TYPE_CHECKING:  # pragma: no cover - typing only
    from call_mox.errors import VerificationError


@then(
    parsers.re(
        r'the mock should (?P<negated>not )?receive "(?P<method>\w+)"'
        r"(?: with arguments? (?P<args>.+?))?"
        r" (?P<kind>exactly|at least|at most) (?P<n>\d+) times?"
    )
)
def check_receive(
    dummy: DummyMock,
    negated: str | None,
    method: str,
    args: str | None,
    kind: str,
    n: str,
) -> None:
    """Evaluate the described matcher against the mock."""
    result = build_step_matcher(method, args, kind, n).evaluate(dummy)
    assert result.matched is not bool(negated), result.message


@then(
    parsers.re(
        r'"(?P<method>\w+)" with arguments? (?P<args>.+) '
        r"should match (?P<count>\d+) invocations?"
    )
)
def check_filtered_count(dummy: DummyMock, method: str, args: str, count: str) -> None:
    """Assert the invocation filter selects *count* calls."""
    inv_filter = InvocationFilter(DummyMock.Method[method], equals_verifiers(args))
    assert len(inv_filter.apply(dummy.invocations)) == int(count)


@then(
    parsers.re(r'the observed count of "(?P<method>\w+)" should be (?P<count>\d+)')
)
def check_observed_count(dummy: DummyMock, method: str, count: str) -> None:
    """Assert how many calls of *method* were recorded."""
    inv_filter = InvocationFilter(DummyMock.Method[method])
    assert len(inv_filter.apply(dummy.invocations)) == int(count)


@then(parsers.cfparse('the verification error message should contain "{text}"'))
def verification_error_contains(
    verification_error: VerificationError | None, text: str
) -> None:
    """Assert the captured verification error contains *text*."""
    assert verification_error is not None, "expectation unexpectedly passed"
    assert text in str(verification_error)


@then("an invalid subject error should be raised")
def check_invalid_subject(subject_error: InvalidSubjectError) -> None:
    """Assert the matcher refused to evaluate a non-mock."""
    assert isinstance(subject_error, InvalidSubjectError)
    assert not isinstance(subject_error, AssertionError)
