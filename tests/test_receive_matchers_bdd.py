"""Behavioural tests for receive matchers using pytest-bdd."""

from __future__ import annotations

from pathlib import Path

from pytest_bdd import scenario

from tests.steps import *  # noqa: F403

FEATURES_DIR = Path(__file__).resolve().parent.parent / "features"
FEATURE = str(FEATURES_DIR / "receive_matchers.feature")


@scenario(FEATURE, "counting calls without arguments")
def test_counting_calls_without_arguments() -> None:
    """Exact, minimum and maximum counts over a mixed log."""


@scenario(FEATURE, "verifying arguments")
def test_verifying_arguments() -> None:
    """Only calls whose arguments pass every verifier are counted."""


@scenario(FEATURE, "argument count must agree with the verifiers")
def test_argument_count_must_agree() -> None:
    """Calls with a different number of arguments are excluded."""


@scenario(FEATURE, "resetting the mock forgets earlier calls")
def test_resetting_the_mock() -> None:
    """A reset brings every count back to zero."""


@scenario(FEATURE, "a failed expectation describes the recorded calls")
def test_failed_expectation_message() -> None:
    """Failure text lists the calls and the reasons they did not match."""


@scenario(FEATURE, "matching something that is not a mock")
def test_matching_a_non_mock() -> None:
    """Non-mocks raise a distinct error."""
