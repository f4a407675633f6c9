"""Pytest plugin providing the ``call_mox`` fixture."""

from __future__ import annotations

import logging
import typing as t

import pytest

from .tracker import MockTracker

logger = logging.getLogger(__name__)


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line and ini options for the plugin."""
    group = parser.getgroup("call_mox")
    group.addoption(
        "--call-mox-reset",
        action="store_true",
        dest="call_mox_reset_on_teardown",
        default=None,
        help=(
            "Reset the invocation logs of tracked mocks when the call_mox "
            "fixture is torn down. Overrides the pytest.ini setting."
        ),
    )
    group.addoption(
        "--no-call-mox-reset",
        action="store_false",
        dest="call_mox_reset_on_teardown",
        default=None,
        help=(
            "Leave tracked mocks untouched at call_mox fixture teardown. "
            "Overrides the pytest.ini setting."
        ),
    )
    parser.addini(
        "call_mox_reset_on_teardown",
        "Reset the invocation logs of tracked mocks after each test.",
        type="bool",
        default=True,
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register plugin-specific markers."""
    config.addinivalue_line(
        "markers",
        (
            "call_mox(reset: bool = True): override resetting tracked mocks "
            "at teardown for a single test."
        ),
    )


def _reset_enabled(request: pytest.FixtureRequest) -> bool:
    """Return whether tracked mocks should be reset at teardown.

    A ``call_mox(reset=...)`` marker wins over an indirect fixture
    parameter, which wins over the command line, which wins over the ini
    file.
    """
    override = _reset_override(request)
    if override is not None:
        return override
    cli_value = request.config.getoption("call_mox_reset_on_teardown")
    if cli_value is not None:
        return bool(cli_value)
    return bool(request.config.getini("call_mox_reset_on_teardown"))


def _reset_override(request: pytest.FixtureRequest) -> bool | None:
    """Return the per-test ``reset`` override from a marker or fixture param."""
    marker = request.node.get_closest_marker("call_mox")
    if marker is not None and "reset" in marker.kwargs:
        return bool(marker.kwargs["reset"])

    param = getattr(request, "param", None)
    if param is None or isinstance(param, bool):
        return param
    if not isinstance(param, dict):
        msg = (
            "call_mox fixture param must be a bool or dict with 'reset' key, "
            f"got {type(param).__name__}"
        )
        raise TypeError(msg)
    if "reset" not in param:
        msg = (
            "call_mox fixture param dict must contain 'reset' key, "
            f"got keys: {list(param)}"
        )
        raise TypeError(msg)
    return bool(param["reset"])


@pytest.fixture
def call_mox(request: pytest.FixtureRequest) -> t.Generator[MockTracker, None, None]:
    """Provide a :class:`MockTracker` that resets its mocks at teardown."""
    tracker = MockTracker()
    reset = _reset_enabled(request)
    try:
        yield tracker
    finally:
        _teardown_tracker(tracker, reset=reset)


def _teardown_tracker(tracker: MockTracker, *, reset: bool) -> None:
    """Reset tracked mocks when enabled and forget them."""
    try:
        if reset:
            tracker.reset_all()
    except Exception:
        logger.exception("Error during call_mox fixture cleanup")
        pytest.fail("call_mox fixture cleanup failed")
    finally:
        tracker.clear()
