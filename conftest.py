"""Global test configuration and shared fixtures."""

from __future__ import annotations

import logging

import pytest

pytest_plugins = ("call_mox.pytest_plugin", "pytester")


@pytest.fixture(autouse=True)
def call_mox_debug_logging(caplog: pytest.LogCaptureFixture) -> None:
    """Capture call_mox debug logs so failing tests show matcher decisions."""
    caplog.set_level(logging.DEBUG, logger="call_mox")
