"""Bookkeeping for mocks whose logs are reset between test cases."""

from __future__ import annotations

import logging
import typing as t

from .matchers import invocation_log_of

logger = logging.getLogger(__name__)

_MockT = t.TypeVar("_MockT")


class MockTracker:
    """Remember mocks so their invocation logs can be reset together."""

    def __init__(self) -> None:
        self._mocks: list[object] = []

    def track(self, mock: _MockT) -> _MockT:
        """Register *mock* and return it unchanged.

        Raises
        ------
        InvalidSubjectError
            If *mock* does not expose an invocation log.
        """
        invocation_log_of(mock)
        if not any(existing is mock for existing in self._mocks):
            self._mocks.append(mock)
        return mock

    @property
    def tracked(self) -> tuple[object, ...]:
        """Return the registered mocks in registration order."""
        return tuple(self._mocks)

    def reset_all(self) -> None:
        """Empty the invocation log of every registered mock."""
        logger.debug("Resetting %d tracked mock(s)", len(self._mocks))
        for mock in self._mocks:
            invocation_log_of(mock).reset()

    def clear(self) -> None:
        """Forget every registered mock without resetting it."""
        self._mocks.clear()


__all__ = ["MockTracker"]
