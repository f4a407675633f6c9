"""Test doubles shared by the unit tests."""

from __future__ import annotations

import enum

from call_mox.mock import Mock


class DummyMock(Mock):
    """Mock with two methods, mirroring a typical hand-written double."""

    class Method(enum.IntEnum):
        MY_FUNC = 0
        MY_OTHER_FUNC = 1

    def my_func(self, *args: object) -> None:
        self.register_invocation(self.Method.MY_FUNC, *args)

    def my_other_func(self, *args: object) -> None:
        self.register_invocation(self.Method.MY_OTHER_FUNC, *args)


MY_FUNC = DummyMock.Method.MY_FUNC
MY_OTHER_FUNC = DummyMock.Method.MY_OTHER_FUNC
