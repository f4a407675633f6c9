"""Minimal mock base class that records calls into an invocation log."""

from __future__ import annotations

import enum
import typing as t

from ._validators import validate_method_id
from .invocation import Invocation, InvocationLog, MethodID


@t.runtime_checkable
class SupportsInvocationLog(t.Protocol):
    """Anything a matcher can be evaluated against."""

    invocation_log: InvocationLog


class Mock:
    """Base class for hand-written test doubles.

    Subclasses enumerate their mockable methods in a nested
    ``Method`` :class:`enum.IntEnum` and call :meth:`register_invocation`
    from each mocked method::

        class FakeStore(Mock):
            class Method(enum.IntEnum):
                GET = enum.auto()
                PUT = enum.auto()

            def get(self, key):
                self.register_invocation(self.Method.GET, key)
    """

    Method: t.ClassVar[type[enum.IntEnum] | None] = None

    def __init__(self) -> None:
        self.invocation_log = InvocationLog()

    def register_invocation(self, method: MethodID, *args: object) -> Invocation:
        """Record a call to *method* with positional *args*."""
        return self.invocation_log.append(self._resolve_method(method), args)

    def reset_mock(self) -> None:
        """Forget every call recorded so far."""
        self.invocation_log.reset()

    @property
    def invocations(self) -> tuple[Invocation, ...]:
        """Return a snapshot of the recorded calls, oldest first."""
        return self.invocation_log.snapshot()

    def _resolve_method(self, method: MethodID) -> MethodID:
        """Validate *method* and map it onto :attr:`Method` when declared."""
        validate_method_id(method)
        method_enum = type(self).Method
        if method_enum is None:
            return method
        try:
            return method_enum(method)
        except ValueError:
            msg = f"{method!r} is not a method of {type(self).__name__}"
            raise ValueError(msg) from None


__all__ = ["Mock", "SupportsInvocationLog"]
