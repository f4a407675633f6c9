"""Recorded invocations and the per-mock invocation log."""

from __future__ import annotations

import dataclasses as dc
import enum
import logging
import typing as t

logger = logging.getLogger(__name__)

MethodID: t.TypeAlias = int


def method_name(method: MethodID) -> str:
    """Return a display name for *method*.

    Enum members render as their member name; bare integers as their value.
    """
    if isinstance(method, enum.Enum):
        return method.name
    return str(int(method))


@dc.dataclass(frozen=True, slots=True)
class Invocation:
    """A single call recorded against a mock."""

    method: MethodID
    args: tuple[object, ...] = ()

    def __repr__(self) -> str:
        """Return a call-like debug representation."""
        args = ", ".join(repr(arg) for arg in self.args)
        return f"Invocation({method_name(self.method)}({args}))"


class InvocationLog:
    """Append-only, ordered history of the calls made to one mock.

    Entries are kept oldest first. The only way to shrink the log is
    :meth:`reset`, which empties it entirely.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: list[Invocation] = []

    def append(self, method: MethodID, args: t.Iterable[object] = ()) -> Invocation:
        """Record a call to *method* with positional *args*."""
        invocation = Invocation(method, tuple(args))
        self._entries.append(invocation)
        return invocation

    def reset(self) -> None:
        """Discard every recorded invocation."""
        if self._entries:
            logger.debug("Resetting invocation log (%d entries)", len(self._entries))
        self._entries.clear()

    def snapshot(self) -> tuple[Invocation, ...]:
        """Return the current invocations; later appends are not reflected."""
        return tuple(self._entries)

    def __len__(self) -> int:
        """Return the number of recorded invocations."""
        return len(self._entries)

    def __iter__(self) -> t.Iterator[Invocation]:
        """Iterate over a snapshot of the recorded invocations."""
        return iter(self.snapshot())

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        """Return a debug representation."""
        return f"InvocationLog({list(self._entries)!r})"


__all__ = ["Invocation", "InvocationLog", "MethodID", "method_name"]
