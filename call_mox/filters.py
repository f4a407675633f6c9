"""Selection of recorded invocations by method and argument verifiers."""

from __future__ import annotations

import dataclasses as dc
import typing as t

from ._validators import validate_verifiers
from .invocation import Invocation, MethodID, method_name

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .comparators import Comparator


@dc.dataclass(frozen=True, slots=True, init=False)
class InvocationFilter:
    """Select invocations of ``method`` whose arguments pass ``verifiers``.

    With no verifiers only the method is compared and the number of
    recorded arguments is irrelevant. Otherwise an invocation must carry
    exactly one argument per verifier and every verifier must accept the
    argument at its position.
    """

    method: MethodID
    verifiers: tuple[Comparator, ...]

    def __init__(
        self, method: MethodID, verifiers: t.Iterable[Comparator] = ()
    ) -> None:
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "verifiers", validate_verifiers(verifiers))

    def matches(self, invocation: Invocation) -> bool:
        """Return ``True`` if *invocation* is selected by this filter."""
        return self._matches_method(invocation) and self._matches_args(invocation)

    def apply(self, invocations: t.Iterable[Invocation]) -> tuple[Invocation, ...]:
        """Return the matching invocations, preserving their order."""
        return tuple(inv for inv in invocations if self.matches(inv))

    def explain_mismatch(self, invocation: Invocation) -> str:
        """Return a human readable reason why *invocation* is not selected."""
        if not self._matches_method(invocation):
            return (
                f"method {method_name(invocation.method)} != "
                f"{method_name(self.method)}"
            )
        if self.verifiers and len(invocation.args) != len(self.verifiers):
            return (
                f"expected {len(self.verifiers)} argument(s), "
                f"got {len(invocation.args)}"
            )
        for index, (arg, verifier) in enumerate(
            zip(invocation.args, self.verifiers, strict=False)
        ):
            if not verifier(arg):
                return f"arg[{index}]={arg!r} failed {verifier!r}"
        return "invocation matches"

    def _matches_method(self, invocation: Invocation) -> bool:
        """Return ``True`` if the method identifiers agree."""
        return invocation.method == self.method

    def _matches_args(self, invocation: Invocation) -> bool:
        """Validate positional arguments against the verifiers."""
        if not self.verifiers:
            return True
        if len(invocation.args) != len(self.verifiers):
            return False
        return all(
            verifier(arg)
            for arg, verifier in zip(invocation.args, self.verifiers, strict=True)
        )


__all__ = ["InvocationFilter"]
