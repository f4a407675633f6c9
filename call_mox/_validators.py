"""Shared validation helpers."""

from __future__ import annotations

import operator
import typing as t


def validate_count(value: int, *, name: str = "count") -> int:
    """Ensure *value* is a usable non-negative invocation count."""
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an integer, got {type(value).__name__}"
        raise TypeError(msg)

    if value < 0:
        msg = f"{name} must be >= 0, got {value}"
        raise ValueError(msg)
    return value


def validate_method_id(method: int) -> int:
    """Ensure *method* can serve as a method identifier."""
    if isinstance(method, bool):
        msg = "method id must be an integer, not bool"
        raise TypeError(msg)
    try:
        operator.index(method)
    except TypeError:
        msg = f"method id must be an integer, got {type(method).__name__}"
        raise TypeError(msg) from None
    return method


def validate_verifiers(verifiers: t.Iterable[object]) -> tuple[t.Any, ...]:
    """Return *verifiers* as a tuple, rejecting entries that are not callable."""
    frozen = tuple(verifiers)
    for index, verifier in enumerate(frozen):
        if not callable(verifier):
            msg = (
                f"verifier {index} must be callable, got {verifier!r}; "
                "wrap plain values in Equals(...)"
            )
            raise TypeError(msg)
    return frozen
