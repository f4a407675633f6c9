"""Human readable rendering of invocations and match failures."""

from __future__ import annotations

import typing as t
from textwrap import indent

from .invocation import method_name

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .invocation import Invocation
    from .matchers import Matcher, MatchResult


def _format_args(args: t.Sequence[object]) -> str:
    if not args:
        return ""
    return ", ".join(repr(arg) for arg in args)


def describe_invocation(inv: Invocation) -> str:
    """Return a call-like representation of *inv*, e.g. ``get('key', 1)``."""
    return f"{method_name(inv.method)}({_format_args(inv.args)})"


def numbered(entries: t.Sequence[str], *, start: int = 1) -> str:
    """Return *entries* as a numbered list, or ``(none)`` when empty."""
    if not entries:
        return "(none)"
    lines: list[str] = []
    for index, entry in enumerate(entries, start=start):
        entry_lines = entry.splitlines() or [""]
        lines.append(f"{index}. {entry_lines[0]}")
        lines.extend(f"   {extra}" for extra in entry_lines[1:])
    return "\n".join(lines)


def format_sections(title: str, sections: list[tuple[str, str]]) -> str:
    """Render *title* followed by labelled, indented *sections*."""
    parts = [title]
    for label, body in sections:
        if not body:
            continue
        parts.append("")
        parts.append(f"{label}:")
        parts.append(indent(body, "  "))
    return "\n".join(parts)


def _describe_candidates(matcher: Matcher, result: MatchResult) -> str:
    """List the recorded calls of the matcher's method with mismatch reasons."""
    inv_filter = matcher.invocation_filter
    candidates = [inv for inv in result.recorded if inv.method == matcher.method]
    if not inv_filter.verifiers:
        return numbered([describe_invocation(inv) for inv in candidates])
    entries = []
    for inv in candidates:
        reason = inv_filter.explain_mismatch(inv)
        entries.append(f"{describe_invocation(inv)}\n{reason}")
    return numbered(entries)


def describe_failure(title: str, matcher: Matcher, result: MatchResult) -> str:
    """Return the failure text for *result* produced by *matcher*."""
    return format_sections(
        title,
        [
            ("Expected", result.message),
            ("Observed calls", str(result.actual_count)),
            (
                f"Recorded calls of {method_name(matcher.method)}",
                _describe_candidates(matcher, result),
            ),
        ],
    )


__all__ = [
    "describe_failure",
    "describe_invocation",
    "format_sections",
    "numbered",
]
