# topmark:header:start
#
#   project      : Worrywart
#   file         : model.py
#   file_relpath : src/worrywart/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types and helpers for Worrywart.

Sections:
    * Severity: worry/sorry/panic with associated terminal colors.
    * Diagnostic: immutable record of one reported problem.
    * DiagnosticStats: aggregated per-severity counts.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING

from yachalk import chalk

from worrywart.rendering.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    from collections.abc import Iterable

    from worrywart.diagnostic.anchor import Location, PositionAnchor
    from worrywart.diagnostic.kinds import DiagnosticKind


class Severity(ColoredStrEnum):
    """How badly a reported problem affects the parse.

    - ``WORRY``: non-fatal; parsing continues unaffected.
    - ``SORRY``: the input is wrong, but parsing continues to find more problems.
    - ``PANIC``: parsing cannot meaningfully continue.
    """

    WORRY = ("worry", chalk.yellow)
    SORRY = ("sorry", chalk.red)
    PANIC = ("panic", chalk.red_bright.bold)

    @property
    def banner(self) -> str:
        """Return the label printed in front of a rendered diagnostic."""
        return {
            Severity.WORRY: "Potential difficulties:",
            Severity.SORRY: "===SORRY!===",
            Severity.PANIC: "===PANIC!===",
        }[self]

    @property
    def is_fatal(self) -> bool:
        """Return True if this severity stops the parse immediately."""
        return self is Severity.PANIC


@dataclass(frozen=True)
class Diagnostic:
    """One reported problem.

    ``message`` and ``hint`` are produced by the kind the first time they are
    read, and ``location`` asks the anchor for its position only when rendered.

    Attributes:
        kind: The kind instance holding the captured fields.
        severity: Worry, sorry or panic.
        anchor: Optional position in the parsed source.
        hint_override: Hint supplied at the report site; replaces the kind's own hint.
    """

    kind: DiagnosticKind
    severity: Severity
    anchor: PositionAnchor | None = None
    hint_override: str | None = None

    @property
    def code(self) -> str:
        """Return the machine identifier of the diagnostic's kind."""
        return self.kind.code

    @cached_property
    def message(self) -> str:
        """Return the resolved human-readable message."""
        return self.kind.message()

    @cached_property
    def hint(self) -> str | None:
        """Return the resolved hint; an empty hint counts as no hint."""
        text: str | None = self.hint_override if self.hint_override else self.kind.hint()
        return text or None

    @cached_property
    def location(self) -> Location | None:
        """Return the rendered anchor position, or None for unanchored diagnostics."""
        return self.anchor.locate() if self.anchor is not None else None


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity."""

    n_worry: int
    n_sorry: int
    n_panic: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_worry + self.n_sorry + self.n_panic


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-severity counts for a sequence of diagnostics.

    Args:
        diagnostics: Diagnostics to count. Consumed once.

    Returns:
        Per-severity counts.
    """
    counts: dict[Severity, int] = dict.fromkeys(Severity, 0)
    for d in diagnostics:
        counts[d.severity] += 1
    return DiagnosticStats(
        n_worry=counts[Severity.WORRY],
        n_sorry=counts[Severity.SORRY],
        n_panic=counts[Severity.PANIC],
    )


def diagnostics_counts_to_dict(diagnostics: Iterable[Diagnostic]) -> dict[str, int]:
    """Return a JSON-friendly mapping of counts by severity for any iterable."""
    stats: DiagnosticStats = compute_diagnostic_stats(diagnostics)
    return {
        Severity.WORRY.value: stats.n_worry,
        Severity.SORRY.value: stats.n_sorry,
        Severity.PANIC.value: stats.n_panic,
    }
