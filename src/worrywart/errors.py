# topmark:header:start
#
#   project      : Worrywart
#   file         : errors.py
#   file_relpath : src/worrywart/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Failures surfaced by a reporting session.

Hierarchy:
    - `DiagnosticFailure`: base; carries the filename, the diagnostics involved
      (in report order) and the ``escalated_due_to_limit`` flag.
    - `Panicked`: a single panic; everything buffered before it was discarded.
    - `Concerns`: buffered worries/sorries surfaced by `express_concerns()`.
    - `LimitExceeded`: buffered worries/sorries surfaced because the limit was reached.

`SessionStateError` is separate: it signals a programming error (reporting to a
session that is no longer active) and is never a parse result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from worrywart.diagnostic.machine import build_report_payload
from worrywart.rendering.text import render_diagnostics

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from worrywart.diagnostic.model import Diagnostic


class DiagnosticFailure(Exception):
    """Base class of everything a session raises to end a parse with diagnostics.

    Attributes:
        filename: Display label of the parsed input.
        diagnostics: Diagnostics involved, in report order.
        escalated_due_to_limit: True only when the buffering limit forced the failure.
    """

    escalated_due_to_limit: bool = False

    def __init__(self, filename: str, diagnostics: Iterable[Diagnostic]) -> None:
        self.filename: str = filename
        self.diagnostics: tuple[Diagnostic, ...] = tuple(diagnostics)
        super().__init__(filename, self.diagnostics)

    @property
    def limit_reached(self) -> int | None:
        """Return the buffering limit that forced this failure, if any."""
        return None

    def render(self, *, color: bool = False, show_hints: bool = True) -> str:
        """Render the failure as human-readable text.

        Args:
            color: Whether to emit ANSI colors.
            show_hints: Whether to include ``hint:`` lines.

        Returns:
            The rendered report.
        """
        return render_diagnostics(
            self.diagnostics,
            self.filename,
            escalated_due_to_limit=self.escalated_due_to_limit,
            limit=self.limit_reached,
            color=color,
            show_hints=show_hints,
        )

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly description of the failure."""
        return build_report_payload(
            self.filename,
            self.diagnostics,
            escalated_due_to_limit=self.escalated_due_to_limit,
            limit=self.limit_reached,
        )

    def __str__(self) -> str:
        return self.render()

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)

    def __len__(self) -> int:
        return len(self.diagnostics)


class Panicked(DiagnosticFailure):
    """The parse was stopped by a panic."""

    def __init__(self, filename: str, diagnostic: Diagnostic) -> None:
        super().__init__(filename, (diagnostic,))

    @property
    def diagnostic(self) -> Diagnostic:
        """Return the panic that stopped the parse."""
        return self.diagnostics[0]


class Concerns(DiagnosticFailure):
    """Buffered worries and sorries surfaced at the end of the parse."""


class LimitExceeded(Concerns):
    """Too many worries and sorries were buffered; the parse was stopped."""

    escalated_due_to_limit = True

    def __init__(self, filename: str, diagnostics: Iterable[Diagnostic], *, limit: int) -> None:
        super().__init__(filename, diagnostics)
        self.limit: int = limit

    @property
    def limit_reached(self) -> int:
        return self.limit


class SessionStateError(RuntimeError):
    """A session was used after it stopped accepting reports."""
