# topmark:header:start
#
#   project      : Worrywart
#   file         : ledger.py
#   file_relpath : src/worrywart/diagnostic/ledger.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-session buffer of worries and sorries that have not been surfaced yet.

The ledger owns its diagnostics until they are drained (to be surfaced as one
failure) or discarded (after a panic). Insertion order is report order and is
the order in which diagnostics are eventually displayed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from worrywart.config.logging import get_logger
from worrywart.constants import DEFAULT_LIMIT, UNSPECIFIED_FILE
from worrywart.diagnostic.model import (
    Diagnostic,
    DiagnosticStats,
    compute_diagnostic_stats,
    diagnostics_counts_to_dict,
)
from worrywart.diagnostic.policy import Action, classify

if TYPE_CHECKING:
    from collections.abc import Iterator

    from worrywart.config.logging import WorrywartLogger


logger: WorrywartLogger = get_logger(__name__)


@dataclass
class DiagnosticLedger:
    """Mutable, per-session collection of buffered diagnostics.

    Attributes:
        limit: Number of buffered diagnostics that forces an escalation.
        filename: Display label of the input being parsed.
        buffered: Buffered diagnostics in report order.
    """

    limit: int = DEFAULT_LIMIT
    filename: str = UNSPECIFIED_FILE
    buffered: list[Diagnostic] = field(default_factory=lambda: [])

    def __post_init__(self) -> None:
        self.set_limit(self.limit)

    def record(self, diagnostic: Diagnostic) -> Action:
        """Buffer a diagnostic and return what the caller must do next.

        The action is computed from the count *before* appending. Panics are
        never buffered: the caller is expected to raise them right away.

        Args:
            diagnostic: The diagnostic being reported.

        Returns:
            The action decided by the severity policy.
        """
        action: Action = classify(len(self.buffered), self.limit, diagnostic.severity)
        if action is not Action.RAISE_IMMEDIATELY:
            self.buffered.append(diagnostic)
            logger.trace(
                "Recorded [%s] %s (%d/%d)",
                diagnostic.severity.value,
                diagnostic.code,
                len(self.buffered),
                self.limit,
            )
        return action

    def is_full(self) -> bool:
        """Return True if the buffer reached the limit."""
        return len(self.buffered) >= self.limit

    def drain(self) -> tuple[Diagnostic, ...]:
        """Return all buffered diagnostics in report order and clear the buffer."""
        drained: tuple[Diagnostic, ...] = tuple(self.buffered)
        self.buffered.clear()
        logger.debug("Drained %d diagnostic(s) for %s", len(drained), self.filename)
        return drained

    def discard(self) -> int:
        """Drop all buffered diagnostics without surfacing them.

        Returns:
            The number of diagnostics dropped.
        """
        dropped: int = len(self.buffered)
        self.buffered.clear()
        if dropped:
            logger.debug("Discarded %d buffered diagnostic(s) for %s", dropped, self.filename)
        return dropped

    def set_filename(self, name: str) -> None:
        """Set the display label of the input being parsed."""
        self.filename = name

    def set_limit(self, n: int) -> None:
        """Set the buffering limit.

        Raises:
            ValueError: If ``n`` is not a positive integer.
        """
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ValueError(f"limit must be a positive integer, got {n!r}")
        self.limit = n

    def stats(self) -> DiagnosticStats:
        """Return per-severity counts for the buffered diagnostics."""
        return compute_diagnostic_stats(self.buffered)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        return diagnostics_counts_to_dict(self.buffered)

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over buffered diagnostics in insertion order."""
        return iter(self.buffered)

    def __len__(self) -> int:
        """Return the number of buffered diagnostics."""
        return len(self.buffered)
