# topmark:header:start
#
#   project      : Worrywart
#   file         : types.py
#   file_relpath : src/worrywart/diagnostic/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared typing helpers for Worrywart diagnostics.

`DiagnosticsLike` lets renderers and machine-output helpers accept either a live
`DiagnosticLedger` or a surfaced `DiagnosticFailure` without depending on the
concrete classes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator

    from worrywart.diagnostic.model import Diagnostic


class DiagnosticsLike(Protocol):
    """Structural interface for objects that carry diagnostics."""

    filename: str

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over contained diagnostics in report order."""
        ...

    def __len__(self) -> int:
        """Return the number of contained diagnostics."""
        ...
