# topmark:header:start
#
#   project      : Worrywart
#   file         : __init__.py
#   file_relpath : src/worrywart/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives.

Design:
    - A reported problem is an immutable `Diagnostic`: a `DiagnosticKind`
      (captured fields + message/hint construction), a `Severity` and an
      optional `PositionAnchor`.
    - `classify` (in `worrywart.diagnostic.policy`) decides whether a new
      diagnostic is buffered, buffered then escalated, or raised at once.
    - While parsing, worries and sorries wait in a mutable `DiagnosticLedger`.

Machine output:
    JSON/NDJSON shapes live in `worrywart.diagnostic.machine`.
"""

from __future__ import annotations

from worrywart.diagnostic.anchor import FrozenAnchor, Location, PositionAnchor, SourceAnchor
from worrywart.diagnostic.kinds import AdHoc, DiagnosticKind
from worrywart.diagnostic.ledger import DiagnosticLedger
from worrywart.diagnostic.model import (
    Diagnostic,
    DiagnosticStats,
    Severity,
    compute_diagnostic_stats,
    diagnostics_counts_to_dict,
)
from worrywart.diagnostic.policy import Action, classify
from worrywart.diagnostic.types import DiagnosticsLike

__all__ = [
    "Action",
    "AdHoc",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticLedger",
    "DiagnosticStats",
    "DiagnosticsLike",
    "FrozenAnchor",
    "Location",
    "PositionAnchor",
    "Severity",
    "SourceAnchor",
    "classify",
    "compute_diagnostic_stats",
    "diagnostics_counts_to_dict",
]
