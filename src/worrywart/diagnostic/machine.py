# topmark:header:start
#
#   project      : Worrywart
#   file         : machine.py
#   file_relpath : src/worrywart/diagnostic/machine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine-readable (JSON / NDJSON) shapes for diagnostics.

Layers:
    - **schemas**: `MachineDiagnosticEntry` (one diagnostic) and
      `MachineDiagnosticCounts` (per-severity totals).
    - **shapes**: `build_report_payload` for one parsed input and
      `iter_diagnostic_ndjson_records` yielding one record per diagnostic.
    - **serializers**: `serialize_json_object` / `serialize_ndjson`.

Building an entry resolves the diagnostic's message, hint and location, so
anchors must still be valid at that point.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING

from worrywart.constants import WORRYWART_VERSION
from worrywart.diagnostic.model import DiagnosticStats, Severity, compute_diagnostic_stats

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from worrywart.diagnostic.anchor import Location
    from worrywart.diagnostic.model import Diagnostic
    from worrywart.diagnostic.types import DiagnosticsLike


@dataclass(slots=True)
class MachineDiagnosticEntry:
    """Machine-readable diagnostic entry.

    Attributes:
        severity: Severity string ("worry", "sorry" or "panic").
        code: Machine identifier of the diagnostic kind.
        message: Human-readable message.
        hint: Optional remediation hint.
        line: 1-based line of the anchor, if any.
        column: 1-based column of the anchor, if any.
        excerpt: Source line containing the anchor, if any.
    """

    severity: str
    code: str
    message: str
    hint: str | None = None
    line: int | None = None
    column: int | None = None
    excerpt: str | None = None

    @classmethod
    def from_diagnostic(cls, d: Diagnostic) -> MachineDiagnosticEntry:
        """Create a machine-readable entry from an internal diagnostic."""
        loc: Location | None = d.location
        return cls(
            severity=d.severity.value,
            code=d.code,
            message=d.message,
            hint=d.hint,
            line=loc.line if loc else None,
            column=loc.column if loc else None,
            excerpt=loc.excerpt if loc else None,
        )

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly dict of this entry (unset position keys omitted)."""
        out: dict[str, object] = {
            "severity": self.severity,
            "code": self.code,
            "message": self.message,
            "hint": self.hint,
        }
        if self.line is not None:
            out["line"] = self.line
            out["column"] = self.column
            out["excerpt"] = self.excerpt
        return out


@dataclass(slots=True)
class MachineDiagnosticCounts:
    """Aggregated per-severity counts for machine output."""

    worry: int
    sorry: int
    panic: int

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> MachineDiagnosticCounts:
        """Compute per-severity counts from an iterable of internal diagnostics."""
        stats: DiagnosticStats = compute_diagnostic_stats(diagnostics)
        return cls(worry=stats.n_worry, sorry=stats.n_sorry, panic=stats.n_panic)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly dict of the per-severity counts."""
        return {
            Severity.WORRY.value: self.worry,
            Severity.SORRY.value: self.sorry,
            Severity.PANIC.value: self.panic,
        }


def build_report_payload(
    filename: str,
    diagnostics: Iterable[Diagnostic],
    *,
    escalated_due_to_limit: bool = False,
    limit: int | None = None,
) -> dict[str, object]:
    """Return the JSON payload describing all diagnostics reported for one input.

    Args:
        filename: Display label of the parsed input.
        diagnostics: Diagnostics in report order (may be empty for a clean input).
        escalated_due_to_limit: Whether the buffering limit forced the report.
        limit: Buffering limit that forced the report; added as ``"limit"`` when given.

    Returns:
        A JSON-friendly mapping.
    """
    items: list[Diagnostic] = list(diagnostics)
    payload: dict[str, object] = {
        "filename": filename,
        "escalated_due_to_limit": escalated_due_to_limit,
        "counts": MachineDiagnosticCounts.from_iterable(items).to_dict(),
        "diagnostics": [MachineDiagnosticEntry.from_diagnostic(d).to_dict() for d in items],
    }
    if limit is not None:
        payload["limit"] = limit
    return payload


def build_meta() -> dict[str, str]:
    """Return the shared ``meta`` block of every machine document."""
    return {"tool": "worrywart", "version": WORRYWART_VERSION}


def iter_diagnostic_ndjson_records(
    diagnostics: DiagnosticsLike,
) -> Iterator[dict[str, object]]:
    """Yield one NDJSON record per diagnostic.

    Each record is shaped as ``{"kind": "diagnostic", "meta": ..., "diagnostic": ...}``
    with the filename folded into the diagnostic payload.
    """
    meta: dict[str, str] = build_meta()
    for d in diagnostics:
        payload: dict[str, object] = {"filename": diagnostics.filename}
        payload.update(MachineDiagnosticEntry.from_diagnostic(d).to_dict())
        yield {"kind": "diagnostic", "meta": meta, "diagnostic": payload}


def serialize_json_object(obj: object) -> str:
    """Serialize an object to pretty-printed JSON (no trailing newline)."""
    return json.dumps(obj, indent=2, ensure_ascii=False)


def serialize_ndjson(records: Iterable[Mapping[str, object]]) -> str:
    """Serialize records to NDJSON; the result ends with a newline when non-empty."""
    lines: list[str] = [json.dumps(r, ensure_ascii=False) for r in records]
    return "".join(f"{line}\n" for line in lines)
