# topmark:header:start
#
#   project      : Worrywart
#   file         : test_machine_output.py
#   file_relpath : tests/diagnostic/test_machine_output.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for JSON / NDJSON shapes of diagnostics and failures."""

from __future__ import annotations

import json

import pytest

from worrywart.constants import WORRYWART_VERSION
from worrywart.diagnostic.anchor import SourceAnchor
from worrywart.diagnostic.kinds import ExtraParen
from worrywart.diagnostic.machine import (
    MachineDiagnosticEntry,
    build_meta,
    build_report_payload,
    iter_diagnostic_ndjson_records,
    serialize_json_object,
    serialize_ndjson,
)
from worrywart.diagnostic.model import Diagnostic, Severity
from worrywart.errors import Concerns, LimitExceeded
from worrywart.session import ReportingSession

TEXT = "a = 1 \nb = 2)\n"


def test_entry_includes_position_when_anchored() -> None:
    """Anchored diagnostics carry line, column and excerpt."""
    d = Diagnostic(
        kind=ExtraParen(")"),
        severity=Severity.SORRY,
        anchor=SourceAnchor.at(TEXT, 12),
    )
    assert MachineDiagnosticEntry.from_diagnostic(d).to_dict() == {
        "severity": "sorry",
        "code": "extra-paren",
        "message": "Unexpected closing bracket ')'",
        "hint": "remove it or add a matching '(' before it",
        "line": 2,
        "column": 6,
        "excerpt": "b = 2)",
    }


def test_entry_omits_position_when_unanchored() -> None:
    """Unanchored diagnostics have no position keys at all."""
    s = ReportingSession(filename="f")
    s.worry("loose")
    with pytest.raises(Concerns) as info:
        s.express_concerns()
    entry = MachineDiagnosticEntry.from_diagnostic(info.value.diagnostics[0]).to_dict()
    assert entry == {"severity": "worry", "code": "ad-hoc", "message": "loose", "hint": None}


def test_report_payload_for_limit_exceeded() -> None:
    """A limit escalation is flagged in the payload."""
    s = ReportingSession(filename="in.txt", limit=2)
    s.worry("a")
    with pytest.raises(LimitExceeded) as info:
        s.sorry("b")

    payload = info.value.to_dict()
    assert payload["filename"] == "in.txt"
    assert payload["escalated_due_to_limit"] is True
    assert payload["limit"] == 2
    assert payload["counts"] == {"worry": 1, "sorry": 1, "panic": 0}
    assert [e["message"] for e in payload["diagnostics"]] == ["a", "b"]  # type: ignore[index]


def test_report_payload_for_clean_input() -> None:
    """A clean input serializes with zero counts and no diagnostics."""
    assert "limit" not in build_report_payload("ok.txt", (), escalated_due_to_limit=False)
    assert build_report_payload("ok.txt", ()) == {
        "filename": "ok.txt",
        "escalated_due_to_limit": False,
        "counts": {"worry": 0, "sorry": 0, "panic": 0},
        "diagnostics": [],
    }


def test_ndjson_records_one_per_diagnostic() -> None:
    """Each NDJSON line is a self-describing diagnostic record."""
    s = ReportingSession(filename="in.txt")
    s.sorry(ExtraParen(")"), anchor=SourceAnchor.at(TEXT, 12))
    s.worry("trailing")
    with pytest.raises(Concerns) as info:
        s.express_concerns()

    text: str = serialize_ndjson(iter_diagnostic_ndjson_records(info.value))
    lines = text.splitlines()
    assert text.endswith("\n")
    assert len(lines) == 2
    records = [json.loads(line) for line in lines]
    assert {r["kind"] for r in records} == {"diagnostic"}
    assert records[0]["meta"] == {"tool": "worrywart", "version": WORRYWART_VERSION}
    assert records[0]["diagnostic"]["filename"] == "in.txt"
    assert records[0]["diagnostic"]["code"] == "extra-paren"
    assert records[1]["diagnostic"]["message"] == "trailing"


def test_serializers() -> None:
    """JSON is pretty-printed without a trailing newline; empty NDJSON is empty."""
    out: str = serialize_json_object({"meta": build_meta()})
    assert not out.endswith("\n")
    assert json.loads(out)["meta"]["tool"] == "worrywart"
    assert serialize_ndjson([]) == ""
