# topmark:header:start
#
#   project      : Worrywart
#   file         : test_machine_output_cli.py
#   file_relpath : tests/cli/test_machine_output_cli.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `--format json` / `--format ndjson`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from tests.cli.conftest import assert_CONCERNS, assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli
from worrywart.constants import WORRYWART_VERSION

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_json_document(tmp_path: Path) -> None:
    """JSON output is one document with a result per input."""
    (tmp_path / "ok.txt").write_text("ok\n", encoding="utf-8")
    (tmp_path / "ws.txt").write_text("ok \n", encoding="utf-8")
    (tmp_path / "bad.txt").write_text("f(x))\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["check", "--format", "json", "ok.txt", "ws.txt", "bad.txt"])

    assert_CONCERNS(result)
    doc: dict[str, Any] = json.loads(result.output)
    assert doc["meta"] == {"tool": "worrywart", "version": WORRYWART_VERSION}
    statuses = [(r["filename"], r["status"]) for r in doc["results"]]
    assert statuses == [("ok.txt", "clean"), ("ws.txt", "worries"), ("bad.txt", "concerns")]

    bad: dict[str, Any] = doc["results"][2]
    assert bad["counts"] == {"worry": 0, "sorry": 1, "panic": 0}
    assert bad["escalated_due_to_limit"] is False
    (entry,) = bad["diagnostics"]
    assert entry["code"] == "extra-paren"
    assert (entry["line"], entry["column"], entry["excerpt"]) == (1, 5, "f(x))")


@mark_cli
def test_json_flags_limit_and_panic(tmp_path: Path) -> None:
    """Escalation and panics get their own statuses."""
    (tmp_path / "many.txt").write_text(")))\n", encoding="utf-8")
    (tmp_path / "eof.txt").write_text('"open', encoding="utf-8")

    result = run_cli_in(
        tmp_path, ["check", "--limit", "2", "--format", "json", "many.txt", "eof.txt"]
    )

    doc: dict[str, Any] = json.loads(result.output)
    many, eof = doc["results"]
    assert many["status"] == "limit-exceeded"
    assert many["escalated_due_to_limit"] is True
    assert len(many["diagnostics"]) == 2
    assert eof["status"] == "panic"
    assert eof["counts"]["panic"] == 1
    assert result.exit_code == 2


@mark_cli
def test_ndjson_one_record_per_diagnostic(tmp_path: Path) -> None:
    """NDJSON prints one record per diagnostic and nothing for clean inputs."""
    (tmp_path / "ok.txt").write_text("ok\n", encoding="utf-8")
    (tmp_path / "bad.txt").write_text(")\n(\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["check", "--format", "ndjson", "ok.txt", "bad.txt"])

    assert_CONCERNS(result)
    records = [json.loads(line) for line in result.output.splitlines()]
    assert [r["diagnostic"]["code"] for r in records] == ["extra-paren", "unclosed-paren"]
    assert {r["diagnostic"]["filename"] for r in records} == {"bad.txt"}
    assert all(r["kind"] == "diagnostic" for r in records)


@mark_cli
def test_json_output_is_never_colored(tmp_path: Path) -> None:
    """--color=always does not leak ANSI codes into JSON."""
    (tmp_path / "ok.txt").write_text("ok\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["--color", "always", "check", "--format", "json", "ok.txt"])
    assert_SUCCESS(result)
    assert "\x1b[" not in result.output
