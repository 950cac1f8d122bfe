# topmark:header:start
#
#   project      : Worrywart
#   file         : test_kinds_and_model.py
#   file_relpath : tests/diagnostic/test_kinds_and_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for diagnostic kinds, `Severity` and the `Diagnostic` record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import pytest

from tests.conftest import parametrize
from worrywart.diagnostic.anchor import FrozenAnchor, Location
from worrywart.diagnostic.kinds import (
    AdHoc,
    DiagnosticKind,
    EarlyEndOfInput,
    ExtraParen,
    MismatchedParen,
    UnclosedParen,
    UnterminatedString,
    validate_kind,
)
from worrywart.diagnostic.model import (
    Diagnostic,
    Severity,
    compute_diagnostic_stats,
    diagnostics_counts_to_dict,
)


@dataclass(frozen=True)
class CountingKind(DiagnosticKind):
    """Kind that records how often its message was built."""

    code: ClassVar[str] = "counting"

    calls: list[int]

    def message(self) -> str:
        self.calls.append(1)
        return "counted"


@dataclass(frozen=True)
class AnchoredKind(DiagnosticKind):
    """Kind that illegally carries its own position."""

    anchor: int

    def message(self) -> str:
        return "nope"


def test_adhoc_message_and_no_hint() -> None:
    """Untyped diagnostics carry only their text."""
    kind = AdHoc("something odd")
    assert kind.message() == "something odd"
    assert kind.hint() is None
    assert kind.code == "ad-hoc"


@parametrize(
    ("kind", "code", "message", "hint"),
    [
        (
            ExtraParen(")"),
            "extra-paren",
            "Unexpected closing bracket ')'",
            "remove it or add a matching '(' before it",
        ),
        (
            MismatchedParen(expected="]", found=")"),
            "mismatched-paren",
            "Unable to parse expression; couldn't find final ']'",
            "found ')' instead",
        ),
        (UnclosedParen("{"), "unclosed-paren", "Bracket '{' is never closed", "add a matching '}'"),
        (
            EarlyEndOfInput("a closing quote"),
            "early-eof",
            "Premature end of input; expected a closing quote",
            None,
        ),
        (
            UnterminatedString(),
            "unterminated-string",
            'Unterminated string literal (missing closing ")',
            'close the string with " or escape the line break',
        ),
    ],
)
def test_builtin_kinds(kind: DiagnosticKind, code: str, message: str, hint: str | None) -> None:
    """Each built-in kind has a stable code, message and hint."""
    assert kind.code == code
    assert kind.message() == message
    assert kind.hint() == hint


def test_kind_cannot_be_instantiated_abstractly() -> None:
    """`DiagnosticKind` requires a `message()` implementation."""
    with pytest.raises(TypeError):
        DiagnosticKind()  # type: ignore[abstract]


def test_validate_kind_rejects_anchor_field() -> None:
    """Kinds may not declare a field named ``anchor``."""
    with pytest.raises(TypeError, match="anchor"):
        validate_kind(AnchoredKind(anchor=3))
    validate_kind(ExtraParen(")"))


def test_message_is_built_once_and_lazily() -> None:
    """The kind is asked for its message on first access only."""
    calls: list[int] = []
    d = Diagnostic(kind=CountingKind(calls), severity=Severity.WORRY)
    assert calls == []
    assert d.message == "counted"
    assert d.message == "counted"
    assert calls == [1]


def test_hint_override_replaces_kind_hint() -> None:
    """A hint given at the report site wins over the kind's own hint."""
    d = Diagnostic(kind=ExtraParen(")"), severity=Severity.SORRY, hint_override="drop it")
    assert d.hint == "drop it"


def test_empty_hint_counts_as_no_hint() -> None:
    """An empty override falls back to the kind; an empty kind hint is None."""

    @dataclass(frozen=True)
    class Blank(DiagnosticKind):
        def message(self) -> str:
            return "m"

        def hint(self) -> str | None:
            return ""

    assert Diagnostic(kind=Blank(), severity=Severity.WORRY).hint is None
    fallback = Diagnostic(kind=UnclosedParen("("), severity=Severity.SORRY, hint_override="")
    assert fallback.hint == "add a matching ')'"


def test_location_is_none_without_anchor() -> None:
    """Unanchored diagnostics have no location."""
    assert Diagnostic(kind=AdHoc("x"), severity=Severity.SORRY).location is None
    anchored = Diagnostic(
        kind=AdHoc("x"),
        severity=Severity.SORRY,
        anchor=FrozenAnchor(Location(line=4, column=2, excerpt="ab")),
    )
    assert anchored.location == Location(line=4, column=2, excerpt="ab")
    assert anchored.code == "ad-hoc"


def test_severity_values_and_banners() -> None:
    """Severity values are plain strings; banners label rendered output."""
    assert [s.value for s in Severity] == ["worry", "sorry", "panic"]
    assert Severity.WORRY.banner == "Potential difficulties:"
    assert Severity.SORRY.banner == "===SORRY!==="
    assert Severity.PANIC.banner == "===PANIC!==="
    assert Severity.PANIC.is_fatal
    assert not Severity.SORRY.is_fatal
    assert Severity("sorry") is Severity.SORRY


def test_severity_paint_is_noop_when_disabled() -> None:
    """Painting with colors disabled returns the text unchanged."""
    assert Severity.SORRY.paint("x", enabled=False) == "x"
    assert "x" in Severity.SORRY.paint("x")


def test_stats_over_mixed_severities() -> None:
    """Stats count each severity separately."""
    ds = [
        Diagnostic(kind=AdHoc("a"), severity=Severity.WORRY),
        Diagnostic(kind=AdHoc("b"), severity=Severity.PANIC),
        Diagnostic(kind=AdHoc("c"), severity=Severity.SORRY),
        Diagnostic(kind=AdHoc("d"), severity=Severity.SORRY),
    ]
    stats = compute_diagnostic_stats(ds)
    assert (stats.n_worry, stats.n_sorry, stats.n_panic, stats.total) == (1, 2, 1, 4)
    assert diagnostics_counts_to_dict(iter(ds)) == {"worry": 1, "sorry": 2, "panic": 1}
