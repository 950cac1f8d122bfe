# topmark:header:start
#
#   project      : Worrywart
#   file         : kinds.py
#   file_relpath : src/worrywart/diagnostic/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic kinds: what went wrong, and how to say it.

A kind is a frozen dataclass whose fields are the facts captured at report
time. It knows how to turn those facts into a message and, optionally, a hint.
New kinds are added by subclassing `DiagnosticKind`; the reporting engine never
needs to change.

Kinds never carry their own position. The anchor is passed separately to the
session (``session.sorry(kind, anchor=...)``), and a kind declaring a field named
``anchor`` is rejected when reported.

Example:
    ```python
    @dataclass(frozen=True)
    class DuplicateKey(DiagnosticKind):
        code: ClassVar[str] = "duplicate-key"
        key: str

        def message(self) -> str:
            return f"Duplicate key {self.key!r}"
    ```
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import ClassVar, Final

RESERVED_ANCHOR_FIELD: Final[str] = "anchor"


@dataclass(frozen=True)
class DiagnosticKind(ABC):
    """Base class for diagnostic kinds.

    Attributes:
        code: Stable machine identifier of the kind (used in JSON output).
    """

    code: ClassVar[str] = "diagnostic"

    @abstractmethod
    def message(self) -> str:
        """Build the human-readable message from the captured fields."""

    def hint(self) -> str | None:
        """Build remediation advice, or return None when there is none."""
        return None


def validate_kind(kind: DiagnosticKind) -> None:
    """Reject kinds that try to smuggle a position in as an ordinary field.

    Raises:
        TypeError: If ``kind`` declares the reserved anchor field.
    """
    if any(f.name == RESERVED_ANCHOR_FIELD for f in fields(kind)):
        raise TypeError(
            f"{type(kind).__name__} declares a {RESERVED_ANCHOR_FIELD!r} field; "
            "pass positions with the anchor= keyword instead"
        )


@dataclass(frozen=True)
class AdHoc(DiagnosticKind):
    """Untyped kind carrying nothing but a ready-made message."""

    code: ClassVar[str] = "ad-hoc"

    text: str

    def message(self) -> str:
        return self.text


# --- Stock kinds reported by the bundled bracket scanner ---


_CLOSER_FOR: Final[dict[str, str]] = {"(": ")", "[": "]", "{": "}"}
_OPENER_FOR: Final[dict[str, str]] = {v: k for k, v in _CLOSER_FOR.items()}


@dataclass(frozen=True)
class ExtraParen(DiagnosticKind):
    """A closing bracket with nothing open to close."""

    code: ClassVar[str] = "extra-paren"

    char: str

    def message(self) -> str:
        return f"Unexpected closing bracket {self.char!r}"

    def hint(self) -> str | None:
        opener: str | None = _OPENER_FOR.get(self.char)
        if opener is None:
            return None
        return f"remove it or add a matching {opener!r} before it"


@dataclass(frozen=True)
class MismatchedParen(DiagnosticKind):
    """A closing bracket that does not match the innermost open one."""

    code: ClassVar[str] = "mismatched-paren"

    expected: str
    found: str

    def message(self) -> str:
        return f"Unable to parse expression; couldn't find final {self.expected!r}"

    def hint(self) -> str | None:
        return f"found {self.found!r} instead"


@dataclass(frozen=True)
class UnclosedParen(DiagnosticKind):
    """An opening bracket still open when the input ends."""

    code: ClassVar[str] = "unclosed-paren"

    char: str

    def message(self) -> str:
        return f"Bracket {self.char!r} is never closed"

    def hint(self) -> str | None:
        closer: str | None = _CLOSER_FOR.get(self.char)
        return f"add a matching {closer!r}" if closer else None


@dataclass(frozen=True)
class EarlyEndOfInput(DiagnosticKind):
    """The input ended while the parser still expected something."""

    code: ClassVar[str] = "early-eof"

    expected: str

    def message(self) -> str:
        return f"Premature end of input; expected {self.expected}"


@dataclass(frozen=True)
class UnterminatedString(DiagnosticKind):
    """A string literal that runs to the end of its line."""

    code: ClassVar[str] = "unterminated-string"

    quote: str = '"'

    def message(self) -> str:
        return f"Unterminated string literal (missing closing {self.quote})"

    def hint(self) -> str | None:
        return f"close the string with {self.quote} or escape the line break"
