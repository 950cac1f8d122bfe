# topmark:header:start
#
#   project      : Worrywart
#   file         : brackets.py
#   file_relpath : src/worrywart/scan/brackets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bracket and string balance scanner.

A deliberately small parsing process that reports through a
`ReportingSession`. It understands three bracket pairs, double-quoted strings
with backslash escapes, and ``#`` comments running to the end of the line.

What it reports:
    - closing bracket with nothing open → sorry (`ExtraParen`)
    - closing bracket not matching the innermost opener → sorry (`MismatchedParen`)
    - opener still open at end of input → sorry (`UnclosedParen`)
    - string broken by a line break → sorry (`UnterminatedString`)
    - string still open at end of input → panic (`EarlyEndOfInput`)
    - trailing whitespace → worry
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from worrywart.config.logging import get_logger
from worrywart.diagnostic.anchor import SourceAnchor
from worrywart.diagnostic.kinds import (
    EarlyEndOfInput,
    ExtraParen,
    MismatchedParen,
    UnclosedParen,
    UnterminatedString,
)

if TYPE_CHECKING:
    from worrywart.config.logging import WorrywartLogger
    from worrywart.config.model import ReportingConfig
    from worrywart.session import ReportingSession


logger: WorrywartLogger = get_logger(__name__)

PAIRS: Final[dict[str, str]] = {"(": ")", "[": "]", "{": "}"}
CLOSERS: Final[frozenset[str]] = frozenset(PAIRS.values())
QUOTE: Final[str] = '"'
COMMENT: Final[str] = "#"


@dataclass(frozen=True)
class ScanResult:
    """Summary of a completed scan.

    Attributes:
        pairs: Number of bracket pairs closed correctly.
        max_depth: Deepest bracket nesting seen.
        strings: Number of string literals seen.
    """

    pairs: int
    max_depth: int
    strings: int


def _scan_string(text: str, start: int, session: ReportingSession) -> int:
    """Skip the string opening at ``start``; return the offset just past it."""
    i: int = start + 1
    while i < len(text):
        ch: str = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == QUOTE:
            return i + 1
        if ch == "\n":
            session.sorry(UnterminatedString(QUOTE), anchor=SourceAnchor.spanning(text, start, i))
            return i
        i += 1
    session.panic(
        EarlyEndOfInput(f"closing {QUOTE} for the string opened here"),
        anchor=SourceAnchor.at(text, start),
    )


def _check_trailing_whitespace(text: str, line_end: int, session: ReportingSession) -> None:
    """Worry about blanks right before ``line_end``."""
    j: int = line_end
    while j > 0 and text[j - 1] in " \t":
        j -= 1
    if j < line_end:
        session.worry("Trailing whitespace", anchor=SourceAnchor.spanning(text, j, line_end))


def scan_brackets(text: str, session: ReportingSession) -> ScanResult:
    """Scan ``text`` and report every balance problem to ``session``.

    Does not conclude the session; call `session.express_concerns()` afterwards.

    Args:
        text: Source text.
        session: Active session receiving the reports.

    Returns:
        Counters describing what was scanned.

    Raises:
        DiagnosticFailure: Whenever ``session`` decides to surface its diagnostics.
    """
    stack: list[tuple[str, int]] = []
    pairs: int = 0
    max_depth: int = 0
    strings: int = 0

    i: int = 0
    while i < len(text):
        ch: str = text[i]
        if ch == COMMENT:
            newline: int = text.find("\n", i)
            i = len(text) if newline < 0 else newline
            continue
        if ch == QUOTE:
            strings += 1
            i = _scan_string(text, i, session)
            continue
        if ch == "\n":
            line_end: int = i - 1 if i > 0 and text[i - 1] == "\r" else i
            _check_trailing_whitespace(text, line_end, session)
        elif ch in PAIRS:
            stack.append((ch, i))
            max_depth = max(max_depth, len(stack))
        elif ch in CLOSERS:
            if not stack:
                session.sorry(ExtraParen(ch), anchor=SourceAnchor.at(text, i))
            else:
                opener, _ = stack.pop()
                if PAIRS[opener] == ch:
                    pairs += 1
                else:
                    session.sorry(
                        MismatchedParen(expected=PAIRS[opener], found=ch),
                        anchor=SourceAnchor.at(text, i),
                    )
        i += 1

    _check_trailing_whitespace(text, len(text), session)
    for opener, offset in stack:
        session.sorry(UnclosedParen(opener), anchor=SourceAnchor.at(text, offset))

    logger.debug(
        "Scanned %s: %d pair(s), depth %d, %d string(s)",
        session.filename,
        pairs,
        max_depth,
        strings,
    )
    return ScanResult(pairs=pairs, max_depth=max_depth, strings=strings)


def check_text(
    text: str,
    config: ReportingConfig,
    filename: str | None = None,
) -> ScanResult:
    """Scan ``text`` in a fresh session built from ``config`` and conclude it.

    Raises:
        Panicked: On a string left open at end of input.
        LimitExceeded: When too many problems are found.
        Concerns: When any problem is found.
    """
    session: ReportingSession = config.new_session(filename)
    result: ScanResult = scan_brackets(text, session)
    session.express_concerns()
    return result
