# topmark:header:start
#
#   project      : Worrywart
#   file         : anchor.py
#   file_relpath : src/worrywart/diagnostic/anchor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Position anchors: where in the parsed text a diagnostic points.

A parsing process hands the reporting session an *anchor* rather than a line
and column. The anchor is only asked for its `Location` when a diagnostic is
rendered, so reporting stays cheap on the hot path.

Anchors produced by `SourceAnchor` borrow the source text. Callers that need to
render a diagnostic after the source has gone away should call
`SourceAnchor.snapshot()` and report the resulting `FrozenAnchor` instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class Location:
    """Rendered position of an anchor.

    Attributes:
        line: 1-based line number.
        column: 1-based column of the anchored character within ``excerpt``.
        excerpt: The full source line containing the anchor, without its line ending.
    """

    line: int
    column: int
    excerpt: str

    @property
    def before(self) -> str:
        """Return the part of the excerpt preceding the anchor column."""
        return self.excerpt[: self.column - 1]

    @property
    def after(self) -> str:
        """Return the part of the excerpt starting at the anchor column."""
        return self.excerpt[self.column - 1 :]


@runtime_checkable
class PositionAnchor(Protocol):
    """Structural interface for anything that can locate itself in the source."""

    def locate(self) -> Location:
        """Return the line/column/excerpt this anchor refers to."""
        ...


@dataclass(frozen=True, slots=True)
class FrozenAnchor:
    """Anchor holding an already rendered `Location`."""

    location: Location

    def locate(self) -> Location:
        """Return the stored location."""
        return self.location


@dataclass(frozen=True, slots=True)
class SourceAnchor:
    """Anchor into a source text by character offset.

    Attributes:
        source: The parsed text (borrowed, never copied or mutated).
        start: Character offset of the anchored position.
        end: Optional end offset when the anchor marks an already matched span.
    """

    source: str
    start: int
    end: int | None = None

    @classmethod
    def at(cls, source: str, offset: int) -> SourceAnchor:
        """Anchor the current cursor position."""
        return cls(source=source, start=offset)

    @classmethod
    def spanning(cls, source: str, start: int, end: int) -> SourceAnchor:
        """Anchor a previously matched sub-result ``source[start:end]``."""
        if end < start:
            raise ValueError(f"span end {end} precedes start {start}")
        return cls(source=source, start=start, end=end)

    @property
    def matched(self) -> str:
        """Return the anchored text (empty for point anchors)."""
        if self.end is None:
            return ""
        return self.source[self._clamp(self.start) : self._clamp(self.end)]

    def _clamp(self, offset: int) -> int:
        return max(0, min(offset, len(self.source)))

    def locate(self) -> Location:
        """Compute the line, column and excerpt of ``start``.

        Offsets outside the text are clamped to its bounds, so an anchor taken at
        end of input points just past the last character.
        """
        text: str = self.source
        offset: int = self._clamp(self.start)
        line_start: int = text.rfind("\n", 0, offset) + 1
        line_end: int = text.find("\n", offset)
        if line_end < 0:
            line_end = len(text)
        excerpt: str = text[line_start:line_end].rstrip("\r")
        return Location(
            line=text.count("\n", 0, offset) + 1,
            column=offset - line_start + 1,
            excerpt=excerpt,
        )

    def snapshot(self) -> FrozenAnchor:
        """Copy the rendered location out so it survives the source text."""
        return FrozenAnchor(self.locate())
