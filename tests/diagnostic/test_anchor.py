# topmark:header:start
#
#   project      : Worrywart
#   file         : test_anchor.py
#   file_relpath : tests/diagnostic/test_anchor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for position anchors and the `Location` they produce."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.conftest import parametrize
from worrywart.diagnostic.anchor import FrozenAnchor, Location, PositionAnchor, SourceAnchor

if TYPE_CHECKING:
    from collections.abc import Callable


@parametrize(
    ("offset", "line", "column", "excerpt"),
    [
        (0, 1, 1, "first line"),
        (6, 1, 7, "first line"),
        (11, 2, 1, "second (line"),
        (18, 2, 8, "second (line"),
        (29, 3, 6, "third) line)"),
        (36, 3, 13, "third) line)"),
    ],
)
def test_locate_line_column_excerpt(
    anchor_at: Callable[[int], SourceAnchor],
    offset: int,
    line: int,
    column: int,
    excerpt: str,
) -> None:
    """Offsets map to 1-based line/column and the full source line."""
    location: Location = anchor_at(offset).locate()
    assert (location.line, location.column, location.excerpt) == (line, column, excerpt)


def test_location_splits_excerpt_at_column(anchor_at: Callable[[int], SourceAnchor]) -> None:
    """`before`/`after` split the excerpt at the anchored character."""
    location: Location = anchor_at(18).locate()
    assert location.before == "second "
    assert location.after == "(line"


def test_offset_past_end_is_clamped() -> None:
    """Anchors beyond the text point just past its last character."""
    text = "abc"
    location: Location = SourceAnchor.at(text, 99).locate()
    assert location == Location(line=1, column=4, excerpt="abc")


def test_negative_offset_is_clamped() -> None:
    """Negative offsets are clamped to the start of the text."""
    location: Location = SourceAnchor.at("abc\ndef", -5).locate()
    assert (location.line, location.column) == (1, 1)


def test_end_of_input_after_final_newline() -> None:
    """An anchor at the very end of a newline-terminated text sits on an empty last line."""
    text = "abc\n"
    location: Location = SourceAnchor.at(text, len(text)).locate()
    assert location == Location(line=2, column=1, excerpt="")


def test_crlf_is_stripped_from_excerpt() -> None:
    """Windows line endings do not leak into the excerpt."""
    text = "ab\r\ncd\r\n"
    location: Location = SourceAnchor.at(text, 1).locate()
    assert location.excerpt == "ab"
    assert SourceAnchor.at(text, 5).locate() == Location(line=2, column=2, excerpt="cd")


def test_spanning_anchor_exposes_matched_text(source: str) -> None:
    """Span anchors locate at their start and expose the matched slice."""
    anchor: SourceAnchor = SourceAnchor.spanning(source, 18, 23)
    assert anchor.matched == "(line"
    assert anchor.locate().column == 8
    assert SourceAnchor.at(source, 18).matched == ""


def test_spanning_rejects_reversed_span(source: str) -> None:
    """A span ending before it starts is a programming error."""
    with pytest.raises(ValueError, match="precedes"):
        SourceAnchor.spanning(source, 10, 4)


def test_snapshot_survives_the_source() -> None:
    """A snapshot renders the same location without referencing the text."""
    text = "x = (1,\n"
    frozen: FrozenAnchor = SourceAnchor.at(text, 4).snapshot()
    del text
    assert frozen.locate() == Location(line=1, column=5, excerpt="x = (1,")


def test_anchors_satisfy_the_protocol(source: str) -> None:
    """Both anchor flavours and any object with `locate()` are position anchors."""

    class Fixed:
        def locate(self) -> Location:
            return Location(line=7, column=1, excerpt="")

    assert isinstance(SourceAnchor.at(source, 0), PositionAnchor)
    assert isinstance(FrozenAnchor(Location(1, 1, "")), PositionAnchor)
    assert isinstance(Fixed(), PositionAnchor)
    assert not isinstance("offset 3", PositionAnchor)
