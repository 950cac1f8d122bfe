# topmark:header:start
#
#   project      : Worrywart
#   file         : colored_enum.py
#   file_relpath : src/worrywart/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String enums that know how to paint themselves.

Members are declared as ``(text, colorizer)`` pairs. ``.value`` stays the plain
text (so JSON output and ``Enum("text")`` lookups are unaffected) while the
colorizer, typically a `yachalk` style, is kept aside for terminal output.

Example:
    ```python
    from yachalk import chalk

    class Mood(ColoredStrEnum):
        CALM = ("calm", chalk.green)
        GRIM = ("grim", chalk.red_bright)

    Mood("calm") is Mood.CALM              # True
    Mood.GRIM.paint("oh no")                 # red text
    Mood.GRIM.paint("oh no", enabled=False)  # "oh no"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Anything called like a `yachalk` style: ``style(*parts, sep=" ") -> str``."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Join ``args`` with ``sep`` and return the decorated string."""
        ...


class ColoredStrEnum(str, Enum):
    """`str` enum whose members carry a colorizer next to their text value."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        member: ColoredStrEnum = str.__new__(cls, text)
        member._value_ = text
        member._color = color
        return member

    @property
    def color(self) -> Colorizer:
        """Return the member's colorizer."""
        return self._color

    def paint(self, text: str, *, enabled: bool = True) -> str:
        """Return ``text`` in this member's color, or unchanged when not ``enabled``."""
        if not enabled:
            return text
        return self._color(text)
