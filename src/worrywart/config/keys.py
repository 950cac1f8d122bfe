# topmark:header:start
#
#   project      : Worrywart
#   file         : keys.py
#   file_relpath : src/worrywart/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for Worrywart configuration.

Keys live at the top level of ``worrywart.toml`` and inside ``[tool.worrywart]``
in ``pyproject.toml``. Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by Worrywart configuration."""

    # Stop upward discovery at the file that sets this.
    KEY_ROOT: Final[str] = "root"

    KEY_LIMIT: Final[str] = "limit"
    KEY_FILENAME: Final[str] = "filename"
    KEY_SHOW_HINTS: Final[str] = "show_hints"
    KEY_COLOR: Final[str] = "color"

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_ROOT, KEY_LIMIT, KEY_FILENAME, KEY_SHOW_HINTS, KEY_COLOR}
    )
