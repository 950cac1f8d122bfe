# topmark:header:start
#
#   project      : Worrywart
#   file         : __init__.py
#   file_relpath : src/worrywart/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Worrywart CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    worrywart = "worrywart.cli.main:cli"

All subcommands live in `worrywart.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
