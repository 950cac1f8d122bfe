# topmark:header:start
#
#   project      : Worrywart
#   file         : __init__.py
#   file_relpath : src/worrywart/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the Worrywart CLI."""

from __future__ import annotations
