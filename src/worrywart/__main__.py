# topmark:header:start
#
#   project      : Worrywart
#   file         : __main__.py
#   file_relpath : src/worrywart/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Worrywart via ``python -m worrywart``."""

from __future__ import annotations

from worrywart.cli.main import cli

if __name__ == "__main__":
    cli()
