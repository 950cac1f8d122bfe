# topmark:header:start
#
#   project      : Worrywart
#   file         : constants.py
#   file_relpath : src/worrywart/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Worrywart Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    WORRYWART_VERSION: str = get_version("worrywart")
except PackageNotFoundError:  # running from a source checkout
    WORRYWART_VERSION = "0.0.0"

# Buffered worries/sorries allowed before a session escalates on its own.
DEFAULT_LIMIT: int = 10

# Display label used until a parsing process names its input.
UNSPECIFIED_FILE: str = "<unspecified file>"

# Config file names and the pyproject section they are read from.
CONFIG_FILE_NAME: str = "worrywart.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_SECTION: tuple[str, str] = ("tool", "worrywart")

ENV_LOG_LEVEL: str = "WORRYWART_LOG_LEVEL"
ENV_LIMIT: str = "WORRYWART_LIMIT"

# Marker placed at the anchor column in rendered excerpts.
EXCERPT_PREFIX: str = "------> "
EXCERPT_MARKER: str = "⏏"
