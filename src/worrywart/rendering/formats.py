# topmark:header:start
#
#   project      : Worrywart
#   file         : formats.py
#   file_relpath : src/worrywart/rendering/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats of the Worrywart CLI."""

from enum import Enum


class OutputFormat(Enum):
    """How `worrywart check` prints its results."""

    TEXT = "text"
    JSON = "json"
    NDJSON = "ndjson"
