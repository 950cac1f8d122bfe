# topmark:header:start
#
#   project      : Worrywart
#   file         : __init__.py
#   file_relpath : src/worrywart/scan/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reference parsing processes built on the reporting engine."""

from __future__ import annotations

from worrywart.scan.brackets import ScanResult, check_text, scan_brackets

__all__ = [
    "ScanResult",
    "check_text",
    "scan_brackets",
]
