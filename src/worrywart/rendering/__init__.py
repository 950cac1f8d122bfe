# topmark:header:start
#
#   project      : Worrywart
#   file         : __init__.py
#   file_relpath : src/worrywart/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering helpers for Worrywart.

Public modules:
    - worrywart.rendering.colored_enum
    - worrywart.rendering.text
"""

from __future__ import annotations
