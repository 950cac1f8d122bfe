# topmark:header:start
#
#   project      : Worrywart
#   file         : __init__.py
#   file_relpath : src/worrywart/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Worrywart configuration and logging.

Modules:
    - `worrywart.config.logging`: TRACE-aware logger and colored formatter.
    - `worrywart.config.keys`: TOML key names.
    - `worrywart.config.loaders`: tomlkit-based TOML reading.
    - `worrywart.config.model`: `ReportingConfig` / `MutableReportingConfig`.

Nothing is imported here eagerly: the diagnostic core imports
`worrywart.config.logging`, and `worrywart.config.model` imports the core.
"""

from __future__ import annotations
