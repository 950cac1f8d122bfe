# topmark:header:start
#
#   project      : Worrywart
#   file         : __init__.py
#   file_relpath : src/worrywart/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Worrywart package.

Worrywart is the diagnostic-reporting engine of a parser: the parsing process
reports worries, sorries and panics against positions in the source, and the
reporting session decides when to buffer them, when too many have piled up, and
how to hand one ordered report back at the end.

Typical use:
    ```python
    from worrywart import ReportingSession, SourceAnchor

    session = ReportingSession(filename="input.txt")
    session.sorry("Unexpected ')'", anchor=SourceAnchor.at(text, 17))
    session.express_concerns()  # raises Concerns
    ```
"""

from __future__ import annotations

from worrywart.config.model import ReportingConfig
from worrywart.diagnostic.anchor import FrozenAnchor, Location, PositionAnchor, SourceAnchor
from worrywart.diagnostic.kinds import AdHoc, DiagnosticKind
from worrywart.diagnostic.model import Diagnostic, Severity
from worrywart.errors import (
    Concerns,
    DiagnosticFailure,
    LimitExceeded,
    Panicked,
    SessionStateError,
)
from worrywart.session import ReportingSession, SessionState

__all__ = [
    "AdHoc",
    "Concerns",
    "Diagnostic",
    "DiagnosticFailure",
    "DiagnosticKind",
    "FrozenAnchor",
    "LimitExceeded",
    "Location",
    "Panicked",
    "PositionAnchor",
    "ReportingConfig",
    "ReportingSession",
    "SessionState",
    "SessionStateError",
    "Severity",
    "SourceAnchor",
]
