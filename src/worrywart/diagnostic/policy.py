# topmark:header:start
#
#   project      : Worrywart
#   file         : policy.py
#   file_relpath : src/worrywart/diagnostic/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Severity policy: decide what happens to a newly reported diagnostic.

The decision depends only on how many diagnostics are already buffered, the
buffering limit and the incoming severity. `classify` is pure so that the whole
policy can be checked against a table.

Worries and sorries share one limit. Reaching it is an *escalation*, not a
panic: the diagnostic that reaches the limit is buffered like the others and
then the whole buffer is surfaced.
"""

from __future__ import annotations

from enum import Enum

from worrywart.diagnostic.model import Severity


class Action(Enum):
    """What the session must do with a reported diagnostic."""

    BUFFER = "buffer"
    BUFFER_THEN_ESCALATE = "buffer-then-escalate"
    RAISE_IMMEDIATELY = "raise-immediately"


def classify(current_count: int, limit: int, severity: Severity) -> Action:
    """Classify an incoming diagnostic.

    Args:
        current_count: Number of diagnostics buffered *before* this one.
        limit: Maximum number of buffered diagnostics before escalation (>= 1).
        severity: Severity of the incoming diagnostic.

    Returns:
        The action to take.

    Raises:
        ValueError: If ``limit`` is not positive or ``current_count`` is negative.
    """
    if limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit}")
    if current_count < 0:
        raise ValueError(f"buffered count cannot be negative, got {current_count}")

    if severity is Severity.PANIC:
        return Action.RAISE_IMMEDIATELY
    if current_count + 1 >= limit:
        return Action.BUFFER_THEN_ESCALATE
    return Action.BUFFER
