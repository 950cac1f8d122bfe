# topmark:header:start
#
#   project      : Worrywart
#   file         : session.py
#   file_relpath : src/worrywart/session.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reporting session: the object a parsing process holds while it parses.

Lifecycle:
    ``ACTIVE`` → ``RAISED``     a panic, or the limit was reached (failure raised)
    ``ACTIVE`` → ``CONCLUDED``  `express_concerns()` ran (raising or not)

While active, `worry()` and `sorry()` buffer diagnostics and return; the report
that reaches the limit raises `LimitExceeded` with everything buffered so far.
`panic()` raises `Panicked` right away and drops whatever was buffered: once the
parser panics, the context of earlier reports can no longer be trusted.
`express_concerns()` must be the last call of a well-formed parse.

Every reporting operation accepts either a `DiagnosticKind` instance or a plain
string (wrapped in `AdHoc`), an optional ``anchor=`` position and an optional
``hint=`` that overrides the kind's own hint.

Example:
    ```python
    session = ReportingSession(filename="example.txt", limit=5)
    session.worry("trailing whitespace", anchor=SourceAnchor.at(text, 12))
    session.sorry(ExtraParen(")"), anchor=SourceAnchor.at(text, 40))
    session.express_concerns()  # raises Concerns with both, in that order
    ```

A session belongs to exactly one parse and is not thread-safe.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, NoReturn

from worrywart.config.logging import get_logger
from worrywart.constants import DEFAULT_LIMIT, UNSPECIFIED_FILE
from worrywart.diagnostic.anchor import PositionAnchor
from worrywart.diagnostic.kinds import AdHoc, DiagnosticKind, validate_kind
from worrywart.diagnostic.ledger import DiagnosticLedger
from worrywart.diagnostic.model import Diagnostic, Severity
from worrywart.diagnostic.policy import Action
from worrywart.errors import Concerns, LimitExceeded, Panicked, SessionStateError

if TYPE_CHECKING:
    from types import TracebackType

    from worrywart.config.logging import WorrywartLogger


logger: WorrywartLogger = get_logger(__name__)


class SessionState(Enum):
    """Where a reporting session is in its lifecycle."""

    ACTIVE = "active"
    RAISED = "raised"
    CONCLUDED = "concluded"


class ReportingSession:
    """Collects diagnostics for one parse and decides when to surface them.

    Args:
        filename: Display label of the input being parsed.
        limit: Number of buffered worries/sorries that forces an escalation.
    """

    def __init__(self, filename: str = UNSPECIFIED_FILE, limit: int = DEFAULT_LIMIT) -> None:
        self._ledger: DiagnosticLedger = DiagnosticLedger(limit=limit, filename=filename)
        self._state: SessionState = SessionState.ACTIVE

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(filename={self.filename!r}, limit={self.limit}, "
            f"state={self._state.value}, pending={len(self._ledger)})"
        )

    # --- Read-only views ---

    @property
    def state(self) -> SessionState:
        """Return the current lifecycle state."""
        return self._state

    @property
    def filename(self) -> str:
        """Return the display label of the input being parsed."""
        return self._ledger.filename

    @property
    def limit(self) -> int:
        """Return the buffering limit."""
        return self._ledger.limit

    @property
    def pending(self) -> tuple[Diagnostic, ...]:
        """Return the buffered diagnostics, in report order, without draining them."""
        return tuple(self._ledger)

    # --- Configuration ---

    def set_filename(self, name: str) -> None:
        """Set the display label of the input being parsed.

        Raises:
            SessionStateError: If the session is no longer active.
        """
        self._ensure_active("set_filename")
        self._ledger.set_filename(name)

    def set_limit(self, n: int) -> None:
        """Set the buffering limit.

        A limit lowered below the number of already buffered diagnostics takes
        effect on the next report, which then escalates.

        Raises:
            SessionStateError: If the session is no longer active.
            ValueError: If ``n`` is not a positive integer.
        """
        self._ensure_active("set_limit")
        self._ledger.set_limit(n)

    # --- Reporting ---

    def panic(
        self,
        kind: DiagnosticKind | str,
        *,
        anchor: PositionAnchor | None = None,
        hint: str | None = None,
    ) -> NoReturn:
        """Report a problem the parse cannot recover from.

        Raises:
            Panicked: Always; carries only this diagnostic.
            SessionStateError: If the session is no longer active.
        """
        self._report(Severity.PANIC, kind, anchor=anchor, hint=hint)
        raise AssertionError("unreachable: a panic always raises")  # pragma: no cover

    def sorry(
        self,
        kind: DiagnosticKind | str,
        *,
        anchor: PositionAnchor | None = None,
        hint: str | None = None,
    ) -> None:
        """Report a problem that makes the input wrong but lets parsing continue.

        Raises:
            LimitExceeded: If this report fills the buffer.
            SessionStateError: If the session is no longer active.
        """
        self._report(Severity.SORRY, kind, anchor=anchor, hint=hint)

    def worry(
        self,
        kind: DiagnosticKind | str,
        *,
        anchor: PositionAnchor | None = None,
        hint: str | None = None,
    ) -> None:
        """Report a suspicious but non-fatal construct.

        Worries count toward the same limit as sorries.

        Raises:
            LimitExceeded: If this report fills the buffer.
            SessionStateError: If the session is no longer active.
        """
        self._report(Severity.WORRY, kind, anchor=anchor, hint=hint)

    def express_concerns(self) -> None:
        """Conclude the session, surfacing whatever is still buffered.

        Does nothing beyond concluding the session when nothing is buffered.

        Raises:
            Concerns: If at least one diagnostic was buffered.
            SessionStateError: If the session is no longer active.
        """
        self._ensure_active("express_concerns")
        self._transition(SessionState.CONCLUDED)
        if len(self._ledger) == 0:
            logger.debug("No concerns for %s", self.filename)
            return
        raise Concerns(self.filename, self._ledger.drain())

    # --- Context manager ---

    def __enter__(self) -> ReportingSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        # Only a clean exit concludes; exceptions from the parse propagate untouched.
        if exc_type is None and self._state is SessionState.ACTIVE:
            self.express_concerns()

    # --- Internals ---

    def _ensure_active(self, operation: str) -> None:
        if self._state is not SessionState.ACTIVE:
            raise SessionStateError(
                f"{operation}() called on a {self._state.value} session for {self.filename}"
            )

    def _transition(self, state: SessionState) -> None:
        logger.debug("Session for %s: %s -> %s", self.filename, self._state.value, state.value)
        self._state = state

    def _build(
        self,
        severity: Severity,
        kind: DiagnosticKind | str,
        anchor: PositionAnchor | None,
        hint: str | None,
    ) -> Diagnostic:
        if isinstance(kind, str):
            kind = AdHoc(kind)
        elif isinstance(kind, DiagnosticKind):
            validate_kind(kind)
        else:
            raise TypeError(
                f"expected a DiagnosticKind or a message string, got {type(kind).__name__}"
            )
        if anchor is not None and not isinstance(anchor, PositionAnchor):
            raise TypeError(f"anchor must implement locate(), got {type(anchor).__name__}")
        return Diagnostic(kind=kind, severity=severity, anchor=anchor, hint_override=hint)

    def _report(
        self,
        severity: Severity,
        kind: DiagnosticKind | str,
        *,
        anchor: PositionAnchor | None,
        hint: str | None,
    ) -> None:
        self._ensure_active(severity.value)
        diagnostic: Diagnostic = self._build(severity, kind, anchor, hint)
        action: Action = self._ledger.record(diagnostic)

        if action is Action.RAISE_IMMEDIATELY:
            self._ledger.discard()
            self._transition(SessionState.RAISED)
            raise Panicked(self.filename, diagnostic)

        if action is Action.BUFFER_THEN_ESCALATE:
            self._transition(SessionState.RAISED)
            raise LimitExceeded(self.filename, self._ledger.drain(), limit=self.limit)
