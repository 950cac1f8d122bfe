# topmark:header:start
#
#   project      : Worrywart
#   file         : text.py
#   file_relpath : src/worrywart/rendering/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable rendering of diagnostics.

A single diagnostic renders as::

    ===SORRY!=== Error while parsing example.txt
    Unexpected closing bracket ')'
    hint: remove it or add a matching '(' before it
    at example.txt:3
    ------> foo(bar)⏏)

Several diagnostics render in report order, separated by blank lines, below a
count line. Colors come from `yachalk` and are only applied when asked for.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from yachalk import chalk

from worrywart.constants import EXCERPT_MARKER, EXCERPT_PREFIX
from worrywart.diagnostic.model import Severity

if TYPE_CHECKING:
    from collections.abc import Sequence

    from worrywart.diagnostic.anchor import Location
    from worrywart.diagnostic.model import Diagnostic


def _headline(severity: Severity, filename: str) -> str:
    if severity is Severity.WORRY:
        return f"{severity.banner} (in {filename})"
    return f"{severity.banner} Error while parsing {filename}"


def render_excerpt(location: Location, *, color: bool = False) -> str:
    """Render the source line with a marker at the anchor column."""
    if not color:
        return f"{EXCERPT_PREFIX}{location.before}{EXCERPT_MARKER}{location.after}"
    return (
        f"{EXCERPT_PREFIX}{chalk.green(location.before)}"
        f"{chalk.yellow(EXCERPT_MARKER)}{chalk.red(location.after)}"
    )


def render_diagnostic(
    diagnostic: Diagnostic,
    filename: str,
    *,
    color: bool = False,
    show_hints: bool = True,
) -> str:
    """Render one diagnostic.

    Args:
        diagnostic: The diagnostic to render.
        filename: Display label of the parsed input.
        color: Whether to emit ANSI colors.
        show_hints: Whether to include the ``hint:`` line.

    Returns:
        The rendered text, without a trailing newline.
    """
    severity: Severity = diagnostic.severity
    lines: list[str] = [
        severity.paint(_headline(severity, filename), enabled=color),
        diagnostic.message,
    ]
    if show_hints and diagnostic.hint:
        lines.append(f"hint: {diagnostic.hint}")
    location: Location | None = diagnostic.location
    if location is not None:
        lines.append(f"at {filename}:{location.line}")
        lines.append(render_excerpt(location, color=color))
    return "\n".join(lines)


def render_summary(
    count: int, filename: str, *, escalated_due_to_limit: bool, limit: int | None = None
) -> str:
    """Render the count line placed above an aggregate report.

    ``limit`` is the buffering limit in effect when the report escalated; it
    defaults to ``count``.
    """
    noun: str = "problem" if count == 1 else "problems"
    text: str = f"{count} {noun} found in {filename}"
    if escalated_due_to_limit:
        text += f" (stopped after reaching the limit of {count if limit is None else limit})"
    return text + ":"


def render_diagnostics(
    diagnostics: Sequence[Diagnostic],
    filename: str,
    *,
    escalated_due_to_limit: bool = False,
    limit: int | None = None,
    color: bool = False,
    show_hints: bool = True,
) -> str:
    """Render diagnostics in report order, separated by blank lines.

    A single non-escalated diagnostic renders without the count line.

    Args:
        diagnostics: Diagnostics in report order.
        filename: Display label of the parsed input.
        escalated_due_to_limit: Whether the buffering limit forced this report.
        limit: Buffering limit named in the count line of an escalated report.
        color: Whether to emit ANSI colors.
        show_hints: Whether to include ``hint:`` lines.

    Returns:
        The rendered report, without a trailing newline.
    """
    blocks: list[str] = [
        render_diagnostic(d, filename, color=color, show_hints=show_hints) for d in diagnostics
    ]
    if len(blocks) > 1 or escalated_due_to_limit:
        summary: str = render_summary(
            len(blocks), filename, escalated_due_to_limit=escalated_due_to_limit, limit=limit
        )
        blocks.insert(0, chalk.bold(summary) if color else summary)
    return "\n\n".join(blocks)
