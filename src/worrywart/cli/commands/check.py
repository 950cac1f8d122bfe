# topmark:header:start
#
#   project      : Worrywart
#   file         : check.py
#   file_relpath : src/worrywart/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Worrywart `check` command.

Scans each input with the bracket scanner, one reporting session per input,
and prints what every session surfaced. ``-`` reads from STDIN.

Exit status is the worst outcome over all inputs: `ExitCode.PANIC` if any
input panicked, `ExitCode.CONCERNS` if any produced sorries or hit the limit,
`ExitCode.SUCCESS` otherwise. Inputs with worries only still succeed.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import click

from worrywart.cli.errors import (
    WorrywartConfigError,
    WorrywartEncodingError,
    WorrywartFileNotFoundError,
    WorrywartIOError,
)
from worrywart.cli.exit_codes import ExitCode
from worrywart.config.loaders import ConfigError
from worrywart.config.logging import get_logger
from worrywart.config.model import MutableReportingConfig
from worrywart.diagnostic.machine import (
    build_meta,
    build_report_payload,
    iter_diagnostic_ndjson_records,
    serialize_json_object,
    serialize_ndjson,
)
from worrywart.diagnostic.model import Severity
from worrywart.errors import DiagnosticFailure, LimitExceeded, Panicked
from worrywart.rendering.formats import OutputFormat
from worrywart.scan.brackets import check_text

if TYPE_CHECKING:
    from worrywart.cli.console import ConsoleLike
    from worrywart.config.logging import WorrywartLogger
    from worrywart.config.model import ReportingConfig
    from worrywart.scan.brackets import ScanResult

logger: WorrywartLogger = get_logger(__name__)

STDIN_MARKER: str = "-"


@dataclass(frozen=True)
class FileOutcome:
    """Result of checking one input.

    Attributes:
        filename: Display label of the input.
        failure: What the session surfaced, or None for a clean input.
        result: Scan counters, or None when the scan was cut short.
    """

    filename: str
    failure: DiagnosticFailure | None
    result: ScanResult | None

    @property
    def status(self) -> str:
        """Return a stable status key: clean, worries, concerns, limit-exceeded or panic."""
        if self.failure is None:
            return "clean"
        if isinstance(self.failure, Panicked):
            return "panic"
        if isinstance(self.failure, LimitExceeded):
            return "limit-exceeded"
        if all(d.severity is Severity.WORRY for d in self.failure.diagnostics):
            return "worries"
        return "concerns"

    @property
    def exit_code(self) -> ExitCode:
        """Return the exit code this outcome calls for on its own."""
        return {
            "clean": ExitCode.SUCCESS,
            "worries": ExitCode.SUCCESS,
            "concerns": ExitCode.CONCERNS,
            "limit-exceeded": ExitCode.CONCERNS,
            "panic": ExitCode.PANIC,
        }[self.status]

    def to_dict(self) -> dict[str, object]:
        """Return the JSON payload of this outcome."""
        if self.failure is not None:
            payload: dict[str, object] = self.failure.to_dict()
        else:
            payload = build_report_payload(self.filename, ())
        payload["status"] = self.status
        return payload


def _read_input(path: Path) -> tuple[str, str]:
    """Return ``(display_name, text)`` for a path or the STDIN marker."""
    if str(path) == STDIN_MARKER:
        return "<stdin>", click.get_text_stream("stdin").read()
    try:
        return str(path), path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise WorrywartFileNotFoundError(f"No such file: {path}") from exc
    except UnicodeDecodeError as exc:
        raise WorrywartEncodingError(f"{path} is not valid UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise WorrywartIOError(f"Cannot read {path}: {exc.strerror or exc}") from exc


def check_one(text: str, config: ReportingConfig, filename: str) -> FileOutcome:
    """Scan one input and capture whatever its session surfaced."""
    try:
        result: ScanResult = check_text(text, config, filename)
    except DiagnosticFailure as failure:
        logger.info("%s: %s with %d diagnostic(s)", filename, type(failure).__name__, len(failure))
        return FileOutcome(filename=filename, failure=failure, result=None)
    return FileOutcome(filename=filename, failure=None, result=result)


def _resolve_config(
    config_path: Path | None,
    limit: int | None,
    hints: bool | None,
) -> ReportingConfig:
    try:
        draft: MutableReportingConfig = MutableReportingConfig.load_merged(
            Path.cwd(),
            extra_files=[config_path] if config_path else (),
        )
    except ConfigError as exc:
        raise WorrywartConfigError(str(exc)) from exc
    if limit is not None:
        draft.limit = limit
    if hints is not None:
        draft.show_hints = hints
    return draft.freeze()


@click.command(
    name="check",
    help="Scan files for unbalanced brackets and strings and report the problems found.",
)
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=None,
    help="Problems buffered per file before giving up on it (default: 10).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Extra config file, merged after discovered ones.",
)
@click.option(
    "--hints/--no-hints",
    default=None,
    help="Show or hide 'hint:' lines.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format.",
)
@click.pass_context
def check_command(
    ctx: click.Context,
    *,
    paths: tuple[Path, ...],
    limit: int | None,
    config_path: Path | None,
    hints: bool | None,
    output_format: str,
) -> None:
    """Scan every input with its own reporting session."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)
    fmt = OutputFormat(output_format)

    config: ReportingConfig = _resolve_config(config_path, limit, hints)
    color: bool = fmt is OutputFormat.TEXT and getattr(console, "enable_color", False)
    if ctx.obj.get("color_mode") is None:
        color = color and config.color

    outcomes: list[FileOutcome] = []
    for path in paths:
        filename, text = _read_input(path)
        outcomes.append(check_one(text, config, filename))

    if fmt is OutputFormat.JSON:
        console.print(
            serialize_json_object(
                {"meta": build_meta(), "results": [o.to_dict() for o in outcomes]}
            )
        )
    elif fmt is OutputFormat.NDJSON:
        for o in outcomes:
            if o.failure is not None:
                console.print(serialize_ndjson(iter_diagnostic_ndjson_records(o.failure)), nl=False)
    else:
        for o in outcomes:
            # Quiet mode keeps only reports that fail the run.
            if verbosity < 0 and o.status == "worries":
                continue
            if o.failure is not None:
                console.print(o.failure.render(color=color, show_hints=config.show_hints))
                console.print()
            elif verbosity > 0:
                console.print(f"{o.filename}: no problems found")

    code: ExitCode = max((o.exit_code for o in outcomes), default=ExitCode.SUCCESS)
    ctx.exit(int(code))
