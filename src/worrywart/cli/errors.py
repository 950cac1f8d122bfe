# topmark:header:start
#
#   project      : Worrywart
#   file         : errors.py
#   file_relpath : src/worrywart/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI failures that are not diagnostics of the scanned input.

Each class pins the exit code the process ends with. Messages go through the
console stored on the Click context when there is one.
"""

from __future__ import annotations

from typing import IO, Any

import click

from worrywart.cli.exit_codes import ExitCode


class WorrywartError(click.ClickException):
    """Failure of the tool itself; exits with `ExitCode.UNEXPECTED_ERROR`."""

    exit_code = ExitCode.UNEXPECTED_ERROR

    def show(self, file: IO[Any] | None = None) -> None:
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class WorrywartUsageError(WorrywartError):
    """Conflicting or invalid command-line options."""

    exit_code = ExitCode.USAGE_ERROR


class WorrywartConfigError(WorrywartError):
    """Unreadable or invalid configuration file."""

    exit_code = ExitCode.CONFIG_ERROR


class WorrywartFileNotFoundError(WorrywartError):
    exit_code = ExitCode.FILE_NOT_FOUND


class WorrywartIOError(WorrywartError):
    exit_code = ExitCode.IO_ERROR


class WorrywartEncodingError(WorrywartError):
    """Input that is not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR
