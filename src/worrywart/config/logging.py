# topmark:header:start
#
#   project      : Worrywart
#   file         : logging.py
#   file_relpath : src/worrywart/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Internal logging for Worrywart, with a TRACE level below DEBUG.

What gets logged:
    - TRACE: every diagnostic a ledger records.
    - DEBUG: drains, discards, session state changes, config files loaded.
    - WARNING: ignored (unknown) configuration keys.

The engine itself never prints; user-facing output goes through the CLI
console. Logging is silent (CRITICAL) unless ``WORRYWART_LOG_LEVEL`` or an
explicit level says otherwise.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, TYPE_CHECKING, Any, Final, cast

from yachalk import chalk

from worrywart.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")


class WorrywartLogger(logging.Logger):
    """`logging.Logger` that also understands `trace()`."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): Message format string.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if not self.isEnabledFor(TRACE_LEVEL):
            return
        self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.setLoggerClass(WorrywartLogger)


PLAIN_FORMAT: Final[str] = "[%(levelname)s] %(name)s: %(message)s"
VERBOSE_FORMAT: Final[str] = "[%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"

# Highest threshold first; the first one a record reaches picks its style.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[..., str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright.bold),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by its level with `yachalk`."""

    def format(self, record: logging.LogRecord) -> str:
        """Return the formatted record wrapped in its level's color."""
        text: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(text)
        return chalk.dim(text)


_LEVEL_ALIASES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "FATAL": logging.CRITICAL,
    "CRITICAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level(env: Mapping[str, str] | None = None) -> int | None:
    """Return the level named by ``WORRYWART_LOG_LEVEL``, or None.

    Accepts level names (case-insensitive, ``WARN``/``FATAL`` aliases included)
    and plain integers. Unknown names resolve to None.
    """
    raw: str = (os.environ if env is None else env).get(ENV_LOG_LEVEL, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return _LEVEL_ALIASES.get(raw)


def setup_logging(level: int | None = None, *, stream: IO[Any] | None = None) -> None:
    """Install a single colored handler on the root logger.

    Args:
        level (int | None): Threshold; falls back to the environment, then CRITICAL.
        stream (IO[Any] | None): Destination; defaults to ``sys.stdout``.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for existing in list(root.handlers):
        root.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(ChalkFormatter(PLAIN_FORMAT if level >= logging.INFO else VERBOSE_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> WorrywartLogger:
    """Return the `WorrywartLogger` called ``name``."""
    return cast("WorrywartLogger", logging.getLogger(name))
