# topmark:header:start
#
#   project      : Worrywart
#   file         : options.py
#   file_relpath : src/worrywart/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options of the `worrywart` group and how they are resolved.

The decorators only declare options; `resolve_verbosity` and
`resolve_color_mode` turn the parsed values into what the commands use.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from worrywart.cli.errors import WorrywartUsageError
from worrywart.rendering.formats import OutputFormat

P = ParamSpec("P")
R = TypeVar("R")

QUIET: int = -1


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Fold ``-v`` / ``-q`` counts into one verbosity level.

    Returns:
        `QUIET` when ``-q`` was given, else the number of ``-v`` flags.

    Raises:
        WorrywartUsageError: If ``-v`` and ``-q`` are combined.
    """
    if verbose_count and quiet_count:
        raise WorrywartUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return QUIET if quiet_count else verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Declare the counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    verbose = click.option(
        "-v", "--verbose", count=True, help="Increase verbosity (also list clean files)."
    )
    quiet = click.option(
        "-q", "--quiet", count=True, help="Only print reports that fail the run."
    )
    return quiet(verbose(f))


class ColorMode(str, Enum):
    """Value of ``--color``."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def _env_wants_color() -> bool | None:
    force: str | None = os.getenv("FORCE_COLOR")
    if force and force != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    return None


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Decide whether ANSI colors are written.

    Machine formats are never colored. Otherwise an explicit ``always`` or
    ``never`` wins, then ``FORCE_COLOR`` / ``NO_COLOR``, then whether stdout is
    a terminal.
    """
    if output_format in (OutputFormat.JSON, OutputFormat.NDJSON):
        return False
    if cli_mode in (ColorMode.ALWAYS, ColorMode.NEVER):
        return cli_mode is ColorMode.ALWAYS
    from_env: bool | None = _env_wants_color()
    if from_env is not None:
        return from_env
    return bool(sys.stdout.isatty() if stdout_isatty is None else stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Declare ``--color auto|always|never`` and its ``--no-color`` shorthand."""
    color = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )
    no_color = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Same as --color=never.",
    )
    return no_color(color(f))
