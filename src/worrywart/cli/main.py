# topmark:header:start
#
#   project      : Worrywart
#   file         : main.py
#   file_relpath : src/worrywart/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point of the Worrywart CLI.

The group resolves verbosity and color once. It stores them in ``ctx.obj``
together with the console, and subcommands read them from there.
"""

from __future__ import annotations

import click

from worrywart.cli.commands.check import check_command
from worrywart.cli.commands.version import version_command
from worrywart.cli.console import ClickConsole
from worrywart.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from worrywart.config.logging import resolve_env_log_level, setup_logging


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Worrywart: report parse problems the way a careful parser would.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    state: dict[str, object] = ctx.ensure_object(dict)
    state["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Only the environment controls internal logging.
    setup_logging(level=resolve_env_log_level())

    mode: ColorMode | None = ColorMode(color_mode) if color_mode else None
    if no_color:
        mode = ColorMode.NEVER
    state["color_mode"] = mode
    console = ClickConsole(enable_color=resolve_color_mode(cli_mode=mode, output_format=None))
    state["console"] = console

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'worrywart check [PATHS...]' to scan files.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(check_command)
cli.add_command(version_command)
