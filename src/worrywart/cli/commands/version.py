# topmark:header:start
#
#   project      : Worrywart
#   file         : version.py
#   file_relpath : src/worrywart/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Worrywart `version` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from worrywart.constants import WORRYWART_VERSION
from worrywart.diagnostic.machine import serialize_json_object
from worrywart.rendering.formats import OutputFormat

if TYPE_CHECKING:
    from worrywart.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Worrywart.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format.",
)
@click.pass_context
def version_command(ctx: click.Context, output_format: str) -> None:
    """Print the Worrywart version installed in the active environment."""
    console: ConsoleLike = ctx.obj["console"]
    fmt = OutputFormat(output_format)
    if fmt is OutputFormat.TEXT:
        console.print(console.styled(WORRYWART_VERSION, bold=True))
    else:
        console.print(serialize_json_object({"version": WORRYWART_VERSION}))
