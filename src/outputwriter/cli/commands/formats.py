# topmark:header:start
#
#   project      : OutputWriter
#   file         : formats.py
#   file_relpath : src/outputwriter/cli/commands/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OutputWriter `formats` command: list supported output formats."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from outputwriter.cli.cmd_common import get_console
from outputwriter.cli.options import CONTEXT_SETTINGS
from outputwriter.core.formats import OutputFormat

if TYPE_CHECKING:
    from outputwriter.cli.console import ConsoleLike


@click.command(
    name="formats",
    help="List the supported output formats and their aliases.",
    context_settings=CONTEXT_SETTINGS,
)
@click.pass_context
def formats_command(ctx: click.Context) -> None:
    """Print one line per format: key, aliases and description."""
    console: ConsoleLike = get_console(ctx)
    width: int = max(len(fmt.key) for fmt in OutputFormat)
    for fmt in OutputFormat:
        aliases: str = f" (aliases: {', '.join(fmt.aliases)})" if fmt.aliases else ""
        console.print(f"{console.styled(fmt.key.ljust(width), bold=True)}  {fmt.label}{aliases}")
