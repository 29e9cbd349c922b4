# topmark:header:start
#
#   project      : OutputWriter
#   file         : version.py
#   file_relpath : src/outputwriter/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OutputWriter `version` command.

Prints the OutputWriter version as installed in the active Python environment.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import click

from outputwriter.cli.cmd_common import get_console
from outputwriter.cli.options import CONTEXT_SETTINGS
from outputwriter.constants import OUTPUTWRITER_VERSION

if TYPE_CHECKING:
    from outputwriter.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of OutputWriter.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the version as a JSON object.",
)
@click.pass_context
def version_command(ctx: click.Context, *, as_json: bool = False) -> None:
    """Show the current version of OutputWriter."""
    console: ConsoleLike = get_console(ctx)
    if as_json:
        console.print(json.dumps({"version": OUTPUTWRITER_VERSION}))
        return
    if ctx.obj.get("verbosity_level", logging.WARNING) <= logging.INFO:
        console.print(console.styled("OutputWriter version:", bold=True, underline=True))
        console.print(f"    {console.styled(OUTPUTWRITER_VERSION, bold=True)}")
    else:
        console.print(console.styled(OUTPUTWRITER_VERSION, bold=True))
