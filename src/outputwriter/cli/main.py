# topmark:header:start
#
#   project      : OutputWriter
#   file         : main.py
#   file_relpath : src/outputwriter/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ``outputwriter`` command.

Group-level options are initialized once and placed into ``ctx.obj``;
subcommands read the console and verbosity from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from outputwriter.cli.commands.config import config_command
from outputwriter.cli.commands.convert import convert_command
from outputwriter.cli.commands.formats import formats_command
from outputwriter.cli.commands.version import version_command
from outputwriter.cli.console import ClickConsole
from outputwriter.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from outputwriter.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from outputwriter.cli.console import ConsoleLike
    from outputwriter.config.logging import OutputWriterLogger

logger: OutputWriterLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and console) on the Click context.

    ``OUTPUTWRITER_LOG_LEVEL`` wins over ``-v``/``-q`` when it is set.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    level_env: int | None = resolve_env_log_level()
    level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = level
    setup_logging(level=level, color=not no_color)

    ctx.color = False if no_color else None
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Encode JSON or TOML data as XML, JSON, native serialization text or CSV.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the OutputWriter CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'outputwriter convert INPUT -f FORMAT' to encode a document.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(formats_command)

cli.add_command(config_command)

cli.add_command(convert_command)

if __name__ == "__main__":
    cli()
