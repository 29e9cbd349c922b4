# topmark:header:start
#
#   project      : OutputWriter
#   file         : config.py
#   file_relpath : src/outputwriter/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OutputWriter `config` command group.

  * ``outputwriter config dump``: show the effective settings as TOML.
  * ``outputwriter config defaults``: show the built-in defaults as TOML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

import click

from outputwriter.cli.cmd_common import get_console, load_cli_settings
from outputwriter.cli.options import CONTEXT_SETTINGS, common_config_options
from outputwriter.config.io import render_settings_toml
from outputwriter.config.keys import DEFAULT_SETTINGS

if TYPE_CHECKING:
    from outputwriter.cli.console import ConsoleLike
    from outputwriter.core.store import AttributeStore


P = ParamSpec("P")
R = TypeVar("R")


def _pyproject_option(f: Callable[P, R]) -> Callable[P, R]:
    return click.option(
        "--pyproject",
        "for_pyproject",
        is_flag=True,
        default=False,
        help="Render as a [tool.outputwriter] table for pyproject.toml.",
    )(f)


@click.group(
    name="config",
    help="Inspect OutputWriter settings.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration-related subcommands."""
    # No-op: behavior is provided by subcommands only.


@config_command.command(
    name="dump",
    help="Print the effective settings (defaults, config file, --set) as TOML.",
)
@common_config_options
@click.option(
    "--set",
    "assignments",
    multiple=True,
    metavar="KEY=VALUE",
    help="Override a setting. Repeatable.",
)
@_pyproject_option
@click.pass_context
def config_dump_command(
    ctx: click.Context,
    *,
    config_path: str | None,
    no_config: bool,
    assignments: tuple[str, ...],
    for_pyproject: bool,
) -> None:
    """Render the merged settings store."""
    console: ConsoleLike = get_console(ctx)
    settings: AttributeStore = load_cli_settings(
        config_path, no_config=no_config, assignments=assignments
    )
    console.print(render_settings_toml(settings.get(), for_pyproject=for_pyproject), nl=False)


@config_command.command(
    name="defaults",
    help="Print the built-in default settings as TOML.",
)
@_pyproject_option
@click.pass_context
def config_defaults_command(ctx: click.Context, *, for_pyproject: bool) -> None:
    """Render the built-in defaults."""
    console: ConsoleLike = get_console(ctx)
    console.print(render_settings_toml(DEFAULT_SETTINGS, for_pyproject=for_pyproject), nl=False)
