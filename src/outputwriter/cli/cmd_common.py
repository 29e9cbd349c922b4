# topmark:header:start
#
#   project      : OutputWriter
#   file         : cmd_common.py
#   file_relpath : src/outputwriter/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from outputwriter.cli.errors import CliConfigError, CliFileNotFoundError, to_cli_error
from outputwriter.config.io import discover_config
from outputwriter.config.logging import get_logger
from outputwriter.config.settings import build_settings, parse_setting_assignments
from outputwriter.core.errors import OutputWriterError

if TYPE_CHECKING:
    import click

    from outputwriter.cli.console import ConsoleLike
    from outputwriter.config.logging import OutputWriterLogger
    from outputwriter.core.store import AttributeStore

logger: OutputWriterLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the group context."""
    return ctx.obj["console"]


def resolve_config_path(config_path: str | None, *, no_config: bool) -> Path | None:
    """Return the config file to load, if any.

    An explicit ``--config`` wins; otherwise the nearest config file is
    discovered from the working directory unless ``--no-config`` was given.

    Raises:
        CliFileNotFoundError: If an explicit config file does not exist.
        CliConfigError: If ``--config`` and ``--no-config`` are combined.
    """
    if config_path is not None:
        if no_config:
            raise CliConfigError("'--config' and '--no-config' cannot be combined.")
        path = Path(config_path)
        if not path.is_file():
            raise CliFileNotFoundError(f"Config file not found: {config_path}")
        return path
    if no_config:
        return None
    return discover_config(Path.cwd())


def load_cli_settings(
    config_path: str | None,
    *,
    no_config: bool = False,
    assignments: tuple[str, ...] = (),
) -> AttributeStore:
    """Build the settings store for a command from its config flags.

    Raises:
        OutputWriterCliError: Mapped from the underlying config or key error.
    """
    path: Path | None = resolve_config_path(config_path, no_config=no_config)
    logger.info("Using config file: %s", path if path is not None else "<defaults>")
    try:
        overrides = parse_setting_assignments(assignments) if assignments else None
        return build_settings(overrides, config_path=path)
    except OutputWriterError as exc:
        raise to_cli_error(exc) from exc
