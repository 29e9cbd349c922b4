# topmark:header:start
#
#   project      : OutputWriter
#   file         : options.py
#   file_relpath : src/outputwriter/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, write flags) and
their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from outputwriter.cli.errors import CliUsageError
from outputwriter.config.logging import TRACE_LEVEL
from outputwriter.core.options import WriteOption

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by the group and its commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the number of ``-v`` and ``-q`` flags.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: The logging level.

    Raises:
        CliUsageError: If both verbose and quiet flags are used.

    Behavior:
        Three or more ``-v`` flags select TRACE, two DEBUG, one INFO.
        Any ``-q`` selects ERROR. The default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise CliUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO

    if quiet_count >= 1:  # -q
        return logging.ERROR

    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (-v INFO, -vv DEBUG, -vvv TRACE).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--no-color`` flag to a command."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable colored console and log output.",
    )(f)


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config PATH`` and ``--no-config`` to a command."""
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        help="Read settings from this TOML file instead of discovering one.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        default=False,
        help="Do not discover a config file; use built-in defaults.",
    )(f)
    return f


def common_write_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add one flag per [`WriteOption`][outputwriter.core.options.WriteOption] bit."""
    f = click.option(
        "--pretty", is_flag=True, default=False, help="Indent nested structures."
    )(f)
    f = click.option(
        "--sort-keys", is_flag=True, default=False, help="Sort mapping keys and CSV columns."
    )(f)
    f = click.option(
        "--escape-unicode",
        is_flag=True,
        default=False,
        help="Escape non-ASCII characters (json, native).",
    )(f)
    f = click.option(
        "--omit-header", is_flag=True, default=False, help="Do not write the CSV header row."
    )(f)
    f = click.option(
        "--no-declaration",
        is_flag=True,
        default=False,
        help="Do not write the XML declaration.",
    )(f)
    return f


def build_write_options(
    *,
    pretty: bool = False,
    sort_keys: bool = False,
    escape_unicode: bool = False,
    omit_header: bool = False,
    no_declaration: bool = False,
) -> WriteOption:
    """Combine write flags into a `WriteOption` bitmask."""
    options: WriteOption = WriteOption.NONE
    if pretty:
        options |= WriteOption.PRETTY_PRINT
    if sort_keys:
        options |= WriteOption.SORT_KEYS
    if escape_unicode:
        options |= WriteOption.ESCAPE_UNICODE
    if omit_header:
        options |= WriteOption.OMIT_HEADER
    if no_declaration:
        options |= WriteOption.OMIT_DECLARATION
    return options
