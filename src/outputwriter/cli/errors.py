# topmark:header:start
#
#   project      : OutputWriter
#   file         : errors.py
#   file_relpath : src/outputwriter/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the OutputWriter CLI.

Usage:
    Commands raise these exceptions (or convert library errors with
    [`to_cli_error`][outputwriter.cli.errors.to_cli_error]) to signal failures
    with standardized messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from outputwriter.cli.exit_codes import ExitCode
from outputwriter.core.errors import (
    ConfigError,
    InvalidInputError,
    OutputWriterError,
    SinkError,
    UnsupportedFormatError,
)


class OutputWriterCliError(click.ClickException):
    """Base class for all OutputWriter CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class CliUsageError(OutputWriterCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CliDataError(OutputWriterCliError):
    """Error for input that cannot be parsed or represented in the chosen format."""

    exit_code = ExitCode.DATA_ERROR


class CliFileNotFoundError(OutputWriterCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class CliUnsupportedFormatError(OutputWriterCliError):
    """Error for unknown output formats."""

    exit_code = ExitCode.UNSUPPORTED_FORMAT


class CliIOError(OutputWriterCliError):
    """Error for I/O failures reading input or writing output."""

    exit_code = ExitCode.IO_ERROR


class CliConfigError(OutputWriterCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


def to_cli_error(exc: OutputWriterError) -> OutputWriterCliError:
    """Map a library error onto the CLI error carrying the matching exit code."""
    message: str = str(exc)
    if isinstance(exc, UnsupportedFormatError):
        return CliUnsupportedFormatError(message)
    if isinstance(exc, ConfigError):
        return CliConfigError(message)
    if isinstance(exc, SinkError):
        return CliIOError(message)
    if isinstance(exc, (InvalidInputError, ValueError)):
        # InvalidKeyError and UnsupportedShapeError are ValueErrors too
        return CliDataError(message)
    return OutputWriterCliError(message)
