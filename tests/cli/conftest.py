# topmark:header:start
#
#   project      : OutputWriter
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers.

`run_cli()` invokes the Click group in-process with `click.testing.CliRunner`.
Tests that depend on config discovery should use the ``isolation`` fixture so
the working directory is an empty project.
"""

from __future__ import annotations

from typing import IO, Any, Sequence

from click.testing import CliRunner, Result

from outputwriter.cli.exit_codes import ExitCode
from outputwriter.cli.main import cli


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["convert", "-f", "json"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["version"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with `code` through a handled error."""
    assert result.exit_code == code, result.output
    # A handled error exits via SystemExit, not an unexpected exception.
    assert isinstance(result.exception, SystemExit), repr(result.exception)
