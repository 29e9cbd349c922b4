# topmark:header:start
#
#   project      : OutputWriter
#   file         : test_commands.py
#   file_relpath : tests/cli/test_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `formats`, `version`, `config` and group-level behavior."""

from __future__ import annotations

import json

import pytest
import tomlkit

from outputwriter.cli.errors import CliUsageError
from outputwriter.cli.exit_codes import ExitCode
from outputwriter.cli.options import resolve_verbosity
from outputwriter.config.keys import DEFAULT_SETTINGS
from outputwriter.constants import OUTPUTWRITER_VERSION
from outputwriter.core.formats import OutputFormat
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli

pytestmark = pytest.mark.cli


def test_no_subcommand_prints_hint_and_help() -> None:
    result = run_cli([])
    assert_SUCCESS(result)
    assert "outputwriter convert" in result.stdout
    assert "Usage:" in result.stdout


def test_formats_lists_every_format_with_aliases() -> None:
    result = run_cli(["--no-color", "formats"])
    assert_SUCCESS(result)
    lines: list[str] = result.stdout.splitlines()
    assert [line.split()[0] for line in lines] == [fmt.key for fmt in OutputFormat]
    assert "aliases: xml" in lines[0]
    assert "aliases: csv" in lines[-1]


def test_version_plain() -> None:
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.stdout.strip() == OUTPUTWRITER_VERSION


def test_version_json() -> None:
    result = run_cli(["version", "--json"])
    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"version": OUTPUTWRITER_VERSION}


def test_config_defaults() -> None:
    result = run_cli(["config", "defaults"])
    assert_SUCCESS(result)
    assert tomlkit.parse(result.stdout).unwrap() == {"outputwriter": dict(DEFAULT_SETTINGS)}


@pytest.mark.usefixtures("isolation")
def test_config_dump_applies_overrides_for_pyproject() -> None:
    result = run_cli(["config", "dump", "--set", "indent=4", "--pyproject"])
    assert_SUCCESS(result)
    table = tomlkit.parse(result.stdout).unwrap()["tool"]["outputwriter"]
    assert table["indent"] == 4
    assert table["root_tag"] == "root"


def test_verbose_and_quiet_are_exclusive() -> None:
    assert_exit(run_cli(["-v", "-q", "formats"]), ExitCode.USAGE_ERROR)


@pytest.mark.parametrize(
    ("verbose", "quiet", "level"),
    [(0, 0, 30), (1, 0, 20), (2, 0, 10), (3, 0, 5), (0, 1, 40)],
)
def test_resolve_verbosity(verbose: int, quiet: int, level: int) -> None:
    assert resolve_verbosity(verbose, quiet) == level


def test_resolve_verbosity_conflict() -> None:
    with pytest.raises(CliUsageError):
        resolve_verbosity(1, 1)
