# topmark:header:start
#
#   project      : OutputWriter
#   file         : test_convert.py
#   file_relpath : tests/cli/test_convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `convert` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from outputwriter.cli.exit_codes import ExitCode
from outputwriter.encoders.native import loads
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = [pytest.mark.cli, pytest.mark.usefixtures("isolation")]

DECL = '<?xml version="1.0" encoding="utf-8"?>\n'


def test_stdin_to_markup_by_default() -> None:
    result = run_cli(["convert"], input_text='{"a": 1}')
    assert_SUCCESS(result)
    assert result.stdout == DECL + "<root><a>1</a></root>\n"


@pytest.mark.parametrize(
    ("fmt", "expected"),
    [
        ("json", '{"b":1,"a":[1,2]}\n'),
        ("JSON", '{"b":1,"a":[1,2]}\n'),
        ("xml", DECL + "<root><b>1</b><a><item>1</item><item>2</item></a></root>\n"),
    ],
)
def test_format_option(fmt: str, expected: str) -> None:
    result = run_cli(["convert", "-", "-f", fmt], input_text='{"b": 1, "a": [1, 2]}')
    assert_SUCCESS(result)
    assert result.stdout == expected


def test_json_file_to_csv(isolation: Path) -> None:
    (isolation / "rows.json").write_text(
        '[{"b": 1, "a": "x"}, {"b": 2, "a": "y"}]', encoding="utf-8"
    )
    result = run_cli(["convert", "rows.json", "-f", "csv", "--sort-keys"])
    assert_SUCCESS(result)
    assert result.stdout == "a,b\nx,1\ny,2\n"


def test_toml_input_guessed_from_suffix(isolation: Path) -> None:
    (isolation / "data.toml").write_text('name = "n"\n[table]\nk = 1\n', encoding="utf-8")
    result = run_cli(["convert", "data.toml", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"name": "n", "table": {"k": 1}}


def test_toml_dates_convert_to_iso_text(isolation: Path) -> None:
    (isolation / "release.toml").write_text(
        "released = 2024-01-02\n"
        "build = 2024-01-02T03:04:05Z\n"
        "cutoff = 07:30:00\n",
        encoding="utf-8",
    )
    result = run_cli(["convert", "release.toml", "-f", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {
        "released": "2024-01-02",
        "build": "2024-01-02T03:04:05+00:00",
        "cutoff": "07:30:00",
    }


def test_explicit_input_format() -> None:
    result = run_cli(["convert", "--input-format", "toml", "-f", "json"], input_text="a = 1\n")
    assert_SUCCESS(result)
    assert result.stdout == '{"a":1}\n'


def test_write_flags() -> None:
    result = run_cli(
        ["convert", "-f", "xml", "--pretty", "--no-declaration"],
        input_text='{"a": {"b": 1}}',
    )
    assert_SUCCESS(result)
    assert result.stdout == "<root>\n  <a>\n    <b>1</b>\n  </a>\n</root>\n"

    result = run_cli(["convert", "-f", "csv", "--omit-header"], input_text='{"a": 1}')
    assert_SUCCESS(result)
    assert result.stdout == "1\n"

    result = run_cli(["convert", "-f", "json", "--escape-unicode"], input_text='"é"')
    assert_SUCCESS(result)
    assert result.stdout == '"\\u00e9"\n'


def test_native_output_loads_back() -> None:
    result = run_cli(["convert", "-f", "native"], input_text='{"a": [1, "<x"]}')
    assert_SUCCESS(result)
    assert loads(result.stdout) == {"a": [1, "<x"]}


def test_set_overrides_settings() -> None:
    result = run_cli(
        ["convert", "-f", "csv", "--set", "csv_delimiter=;"],
        input_text='{"a": 1, "b": 2}',
    )
    assert_SUCCESS(result)
    assert result.stdout == "a;b\n1;2\n"


def test_discovered_config_sets_default_format(isolation: Path) -> None:
    (isolation / "outputwriter.toml").write_text(
        '[outputwriter]\ndefault_format = "json"\n', encoding="utf-8"
    )
    result = run_cli(["convert"], input_text="[1]")
    assert_SUCCESS(result)
    assert result.stdout == "[1]\n"


def test_no_config_ignores_discovered_file(isolation: Path) -> None:
    (isolation / "outputwriter.toml").write_text(
        '[outputwriter]\ndefault_format = "json"\n', encoding="utf-8"
    )
    result = run_cli(["convert", "--no-config"], input_text='{"a": 1}')
    assert_SUCCESS(result)
    assert result.stdout.startswith(DECL)


def test_explicit_config_file(isolation: Path) -> None:
    cfg = isolation / "custom.toml"
    cfg.write_text('[outputwriter]\nroot_tag = "doc"\n', encoding="utf-8")
    result = run_cli(["convert", "--config", str(cfg), "--no-declaration"], input_text="{}")
    assert_SUCCESS(result)
    assert result.stdout == "<doc />\n"


def test_unknown_format_exit_code() -> None:
    result = run_cli(["convert", "-f", "yaml"], input_text="{}")
    assert_exit(result, ExitCode.UNSUPPORTED_FORMAT)
    assert "yaml is not a supported output type" in result.stderr


@pytest.mark.parametrize(
    ("argv", "stdin", "code"),
    [
        (["convert", "missing.json"], None, ExitCode.FILE_NOT_FOUND),
        (["convert"], "{not json", ExitCode.DATA_ERROR),
        (["convert", "--input-format", "toml"], "= broken", ExitCode.DATA_ERROR),
        (["convert", "-f", "json"], "null", ExitCode.DATA_ERROR),
        (["convert", "-f", "csv"], '{"a": {"b": 1}}', ExitCode.DATA_ERROR),
        (["convert", "-f", "csv"], "[]", ExitCode.DATA_ERROR),
        (["convert", "--set", "indent"], "{}", ExitCode.CONFIG_ERROR),
        (["convert", "--set", "indent=wide"], "{}", ExitCode.CONFIG_ERROR),
        (["convert", "--config", "nope.toml"], "{}", ExitCode.FILE_NOT_FOUND),
        (["convert", "--set", "root_tag=1bad"], "{}", ExitCode.DATA_ERROR),
    ],
)
def test_error_exit_codes(argv: list[str], stdin: str | None, code: ExitCode) -> None:
    assert_exit(run_cli(argv, input_text=stdin), code)


def test_config_and_no_config_conflict(isolation: Path) -> None:
    (isolation / "c.toml").write_text("", encoding="utf-8")
    result = run_cli(["convert", "--config", "c.toml", "--no-config"], input_text="{}")
    assert_exit(result, ExitCode.CONFIG_ERROR)


def test_malformed_config_file(isolation: Path) -> None:
    (isolation / "outputwriter.toml").write_text("[outputwriter\n", encoding="utf-8")
    result = run_cli(["convert"], input_text="{}")
    assert_exit(result, ExitCode.CONFIG_ERROR)
