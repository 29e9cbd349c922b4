# topmark:header:start
#
#   project      : OutputWriter
#   file         : convert.py
#   file_relpath : src/outputwriter/cli/commands/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OutputWriter `convert` command.

Reads a JSON or TOML document (from a file or STDIN), encodes it with an
[`OutputWriter`][outputwriter.writer.OutputWriter] and writes the result to
stdout. Diagnostics go to stderr so the output can be piped.

Examples:
    ```sh
    outputwriter convert data.json -f xml --pretty
    cat data.json | outputwriter convert -f csv --sort-keys
    outputwriter convert pyproject.toml -f json --set indent=4 --pretty
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from outputwriter.cli.cli_types import KeyedEnumParam
from outputwriter.cli.cmd_common import load_cli_settings
from outputwriter.cli.errors import to_cli_error
from outputwriter.cli.io import STDIN_TOKEN, InputFormat, load_input
from outputwriter.cli.options import (
    CONTEXT_SETTINGS,
    build_write_options,
    common_config_options,
    common_write_options,
)
from outputwriter.config.keys import SettingKey
from outputwriter.config.logging import get_logger
from outputwriter.core.errors import OutputWriterError
from outputwriter.core.formats import OutputFormat
from outputwriter.sinks import ClickSink
from outputwriter.writer import OutputWriter

if TYPE_CHECKING:
    from outputwriter.config.logging import OutputWriterLogger
    from outputwriter.core.options import WriteOption
    from outputwriter.core.store import AttributeStore

logger: OutputWriterLogger = get_logger(__name__)


@click.command(
    name="convert",
    help=(
        "Encode a JSON or TOML document. INPUT is a file path or '-' for STDIN "
        "(the default)."
    ),
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("source", metavar="[INPUT]", required=False, default=STDIN_TOKEN)
@click.option(
    "-f",
    "--format",
    "output_format",
    default=None,
    help=(
        "Output format: "
        + ", ".join(
            f"{fmt.key}" + (f" ({'/'.join(fmt.aliases)})" if fmt.aliases else "")
            for fmt in OutputFormat
        )
        + ". Defaults to the 'default_format' setting."
    ),
)
@click.option(
    "--input-format",
    "input_format",
    type=KeyedEnumParam(InputFormat),
    default=None,
    help="Input format (json, toml). Guessed from the file suffix when omitted.",
)
@common_write_options
@common_config_options
@click.option(
    "--set",
    "assignments",
    multiple=True,
    metavar="KEY=VALUE",
    help="Override a setting, e.g. --set csv_delimiter=';'. Repeatable.",
)
def convert_command(
    *,
    source: str,
    output_format: str | None,
    input_format: InputFormat | None,
    pretty: bool,
    sort_keys: bool,
    escape_unicode: bool,
    omit_header: bool,
    no_declaration: bool,
    config_path: str | None,
    no_config: bool,
    assignments: tuple[str, ...],
) -> None:
    """Encode INPUT and write the result to stdout.

    Raises:
        OutputWriterCliError: With an exit code matching the failure
            (see [`ExitCode`][outputwriter.cli.exit_codes.ExitCode]).
    """
    settings: AttributeStore = load_cli_settings(
        config_path, no_config=no_config, assignments=assignments
    )
    data: Any = load_input(source, input_format)
    fmt_name: str = output_format or settings.get(SettingKey.DEFAULT_FORMAT) or "markup"
    options: WriteOption = build_write_options(
        pretty=pretty,
        sort_keys=sort_keys,
        escape_unicode=escape_unicode,
        omit_header=omit_header,
        no_declaration=no_declaration,
    )
    logger.info("Converting %s to %s", source, fmt_name)

    try:
        writer = OutputWriter(data, fmt_name, settings=settings, sink=ClickSink())
        writer.set_options(options)
        writer.emit()
    except OutputWriterError as exc:
        raise to_cli_error(exc) from exc

    # Terminate single-line documents for the shell
    if not writer.output().endswith("\n"):
        click.echo()
