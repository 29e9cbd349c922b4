# topmark:header:start
#
#   project      : OutputWriter
#   file         : io.py
#   file_relpath : src/outputwriter/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reading the structured input of `outputwriter convert`.

Input comes from a file or from STDIN (``-``) and is parsed as JSON or TOML.
JSON object order is preserved; TOML is parsed with `tomlkit` and unwrapped to
plain Python values.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from outputwriter.cli.errors import CliDataError, CliFileNotFoundError, CliIOError
from outputwriter.config.logging import get_logger
from outputwriter.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from outputwriter.config.logging import OutputWriterLogger

logger: OutputWriterLogger = get_logger(__name__)

#: Token selecting STDIN as the input source.
STDIN_TOKEN: str = "-"


class InputFormat(KeyedStrEnum):
    """Structured input formats understood by `convert`."""

    JSON = ("json", "JSON document")
    TOML = ("toml", "TOML document")


def guess_input_format(source: str) -> InputFormat:
    """Pick the input format from a file suffix; JSON unless it ends in ``.toml``."""
    if source != STDIN_TOKEN and Path(source).suffix.lower() == ".toml":
        return InputFormat.TOML
    return InputFormat.JSON


def read_source_text(source: str) -> str:
    """Return the text of `source` (a path, or ``-`` for STDIN).

    Raises:
        CliFileNotFoundError: If the path does not exist.
        CliIOError: If the path cannot be read.
        CliDataError: If the content is not valid UTF-8.
    """
    if source == STDIN_TOKEN:
        logger.debug("Reading input from STDIN")
        return sys.stdin.read()
    path = Path(source)
    if not path.exists():
        raise CliFileNotFoundError(f"Input file not found: {source}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise CliDataError(f"Input file is not valid UTF-8: {source}") from exc
    except OSError as exc:
        raise CliIOError(f"Cannot read input file {source}: {exc}") from exc


def parse_input(text: str, input_format: InputFormat, *, source: str = STDIN_TOKEN) -> Any:
    """Parse input text into Python values.

    Raises:
        CliDataError: If the text is not valid for `input_format`.
    """
    origin: str = "<stdin>" if source == STDIN_TOKEN else source
    if input_format is InputFormat.TOML:
        try:
            return tomlkit.parse(text).unwrap()
        except TomlkitParseError as exc:
            raise CliDataError(f"Invalid TOML in {origin}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise CliDataError(f"Invalid JSON in {origin}: {exc}") from exc


def load_input(source: str, input_format: InputFormat | None = None) -> Any:
    """Read and parse `source`, guessing the format from its suffix when not given."""
    fmt: InputFormat = input_format or guess_input_format(source)
    text: str = read_source_text(source)
    logger.debug("Parsing %d characters of %s input", len(text), fmt.key)
    return parse_input(text, fmt, source=source)
