# topmark:header:start
#
#   project      : OutputWriter
#   file         : formats.py
#   file_relpath : src/outputwriter/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output format definitions shared by the engine, the encoders and the CLI.

Format names are parsed exactly once, when an `OutputWriter` is constructed,
so the rest of the code only ever sees a closed set of `OutputFormat` members.
"""

from __future__ import annotations

from outputwriter.core.enum_mixins import KeyedStrEnum
from outputwriter.core.errors import UnsupportedFormatError


class OutputFormat(KeyedStrEnum):
    """Supported output encodings.

    Attributes:
        MARKUP: An XML document with a version/encoding declaration.
        JSON: A single JSON document.
        NATIVE: Self-describing, round-trippable serialization text (see
            [`outputwriter.encoders.native`][outputwriter.encoders.native]).
        TABULAR: Comma-separated rows with a header row.
    """

    MARKUP = ("markup", "XML document", ("xml",))
    JSON = ("json", "JSON document")
    NATIVE = ("native", "Native serialization text", ("php", "serialized"))
    TABULAR = ("tabular", "Comma-separated values", ("csv",))


def parse_output_format(raw: str | OutputFormat) -> OutputFormat:
    """Parse a format name into an `OutputFormat`.

    Args:
        raw (str | OutputFormat): A format key, member name or alias
            (case-insensitive), or an `OutputFormat` member.

    Returns:
        OutputFormat: The matching member.

    Raises:
        UnsupportedFormatError: If `raw` does not name a supported format.
    """
    if isinstance(raw, OutputFormat):
        return raw
    if not isinstance(raw, str):
        raise UnsupportedFormatError(raw)
    fmt: OutputFormat | None = OutputFormat.parse(raw)
    if fmt is None:
        raise UnsupportedFormatError(raw)
    return fmt
