# topmark:header:start
#
#   project      : OutputWriter
#   file         : errors.py
#   file_relpath : src/outputwriter/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the OutputWriter core.

Usage:
    Every validation failure in the store, the engine or an encoder is raised
    immediately as one of these types. Nothing here is retried and nothing is
    logged by the raiser; presentation belongs to the caller (see
    [`outputwriter.cli.errors`][outputwriter.cli.errors] for the CLI mapping).

Hierarchy:
    - `OutputWriterError`: base class for all core errors.
    - `InvalidInputError`: a missing/absent mandatory value, or a value the
      value model cannot represent.
    - `InvalidKeyError`: an attribute store key that is empty or not a string.
    - `UnsupportedFormatError`: a format name outside the supported set.
    - `UnsupportedShapeError`: a value whose shape the selected encoder cannot
      represent (e.g. nested data for tabular output).
    - `SinkError`: the emission write itself failed.
    - `ConfigError`: a malformed or invalid configuration source.
    - `NativeFormatError`: native serialization text that cannot be loaded.
"""

from __future__ import annotations


class OutputWriterError(Exception):
    """Base class for all OutputWriter errors."""


class InvalidInputError(OutputWriterError, ValueError):
    """A mandatory value is missing, or a value cannot be normalized."""


class InvalidKeyError(OutputWriterError, ValueError):
    """An attribute key is empty or not a string."""

    def __init__(self, key: object) -> None:
        super().__init__(f"Data key is invalid: {key!r}")
        self.key = key


class UnsupportedFormatError(OutputWriterError, ValueError):
    """The requested output format is not supported."""

    def __init__(self, output_format: object) -> None:
        super().__init__(f"{output_format} is not a supported output type")
        self.output_format = output_format


class UnsupportedShapeError(OutputWriterError, ValueError):
    """The value cannot be represented by the selected encoder."""


class SinkError(OutputWriterError, OSError):
    """Writing the generated output to the sink failed."""


class ConfigError(OutputWriterError):
    """A configuration source is malformed or carries invalid values."""


class NativeFormatError(InvalidInputError):
    """Native serialization text is malformed or references unknown types."""
