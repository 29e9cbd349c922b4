# topmark:header:start
#
#   project      : OutputWriter
#   file         : __init__.py
#   file_relpath : src/outputwriter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OutputWriter: encode Python values as XML, JSON, native serialization text or CSV.

Public API:

- [`OutputWriter`][outputwriter.writer.OutputWriter]: the serialization engine.
- [`AttributeStore`][outputwriter.core.store.AttributeStore]: string-keyed attribute container.
- [`OutputFormat`][outputwriter.core.formats.OutputFormat] and
  [`WriteOption`][outputwriter.core.options.WriteOption]: format and option vocabularies.
- [`register_projection`][outputwriter.core.values.register_projection]: teach the
  engine how to turn a record type into fields.
- The exception taxonomy from [`outputwriter.core.errors`][outputwriter.core.errors].
"""

from __future__ import annotations

from outputwriter.constants import OUTPUTWRITER_VERSION
from outputwriter.core.errors import (
    ConfigError,
    InvalidInputError,
    InvalidKeyError,
    NativeFormatError,
    OutputWriterError,
    SinkError,
    UnsupportedFormatError,
    UnsupportedShapeError,
)
from outputwriter.core.formats import OutputFormat
from outputwriter.core.options import WriteOption
from outputwriter.core.store import AttributeStore
from outputwriter.core.values import register_projection, unregister_projection
from outputwriter.sinks import ClickSink, StdoutSink, TextSink
from outputwriter.writer import OutputWriter

__version__: str = OUTPUTWRITER_VERSION

__all__ = [
    "AttributeStore",
    "ClickSink",
    "ConfigError",
    "InvalidInputError",
    "InvalidKeyError",
    "NativeFormatError",
    "OutputFormat",
    "OutputWriter",
    "OutputWriterError",
    "SinkError",
    "StdoutSink",
    "TextSink",
    "UnsupportedFormatError",
    "UnsupportedShapeError",
    "WriteOption",
    "__version__",
    "register_projection",
    "unregister_projection",
]
