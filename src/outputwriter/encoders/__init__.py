# topmark:header:start
#
#   project      : OutputWriter
#   file         : __init__.py
#   file_relpath : src/outputwriter/encoders/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Encoders, one module per output format.

Every encoder exposes the same pure function:

    encode(value, *, options: int, settings: AttributeStore) -> str

- [`markup`][outputwriter.encoders.markup]: XML via `build_tree()` + `render()`.
- [`jsontext`][outputwriter.encoders.jsontext]: JSON text.
- [`native`][outputwriter.encoders.native]: round-trippable object-graph text
  (`dumps()` / `loads()`).
- [`tabular`][outputwriter.encoders.tabular]: CSV rows.

Rule of thumb:
- Encoders never print; emission belongs to
  [`OutputWriter.emit`][outputwriter.writer.OutputWriter.emit].
- Encoders never touch the options bitmask beyond testing the bits they honour.
"""

from __future__ import annotations
