# topmark:header:start
#
#   project      : OutputWriter
#   file         : jsontext.py
#   file_relpath : src/outputwriter/encoders/jsontext.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON text encoding.

Conventions:
- Keyed collections become objects, ordered collections arrays, scalars literals.
- Compact separators unless `WriteOption.PRETTY_PRINT` is set.
- Non-ASCII characters are written verbatim unless `WriteOption.ESCAPE_UNICODE`
  is set.
- ``json.dumps()`` does not append a trailing newline, and neither does this
  encoder.
- ``NaN`` and infinities are not valid JSON and are rejected.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from outputwriter.config.keys import SettingKey
from outputwriter.core.errors import UnsupportedShapeError
from outputwriter.core.options import WriteOption, has_option

if TYPE_CHECKING:
    from outputwriter.core.store import AttributeStore


def serialize_json(
    value: Any,
    *,
    pretty: bool = False,
    indent: int = 2,
    sort_keys: bool = False,
    escape_unicode: bool = False,
) -> str:
    """Serialize a normalized value to JSON text (no trailing newline).

    Raises:
        UnsupportedShapeError: If the value holds a non-finite float.
    """
    try:
        return json.dumps(
            value,
            indent=indent if pretty else None,
            separators=None if pretty else (",", ":"),
            sort_keys=sort_keys,
            ensure_ascii=escape_unicode,
            allow_nan=False,
        )
    except ValueError as exc:
        raise UnsupportedShapeError(f"Value cannot be represented as JSON: {exc}") from exc


def encode(value: Any, *, options: int, settings: AttributeStore) -> str:
    """Encode a normalized value as JSON text.

    Honours `PRETTY_PRINT`, `SORT_KEYS` and `ESCAPE_UNICODE`.
    """
    indent: int | None = settings.get(SettingKey.INDENT)
    return serialize_json(
        value,
        pretty=has_option(options, WriteOption.PRETTY_PRINT),
        indent=2 if indent is None else indent,
        sort_keys=has_option(options, WriteOption.SORT_KEYS),
        escape_unicode=has_option(options, WriteOption.ESCAPE_UNICODE),
    )
