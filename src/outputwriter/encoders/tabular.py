# topmark:header:start
#
#   project      : OutputWriter
#   file         : tabular.py
#   file_relpath : src/outputwriter/encoders/tabular.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Tabular (CSV) encoding.

Accepted shapes:

- a single-level mapping: one header row of keys, one data row of values
- a non-empty list of single-level mappings sharing the same key set: one
  header row, one data row per mapping

Everything else (scalars, nested mappings or lists as cell values, ragged
rows, an empty list) raises
[`UnsupportedShapeError`][outputwriter.core.errors.UnsupportedShapeError].

Cells: ``None`` is written as an empty field, booleans as ``true``/``false``,
other scalars with ``str()``. Quoting is minimal (Python `csv` module rules).

Every row, the last included, ends with the configured line terminator
(default ``\n``), so ``{"a": 1, "b": 2}`` renders as ``"a,b\n1,2\n"``.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from outputwriter.config.keys import SettingKey
from outputwriter.core.errors import InvalidInputError, UnsupportedShapeError
from outputwriter.core.options import WriteOption, has_option

if TYPE_CHECKING:
    from collections.abc import Sequence

    from outputwriter.core.store import AttributeStore


def _cell(value: object, *, row: int, column: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (Mapping, list)):
        raise UnsupportedShapeError(
            f"Cannot flatten nested {type(value).__name__} in row {row}, column '{column}'"
        )
    return str(value)


def to_rows(value: Any, *, sort_columns: bool = False) -> tuple[list[str], list[list[str]]]:
    """Flatten a normalized value into a header and data rows.

    Args:
        value (Any): A single-level mapping, or a list of them.
        sort_columns (bool): Order columns by key instead of insertion order.

    Returns:
        tuple[list[str], list[list[str]]]: The header and the data rows.

    Raises:
        UnsupportedShapeError: If the value has a shape tabular output cannot represent.
    """
    records: Sequence[Any]
    if isinstance(value, Mapping):
        records = [value]
    elif isinstance(value, list):
        if not value:
            raise UnsupportedShapeError("Cannot flatten an empty sequence into rows")
        records = value
    else:
        raise UnsupportedShapeError(
            f"Tabular output needs a mapping or a list of mappings, got {type(value).__name__}"
        )

    first: Any = records[0]
    if not isinstance(first, Mapping):
        raise UnsupportedShapeError(f"Row 0 is a {type(first).__name__}, expected a mapping")
    header: list[str] = [str(k) for k in first]
    if sort_columns:
        header.sort()
    expected: set[str] = set(header)

    rows: list[list[str]] = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise UnsupportedShapeError(
                f"Row {index} is a {type(record).__name__}, expected a mapping"
            )
        if set(record) != expected:
            raise UnsupportedShapeError(f"Row {index} does not have the same columns as row 0")
        rows.append([_cell(record[column], row=index, column=column) for column in header])
    return header, rows


def encode(value: Any, *, options: int, settings: AttributeStore) -> str:
    """Encode a normalized value as CSV text.

    Honours `SORT_KEYS` (column order) and `OMIT_HEADER`.
    """
    header, rows = to_rows(value, sort_columns=has_option(options, WriteOption.SORT_KEYS))
    buffer = io.StringIO()
    try:
        writer = csv.writer(
            buffer,
            delimiter=settings.get(SettingKey.CSV_DELIMITER) or ",",
            lineterminator=settings.get(SettingKey.CSV_LINE_TERMINATOR) or "\n",
        )
    except TypeError as exc:
        raise InvalidInputError(f"Invalid CSV settings: {exc}") from exc
    if not has_option(options, WriteOption.OMIT_HEADER):
        writer.writerow(header)
    writer.writerows(rows)
    return buffer.getvalue()
