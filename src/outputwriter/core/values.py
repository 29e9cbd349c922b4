# topmark:header:start
#
#   project      : OutputWriter
#   file         : values.py
#   file_relpath : src/outputwriter/core/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value normalization and record projection.

Every encoder consumes the same closed value model:

- scalars: ``None``, ``bool``, ``int``, ``float``, ``str``
- sequences: ``list`` of values
- mappings: ``dict`` with ``str`` keys (insertion order preserved)

`normalize_value` converts arbitrary input into that model. Records (values
with a named type and named fields) are turned into mappings by an explicit
*projection*, looked up in this order:

1. a projection registered for the type or one of its bases
   (`register_projection`)
2. a ``to_dict()`` method on the record
3. an ``_asdict()`` method (named tuples)
4. the declared fields of a dataclass instance

There is deliberately no fallback to ``vars()``: a record type without a
projection is rejected with
[`InvalidInputError`][outputwriter.core.errors.InvalidInputError].

Conversions:
  - Path -> str
  - date, time, datetime -> ISO 8601 string (``isoformat()``)
  - Enum -> Enum.name
  - tuple/set/frozenset -> list (sets in iteration order)
  - Mapping keys -> str
"""

from __future__ import annotations

import dataclasses
import datetime as dt
from collections.abc import Callable, Mapping
from enum import Enum
from pathlib import PurePath
from typing import Any, Final, cast

from outputwriter.core.errors import InvalidInputError

Projection = Callable[[Any], Mapping[str, Any]]

_SCALARS: Final[tuple[type, ...]] = (bool, int, float, str)
_TEMPORALS: Final[tuple[type, ...]] = (dt.date, dt.time)
_SEQUENCES: Final[tuple[type, ...]] = (list, tuple, set, frozenset)

_projections: dict[type, Projection] = {}


def register_projection(cls: type, projection: Projection) -> None:
    """Register the field projection used for instances of `cls` (and subclasses).

    Args:
        cls (type): The record type.
        projection (Projection): Callable returning a field-name → value mapping.
    """
    _projections[cls] = projection


def unregister_projection(cls: type) -> None:
    """Remove a projection registered for `cls` (no-op if none)."""
    _projections.pop(cls, None)


def _registered_projection(obj: object) -> Projection | None:
    for base in type(obj).__mro__:
        projection: Projection | None = _projections.get(base)
        if projection is not None:
            return projection
    return None


def _is_named_tuple(obj: object) -> bool:
    return isinstance(obj, tuple) and callable(getattr(obj, "_asdict", None))


def is_record(obj: object) -> bool:
    """Return True if `obj` is a record rather than a scalar or collection.

    Named tuples count as records; plain tuples do not.
    """
    if obj is None or isinstance(obj, (*_SCALARS, *_TEMPORALS, Mapping, PurePath, Enum)):
        return False
    if _is_named_tuple(obj):
        return True
    return not isinstance(obj, _SEQUENCES)


def project_record(obj: object) -> dict[str, Any]:
    """Return the field projection of a record (not recursively normalized).

    Raises:
        InvalidInputError: If no projection is available for the record's type.
    """
    projection: Projection | None = _registered_projection(obj)
    if projection is not None:
        fields: Any = projection(obj)
    elif callable(getattr(obj, "to_dict", None)):
        fields = cast("Any", obj).to_dict()
    elif _is_named_tuple(obj):
        fields = cast("Any", obj)._asdict()
    elif dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        fields = {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    else:
        raise InvalidInputError(
            f"No field projection for type '{type(obj).__qualname__}'; "
            "implement to_dict() or call register_projection()"
        )
    if not isinstance(fields, Mapping):
        raise InvalidInputError(
            f"Projection for type '{type(obj).__qualname__}' returned "
            f"{type(fields).__name__}, expected a mapping"
        )
    return {str(k): v for k, v in cast("Mapping[object, Any]", fields).items()}


def normalize_value(obj: object) -> object:
    """Normalize a value into the encoder value model.

    Rules:
      - Recursively normalize mapping values, sequence items and record fields.
      - Leave scalars unchanged.

    Args:
        obj (object): The value to normalize.

    Returns:
        object: The normalized value.

    Raises:
        InvalidInputError: If the value (or a nested value) cannot be represented.
    """
    return _normalize(obj, set())


def _normalize(obj: object, active: set[int]) -> object:
    if obj is None or isinstance(obj, _SCALARS):
        return obj

    if isinstance(obj, PurePath):
        return str(obj)

    if isinstance(obj, _TEMPORALS):
        return obj.isoformat()

    if isinstance(obj, Enum):
        return obj.name

    # Containers on the current path; a repeat means the value graph is cyclic.
    if id(obj) in active:
        raise InvalidInputError(
            f"Cyclic reference through '{type(obj).__qualname__}' cannot be normalized"
        )
    active.add(id(obj))
    try:
        if is_record(obj):
            return {k: _normalize(v, active) for k, v in project_record(obj).items()}

        if isinstance(obj, Mapping):
            mapping: Mapping[object, Any] = cast("Mapping[object, Any]", obj)
            return {str(k): _normalize(v, active) for k, v in mapping.items()}

        seq: Any = obj
        return [_normalize(v, active) for v in seq]
    finally:
        active.discard(id(obj))
