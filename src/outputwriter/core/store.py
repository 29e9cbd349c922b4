# topmark:header:start
#
#   project      : OutputWriter
#   file         : store.py
#   file_relpath : src/outputwriter/core/store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic attribute storage.

`AttributeStore` maps non-empty string keys to arbitrary values. ``None`` is the
*absent* marker: it is never stored, and assigning it removes the key. The
store knows nothing about serialization; the engine uses one instance to hold
its encoder settings (see [`outputwriter.config`][outputwriter.config]).

Imports are all-or-nothing: every key of the incoming mapping is validated
before any entry is written, so a single malformed key leaves the store
unchanged.

Example:
    ```python
    store = AttributeStore({"root_tag": "data"})
    store.set("indent", 4)
    store.set("indent", None)  # removes the key
    assert store.get("root_tag") == "data"
    assert store.get("indent") is None
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any

from outputwriter.config.logging import get_logger
from outputwriter.core.errors import InvalidInputError, InvalidKeyError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from outputwriter.config.logging import OutputWriterLogger

logger: OutputWriterLogger = get_logger(__name__)


def _check_key(key: object) -> str:
    """Return `key` if it is a non-empty string, else raise `InvalidKeyError`."""
    if not isinstance(key, str) or not key:
        raise InvalidKeyError(key)
    return key


def record_view(values: Mapping[str, Any]) -> SimpleNamespace:
    """Return an attribute-accessible (record-shaped) view over a mapping.

    The view is a shallow copy: mutating it does not touch the source mapping.
    """
    return SimpleNamespace(**{str(k): v for k, v in values.items()})


class AttributeStore:
    """String-keyed attribute container.

    Args:
        initial (Mapping[str, Any] | None): Entries to import on construction.

    Raises:
        InvalidInputError: If `initial` is given and is not a mapping.
        InvalidKeyError: If any key of `initial` is empty or not a string.
    """

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._vars: dict[str, Any] = {}
        if initial is not None:
            self.import_(initial)

    def import_(self, values: Mapping[str, Any]) -> None:
        """Import key/value pairs into the store.

        All keys are validated first; nothing is written unless every key is valid.
        ``None`` values remove the corresponding keys, as with `set()`.

        Args:
            values (Mapping[str, Any]): The entries to import.

        Raises:
            InvalidInputError: If `values` is not a mapping.
            InvalidKeyError: On the first empty or non-string key.
        """
        if not isinstance(values, Mapping):
            raise InvalidInputError("Constructor parameter must be a mapping")
        staged: list[tuple[str, Any]] = [(_check_key(k), v) for k, v in values.items()]
        for key, value in staged:
            self.set(key, value)
        logger.trace("Imported %d attribute(s)", len(staged))

    def set(self, key: str, value: Any) -> None:
        """Store `value` under `key`, or remove `key` when `value` is None.

        Raises:
            InvalidKeyError: If `key` is empty or not a string.
        """
        _check_key(key)
        if value is None:
            self._vars.pop(key, None)
        else:
            self._vars[key] = value

    def remove(self, key: str) -> None:
        """Remove `key` (no-op if it is not set)."""
        self.set(key, None)

    def get(self, key: str | None = None, *, as_record: bool = False) -> Any:
        """Retrieve one value, or all values when no key is given.

        Args:
            key (str | None): The key to look up. ``None`` selects the whole store.
            as_record (bool): Return attribute-accessible views instead of mappings.
                For a single key, only mapping values are converted.

        Returns:
            Any: The stored value, ``None`` if `key` is unset, or a copy of all
            entries (a dict, or a record view when `as_record` is set).

        Raises:
            InvalidKeyError: If `key` is given and is not a string. The empty
                string is never stored, so `get("")` returns None.
        """
        if key is None:
            return record_view(self._vars) if as_record else dict(self._vars)
        if not isinstance(key, str):
            raise InvalidKeyError(key)
        value: Any = self._vars.get(key)
        if as_record and isinstance(value, Mapping):
            return record_view(value)
        return value

    def exists(self, key: str) -> bool:
        """Return True if `key` is set.

        Raises:
            InvalidKeyError: If `key` is empty or not a string.
        """
        return _check_key(key) in self._vars

    def is_empty(self, key: str) -> bool:
        """Return True if `key` is unset or holds a falsy value.

        Falsy values are empty collections, zero, ``False`` and the empty string.

        Raises:
            InvalidKeyError: If `key` is empty or not a string.
        """
        return not self._vars.get(_check_key(key))

    def count(self) -> int:
        """Return the number of stored entries."""
        return len(self._vars)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._vars))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._vars!r})"