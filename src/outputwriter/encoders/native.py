# topmark:header:start
#
#   project      : OutputWriter
#   file         : native.py
#   file_relpath : src/outputwriter/encoders/native.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Native serialization: self-describing, round-trippable text for Python object graphs.

Unlike the JSON encoder, which only sees the normalized projection of a value,
this format keeps enough type information to rebuild the original objects,
including shared references and cycles. It is JSON text underneath, so it
stays readable and editable with ordinary tools.

Document layout:

    ["@outputwriter:1@", <payload>]

Payload values:

- ``None``, ``bool``, ``int`` and ``float`` are JSON literals.
- ``str`` values are JSON strings. A string starting with ``<`` is escaped by
  doubling that first character (``"<a"`` is written as ``"<<a"``).
- Containers and records are JSON objects with reserved keys:

    - ``@t``: the type, as ``module/Qualified.Name``
    - ``@id``: a document-unique reference number
    - ``@i``: items (list elements; ``[key, value]`` pairs for dicts)
    - ``@f``: fields (instance ``__dict__`` and ``__slots__`` entries)
    - ``@v``: the underlying value of a ``str``/``int``/``float`` subclass
    - ``@e``: an Enum member name
    - ``@x``: the hex digits of a ``bytes``/``bytearray`` value
    - ``@r``: ``[callable, args]`` for objects that keep their state outside
      ``__dict__`` and ``__slots__`` (``datetime``, ``Decimal``, C types); the
      object is rebuilt as ``callable(*args)``, as ``pickle`` does
    - ``@s``: the state passed to ``__setstate__`` after an ``@r`` rebuild

- Classes and module-level functions are written as ``{"@t": ...}`` only and
  load back as the same global object.
- A container or record seen before is written as the reference string
  ``"<@id@>"``.

Limitations (shared with most object marshallers):

- lambdas, closures, locally defined classes/functions, generators, modules
  and bound methods are not supported;
- a cycle that passes through an immutable container (tuple, frozenset) or
  through the ``@r`` arguments of an object cannot be rebuilt, since the
  object must exist before it can be referenced;
- objects that refuse the reduce protocol (locks, open files) are rejected.

Loading imports the modules named in the document and calls the ``@r``
callables, so only load text from trusted sources.
"""

from __future__ import annotations

import copyreg
import importlib
import json
import types
from enum import Enum
from typing import TYPE_CHECKING, Any, Final, cast

from outputwriter.config.keys import SettingKey
from outputwriter.config.logging import get_logger
from outputwriter.constants import NATIVE_SENTINEL
from outputwriter.core.errors import InvalidInputError, NativeFormatError
from outputwriter.core.options import WriteOption, has_option

if TYPE_CHECKING:
    from outputwriter.config.logging import OutputWriterLogger
    from outputwriter.core.store import AttributeStore

logger: OutputWriterLogger = get_logger(__name__)

KEY_TYPE: Final[str] = "@t"
KEY_ID: Final[str] = "@id"
KEY_ITEMS: Final[str] = "@i"
KEY_FIELDS: Final[str] = "@f"
KEY_VALUE: Final[str] = "@v"
KEY_ENUM: Final[str] = "@e"
KEY_BYTES: Final[str] = "@x"
KEY_REDUCE: Final[str] = "@r"
KEY_STATE: Final[str] = "@s"

_REDUCE_PROTOCOL: Final[int] = 4

_PRIMITIVES: Final[frozenset[type]] = frozenset({bool, int, float, type(None)})
_CONTAINERS: Final[tuple[type, ...]] = (list, dict, set, tuple, frozenset)
_IMMUTABLE_CONTAINERS: Final[tuple[type, ...]] = (tuple, frozenset)
_VALUE_BASES: Final[tuple[type, ...]] = (str, int, float)
_BYTE_BASES: Final[tuple[type, ...]] = (bytes, bytearray)
_UNSUPPORTED: Final[tuple[type, ...]] = (
    types.ModuleType,
    types.GeneratorType,
    types.CoroutineType,
    types.AsyncGeneratorType,
    types.MethodType,
    types.FrameType,
    types.CodeType,
)


def _reference(oid: int) -> str:
    return f"<@{oid}@>"


def _escape(text: str) -> str:
    return text[0] + text if text.startswith("<") else text


def _builtin_base(kind: type, candidates: tuple[type, ...]) -> type | None:
    for base in kind.__mro__:
        if base in candidates:
            return base
    return None


def scoped_name(obj: Any) -> str:
    """Return the ``module/Qualified.Name`` locator of a class or function.

    Raises:
        InvalidInputError: If the object cannot be found again under that name.
    """
    module: str | None = getattr(obj, "__module__", None)
    qualname: str | None = getattr(obj, "__qualname__", None)
    if not module or not qualname or "<" in qualname:
        raise InvalidInputError(
            f"'{getattr(obj, '__name__', obj)!s}' is not reachable by name; "
            "lambdas and locally defined objects are not supported"
        )
    name: str = f"{module}/{qualname}"
    try:
        found: Any = resolve_name(name)
    except NativeFormatError as exc:
        raise InvalidInputError(f"{module}.{qualname} cannot be located: {exc}") from exc
    if found is not obj:
        raise InvalidInputError(f"{module}.{qualname} does not resolve to the same object")
    return name


def resolve_name(name: str) -> Any:
    """Resolve a ``module/Qualified.Name`` locator to the object it names.

    Raises:
        NativeFormatError: If the module cannot be imported or the name is missing.
    """
    modname, sep, qualname = name.partition("/")
    if not sep or not modname or not qualname:
        raise NativeFormatError(f"Malformed type locator: {name!r}")
    try:
        scope: Any = importlib.import_module(modname)
    except ImportError as exc:
        raise NativeFormatError(f"Cannot import module '{modname}': {exc}") from exc
    for part in qualname.split("."):
        try:
            scope = getattr(scope, part)
        except AttributeError as exc:
            raise NativeFormatError(f"'{modname}' has no attribute path '{qualname}'") from exc
    return scope


def _instance_fields(obj: object) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for klass in type(obj).__mro__:
        slots: Any = klass.__dict__.get("__slots__", ())
        for slot in (slots,) if isinstance(slots, str) else slots:
            if slot.startswith("__") or slot in fields:
                continue
            if hasattr(obj, slot):
                fields[slot] = getattr(obj, slot)
    instance_dict: Any = getattr(obj, "__dict__", None)
    if isinstance(instance_dict, dict):
        items = cast("dict[str, Any]", instance_dict).items()
        fields.update((k, v) for k, v in items if not k.startswith("__"))
    return fields


Reduction = tuple[Any, tuple[Any, ...], Any]


def _reduce(obj: object) -> str | Reduction:
    """Return ``(callable, args, state)`` for `obj`, or the global name it reduces to.

    Raises:
        InvalidInputError: If `obj` refuses the reduce protocol or needs
            list/dict item or state-setter extensions.
    """
    kind: type = type(obj)
    reducer: Any = copyreg.dispatch_table.get(kind)
    try:
        reduced: Any = reducer(obj) if reducer is not None else obj.__reduce_ex__(_REDUCE_PROTOCOL)
    except TypeError as exc:
        raise InvalidInputError(f"'{kind.__qualname__}' has no recoverable state: {exc}") from exc
    if isinstance(reduced, str):
        return reduced
    if not isinstance(reduced, tuple) or not 2 <= len(cast("tuple[Any, ...]", reduced)) <= 6:
        raise InvalidInputError(f"'{kind.__qualname__}' returned a malformed reduction")
    call, args, *rest = cast("tuple[Any, ...]", reduced)
    if not callable(call) or not isinstance(args, tuple):
        raise InvalidInputError(f"'{kind.__qualname__}' returned a malformed reduction")
    if any(extra is not None for extra in rest[1:]):
        raise InvalidInputError(
            f"'{kind.__qualname__}' reduces with item or state-setter extensions"
        )
    return call, cast("tuple[Any, ...]", args), rest[0] if rest else None


def _is_plain_reduction(kind: type, reduced: Reduction) -> bool:
    """True if `kind` is rebuilt as ``kind.__new__(kind)`` plus its instance fields."""
    call, args, _state = reduced
    return (
        call is copyreg.__newobj__  # type: ignore[attr-defined]
        and len(args) == 1
        and args[0] is kind
        and kind.__getstate__ is object.__getstate__
    )


def _set_state(obj: Any, state: Any) -> None:
    """Apply reduce `state` to a rebuilt object the way ``pickle`` does."""
    setstate: Any = getattr(obj, "__setstate__", None)
    if setstate is not None:
        setstate(state)
        return
    slot_state: Any = None
    if isinstance(state, tuple) and len(cast("tuple[Any, ...]", state)) == 2:
        state, slot_state = state
    if state:
        obj.__dict__.update(state)
    if slot_state:
        for name, value in cast("dict[str, Any]", slot_state).items():
            setattr(obj, name, value)


class NativeEncoder:
    """Marshal an object graph into JSON-compatible native payload structures."""

    def __init__(self) -> None:
        # id(obj) -> (oid, obj); holding obj keeps ids stable during the walk.
        self._seen: dict[int, tuple[int, object]] = {}

    def marshal(self, obj: object) -> list[Any]:
        """Return the ``[sentinel, payload]`` document for `obj`."""
        self._seen = {}
        return [NATIVE_SENTINEL, self._marshal(obj)]

    def _register(self, obj: object) -> int:
        oid: int = len(self._seen) + 1
        self._seen[id(obj)] = (oid, obj)
        return oid

    def _marshal(self, obj: Any) -> Any:
        kind: type = type(obj)
        if kind in _PRIMITIVES:
            return obj
        if kind is str:
            return _escape(obj)

        seen: tuple[int, object] | None = self._seen.get(id(obj))
        if seen is not None:
            return _reference(seen[0])

        if isinstance(obj, Enum):
            return {KEY_TYPE: scoped_name(kind), KEY_ENUM: obj.name}
        if isinstance(obj, (types.FunctionType, types.BuiltinFunctionType, type)):
            return {KEY_TYPE: scoped_name(obj)}
        if isinstance(obj, _UNSUPPORTED):
            raise InvalidInputError(f"'{kind.__name__}' is an unsupported type")

        out: dict[str, Any] = {KEY_TYPE: scoped_name(kind)}
        container: type | None = _builtin_base(kind, _CONTAINERS)
        value_base: type | None = _builtin_base(kind, _VALUE_BASES)
        byte_base: type | None = _builtin_base(kind, _BYTE_BASES)

        if byte_base is not None:
            if byte_base is bytearray:
                out[KEY_ID] = self._register(obj)
            out[KEY_BYTES] = bytes(obj).hex()
        elif container is None and value_base is not None:
            out[KEY_VALUE] = self._marshal(value_base(obj))
        elif container is None:
            reduced: str | Reduction = _reduce(obj)
            if isinstance(reduced, str):
                module: str = getattr(obj, "__module__", None) or kind.__module__
                return {KEY_TYPE: f"{module}/{reduced}"}
            out[KEY_ID] = self._register(obj)
            if not _is_plain_reduction(kind, reduced):
                return self._marshal_reduced(out, reduced)
        else:
            out[KEY_ID] = self._register(obj)
            if container is dict:
                out[KEY_ITEMS] = [
                    [self._marshal(k), self._marshal(v)]
                    for k, v in cast("dict[Any, Any]", obj).items()
                ]
            else:
                out[KEY_ITEMS] = [self._marshal(item) for item in obj]

        fields: dict[str, Any] = _instance_fields(obj)
        if fields or (container is None and value_base is None and byte_base is None):
            out[KEY_FIELDS] = {name: self._marshal(value) for name, value in fields.items()}
        return out

    def _marshal_reduced(self, out: dict[str, Any], reduced: Reduction) -> dict[str, Any]:
        call, args, state = reduced
        out[KEY_REDUCE] = [self._marshal(call), self._marshal(args)]
        if state is not None:
            out[KEY_STATE] = self._marshal(state)
        return out


class NativeDecoder:
    """Rebuild an object graph from native payload structures."""

    def __init__(self) -> None:
        self._objects: dict[int, object] = {}

    def unmarshal(self, doc: Any) -> Any:
        """Return the object encoded by a ``[sentinel, payload]`` document.

        Raises:
            NativeFormatError: If the document is malformed.
        """
        self._objects = {}
        if not isinstance(doc, list) or len(doc) != 2 or doc[0] != NATIVE_SENTINEL:
            raise NativeFormatError("Malformed input: missing native document marker")
        return self._unmarshal(doc[1])

    def _unmarshal(self, data: Any) -> Any:
        if type(data) in _PRIMITIVES:
            return data
        if isinstance(data, str):
            return self._string(data)
        if isinstance(data, dict):
            return self._object(cast("dict[str, Any]", data))
        raise NativeFormatError(f"Unexpected {type(data).__name__} in native payload")

    def _string(self, data: str) -> Any:
        if data.startswith("<@") and data.endswith("@>"):
            try:
                oid = int(data[2:-2])
            except ValueError as exc:
                raise NativeFormatError(f"Malformed reference {data!r}") from exc
            try:
                return self._objects[oid]
            except KeyError as exc:
                raise NativeFormatError(f"Forward reference to object {oid} not allowed") from exc
        if data.startswith("<"):
            return data[1:]
        return data

    def _object(self, data: dict[str, Any]) -> Any:
        name: Any = data.get(KEY_TYPE)
        if not isinstance(name, str):
            raise NativeFormatError(f"Object without a '{KEY_TYPE}' type locator")
        kind: Any = resolve_name(name)

        if KEY_ENUM in data:
            try:
                return kind[data[KEY_ENUM]]
            except (KeyError, TypeError) as exc:
                raise NativeFormatError(f"{name} has no member {data[KEY_ENUM]!r}") from exc
        if KEY_ID not in data and KEY_VALUE not in data and KEY_BYTES not in data:
            return kind
        if not isinstance(kind, type):
            raise NativeFormatError(f"{name} is not a type")

        if KEY_BYTES in data:
            return self._bytes(kind, name, data)
        if KEY_REDUCE in data:
            return self._reduced(name, data)

        if KEY_VALUE in data:
            value_base: type | None = _builtin_base(kind, _VALUE_BASES)
            if value_base is None:
                raise NativeFormatError(f"{name} has no str/int/float base")
            obj: Any = value_base.__new__(kind, self._unmarshal(data[KEY_VALUE]))
            self._populate_fields(obj, data)
            return obj

        oid: int = self._oid(data)
        container: type | None = _builtin_base(kind, _CONTAINERS)
        items: Any = data.get(KEY_ITEMS, [])
        if not isinstance(items, list):
            raise NativeFormatError(f"'{KEY_ITEMS}' of object {oid} must be a list")

        if container in _IMMUTABLE_CONTAINERS:
            base: type = cast("type", container)
            obj = base.__new__(kind, [self._unmarshal(item) for item in items])
            self._objects[oid] = obj
        elif container is not None:
            obj = container.__new__(kind)
            # Register before filling so nested references can point back here.
            self._objects[oid] = obj
            self._fill(obj, container, items)
        else:
            try:
                obj = kind.__new__(kind)
            except TypeError as exc:
                raise NativeFormatError(f"Cannot create {name} without arguments") from exc
            self._objects[oid] = obj
        self._populate_fields(obj, data)
        return obj

    def _bytes(self, kind: type, name: str, data: dict[str, Any]) -> Any:
        byte_base: type | None = _builtin_base(kind, _BYTE_BASES)
        if byte_base is None:
            raise NativeFormatError(f"{name} has no bytes/bytearray base")
        digits: Any = data[KEY_BYTES]
        try:
            raw: bytes = bytes.fromhex(digits)
        except (TypeError, ValueError) as exc:
            raise NativeFormatError(f"Invalid hex digits for {name}: {digits!r}") from exc
        if byte_base is bytearray:
            obj: Any = bytearray.__new__(kind)
            obj.extend(raw)
            self._objects[self._oid(data)] = obj
        else:
            obj = bytes.__new__(kind, raw)
        self._populate_fields(obj, data)
        return obj

    def _reduced(self, name: str, data: dict[str, Any]) -> Any:
        oid: int = self._oid(data)
        reduction: Any = data[KEY_REDUCE]
        if not isinstance(reduction, list) or len(cast("list[Any]", reduction)) != 2:
            raise NativeFormatError(f"'{KEY_REDUCE}' of object {oid} must be [callable, args]")
        call: Any = self._unmarshal(reduction[0])
        args: Any = self._unmarshal(reduction[1])
        if not callable(call) or not isinstance(args, tuple):
            raise NativeFormatError(f"'{KEY_REDUCE}' of object {oid} must be [callable, args]")
        try:
            obj: Any = call(*cast("tuple[Any, ...]", args))
        except (TypeError, ValueError) as exc:
            raise NativeFormatError(f"Cannot rebuild {name}: {exc}") from exc
        self._objects[oid] = obj
        if KEY_STATE in data:
            state: Any = self._unmarshal(data[KEY_STATE])
            try:
                _set_state(obj, state)
            except (AttributeError, TypeError, ValueError) as exc:
                raise NativeFormatError(f"Cannot restore the state of {name}: {exc}") from exc
        return obj

    def _oid(self, data: dict[str, Any]) -> int:
        oid: Any = data.get(KEY_ID)
        if type(oid) is not int:
            raise NativeFormatError(f"Invalid object id {oid!r}")
        if oid in self._objects:
            raise NativeFormatError(f"Duplicate object id {oid}")
        return oid

    def _fill(self, obj: Any, container: type, items: list[Any]) -> None:
        if container is dict:
            for pair in items:
                if not isinstance(pair, list) or len(cast("list[Any]", pair)) != 2:
                    raise NativeFormatError("Dict items must be [key, value] pairs")
                key: Any = self._unmarshal(pair[0])
                dict.__setitem__(obj, key, self._unmarshal(pair[1]))
        elif container is list:
            list.extend(obj, (self._unmarshal(item) for item in items))
        else:
            set.update(obj, (self._unmarshal(item) for item in items))

    def _populate_fields(self, obj: Any, data: dict[str, Any]) -> None:
        fields: Any = data.get(KEY_FIELDS)
        if fields is None:
            return
        if not isinstance(fields, dict):
            raise NativeFormatError(f"'{KEY_FIELDS}' must be an object")
        for field_name, value in cast("dict[str, Any]", fields).items():
            # object.__setattr__ also works for frozen dataclasses and __slots__.
            object.__setattr__(obj, field_name, self._unmarshal(value))


def dumps(obj: object, *, indent: int | None = None, ensure_ascii: bool = False) -> str:
    """Serialize `obj` (and the graph it references) to native text.

    Raises:
        InvalidInputError: If the graph contains an unsupported object.
    """
    doc: list[Any] = NativeEncoder().marshal(obj)
    return json.dumps(doc, indent=indent, ensure_ascii=ensure_ascii)


def loads(text: str) -> Any:
    """Rebuild the object graph encoded in native text.

    Raises:
        NativeFormatError: If the text is malformed or names unknown types.
    """
    try:
        doc: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise NativeFormatError(f"Malformed input: {exc}") from exc
    return NativeDecoder().unmarshal(doc)


def encode(value: Any, *, options: int, settings: AttributeStore) -> str:
    """Encode a value (raw record or normalized data) as native text.

    Honours `PRETTY_PRINT` and `ESCAPE_UNICODE`.
    """
    indent: int | None = None
    if has_option(options, WriteOption.PRETTY_PRINT):
        configured: int | None = settings.get(SettingKey.INDENT)
        indent = 2 if configured is None else configured
    text: str = dumps(
        value,
        indent=indent,
        ensure_ascii=has_option(options, WriteOption.ESCAPE_UNICODE),
    )
    logger.trace("Native payload is %d characters", len(text))
    return text


__all__: list[str] = ["NativeDecoder", "NativeEncoder", "dumps", "encode", "loads"]
