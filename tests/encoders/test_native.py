# topmark:header:start
#
#   project      : OutputWriter
#   file         : test_native.py
#   file_relpath : tests/encoders/test_native.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the native serialization codec."""

from __future__ import annotations

import json
import threading
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from typing import Any

import pytest
from hypothesis import given

from outputwriter.config.settings import build_settings
from outputwriter.constants import NATIVE_SENTINEL
from outputwriter.core.errors import InvalidInputError, NativeFormatError
from outputwriter.core.options import WriteOption
from outputwriter.encoders import native
from outputwriter.encoders.native import dumps, loads
from tests.conftest import mark_property, parametrize
from tests.records import Bag, Color, Event, Label, Node, Pair, Point, Slotted, Stamp, Tag, shout
from tests.strategies import normalized_values


def test_document_layout() -> None:
    doc = json.loads(dumps({"a": 1}))
    assert doc == [
        NATIVE_SENTINEL,
        {"@t": "builtins/dict", "@id": 1, "@i": [["a", 1]]},
    ]


@parametrize("value", [None, True, 0, -7, 2.5, "", "text", "<tag>", "<@1@>", "<<"])
def test_scalars_roundtrip(value: Any) -> None:
    assert loads(dumps(value)) == value


def test_strings_starting_with_angle_bracket_are_escaped() -> None:
    assert json.loads(dumps("<@1@>"))[1] == "<<@1@>"


def test_containers_roundtrip_with_types() -> None:
    value = {"list": [1, 2], "tuple": (1, "a"), "set": {3}, "frozen": frozenset({4}), 5: None}
    restored = loads(dumps(value))
    assert restored == value
    assert type(restored["tuple"]) is tuple
    assert type(restored["frozen"]) is frozenset


def test_records_roundtrip_with_identity_of_type() -> None:
    value = [Point(1, 2), Label("hi", Color.GREEN), Pair("l", [1])]
    restored = loads(dumps(value))
    assert restored == value
    assert [type(v) for v in restored] == [Point, Label, Pair]
    assert restored[1].color is Color.GREEN


def test_slotted_and_subclassed_builtins() -> None:
    tag = Tag("urgent")
    tag.weight = 3  # type: ignore[attr-defined]
    bag = Bag([1, 2])
    bag.label = "b"  # type: ignore[attr-defined]
    restored_slotted, restored_tag, restored_bag = loads(dumps([Slotted(1, "x"), tag, bag]))

    assert (restored_slotted.a, restored_slotted.b) == (1, "x")
    assert type(restored_tag) is Tag and restored_tag == "urgent"
    assert restored_tag.weight == 3
    assert type(restored_bag) is Bag and restored_bag == [1, 2]
    assert restored_bag.label == "b"


def test_globals_roundtrip_by_name() -> None:
    assert loads(dumps([Point, shout, len])) == [Point, shout, len]


def test_shared_references_are_preserved() -> None:
    shared = [1, 2]
    restored = loads(dumps({"a": shared, "b": shared}))
    assert restored["a"] is restored["b"]


def test_cycles_are_rebuilt() -> None:
    root = Node("root")
    leaf = Node("leaf", parent=root)
    root.children.append(leaf)

    restored = loads(dumps(root))
    assert restored.children[0].parent is restored
    assert restored.children[0].name == "leaf"


def test_self_containing_list() -> None:
    looped: list[Any] = []
    looped.append(looped)
    restored = loads(dumps(looped))
    assert restored[0] is restored


@parametrize("value", [lambda: 1, (x for x in ()), json])
def test_unsupported_objects(value: Any) -> None:
    with pytest.raises(InvalidInputError):
        dumps(value)


def test_locally_defined_class_is_rejected() -> None:
    class Local:
        pass

    with pytest.raises(InvalidInputError, match="not reachable by name"):
        dumps(Local())


@parametrize(
    "text",
    [
        "not json",
        "[]",
        '["wrong", 1]',
        f'["{NATIVE_SENTINEL}", {{"@id": 1}}]',
        f'["{NATIVE_SENTINEL}", {{"@t": "no_such_module_xyz/Thing", "@id": 1}}]',
        f'["{NATIVE_SENTINEL}", {{"@t": "builtins/NoSuchName"}}]',
        f'["{NATIVE_SENTINEL}", "<@9@>"]',
        f'["{NATIVE_SENTINEL}", {{"@t": "builtins/list", "@id": "x"}}]',
        f'["{NATIVE_SENTINEL}", {{"@t": "builtins/dict", "@id": 1, "@i": [[1]]}}]',
        f'["{NATIVE_SENTINEL}", [1, 2]]',
        f'["{NATIVE_SENTINEL}", {{"@t": "builtins/bytes", "@x": "zz"}}]',
        f'["{NATIVE_SENTINEL}", {{"@t": "decimal/Decimal", "@id": 1, "@r": [1]}}]',
    ],
)
def test_malformed_documents(text: str) -> None:
    with pytest.raises(NativeFormatError):
        loads(text)


def test_encode_honours_options() -> None:
    settings = build_settings()
    compact = native.encode({"k": "é"}, options=0, settings=settings)
    assert "\n" not in compact and "é" in compact

    pretty = native.encode(
        {"k": "é"},
        options=WriteOption.PRETTY_PRINT | WriteOption.ESCAPE_UNICODE,
        settings=settings,
    )
    assert pretty.startswith('[\n  "@outputwriter:1@"')
    assert "\\u00e9" in pretty
    assert loads(pretty) == {"k": "é"}


@mark_property
@given(value=normalized_values)
def test_normalized_values_roundtrip(value: Any) -> None:
    assert loads(dumps(value)) == value


@parametrize(
    "value",
    [
        date(2024, 1, 2),
        time(12, 30, 5, 7),
        datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=2))),
        timedelta(days=3, seconds=4),
        Decimal("12.50"),
        complex(1, -2),
        b"\x00raw\xff",
    ],
)
def test_objects_with_internal_state_roundtrip(value: Any) -> None:
    restored = loads(dumps(value))
    assert restored == value
    assert type(restored) is type(value)


def test_reduced_object_layout() -> None:
    payload = json.loads(dumps(Decimal("1.5")))[1]
    assert payload["@t"] == "decimal/Decimal"
    assert payload["@r"][0] == {"@t": "decimal/Decimal"}
    assert payload["@r"][1]["@i"] == ["1.5"]


def test_record_with_date_field_roundtrips() -> None:
    event = Event("launch", date(2024, 1, 2))
    restored = loads(dumps(event))
    assert restored == event
    assert type(restored.when) is date


def test_slotted_dataclass_restores_through_setstate() -> None:
    stamp = Stamp("deploy", datetime(2024, 5, 6, 7, 8))
    assert loads(dumps(stamp)) == stamp


def test_shared_bytearray_keeps_identity() -> None:
    buffer = bytearray(b"ab")
    restored = loads(dumps([buffer, buffer]))
    assert restored[0] == bytearray(b"ab")
    assert restored[0] is restored[1]


def test_objects_without_recoverable_state_are_rejected() -> None:
    with pytest.raises(InvalidInputError):
        dumps(threading.Lock())


def test_encode_honours_zero_indent() -> None:
    settings = build_settings({"indent": 0})
    text = native.encode([1], options=WriteOption.PRETTY_PRINT, settings=settings)
    assert text.startswith('[\n"@outputwriter:1@",\n{\n"@t": "builtins/list",\n')
    assert loads(text) == [1]
