# topmark:header:start
#
#   project      : OutputWriter
#   file         : test_writer_property.py
#   file_relpath : tests/test_writer_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property tests for engine-level invariants."""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from outputwriter.core.errors import UnsupportedShapeError
from outputwriter.core.options import WriteOption
from outputwriter.encoders.native import loads
from outputwriter.writer import OutputWriter
from tests.conftest import mark_property
from tests.strategies import normalized_values

options: st.SearchStrategy[int] = st.integers(min_value=0, max_value=31)


@mark_property
@given(value=normalized_values.filter(lambda v: v is not None), opts=options)
def test_output_is_stable_across_calls(value: Any, opts: int) -> None:
    writer = OutputWriter(value, "json")
    writer.set_options(opts)
    first: str = writer.output()
    writer.set_options(opts ^ int(WriteOption.SORT_KEYS))
    assert writer.output() == first


@mark_property
@given(value=normalized_values.filter(lambda v: v is not None))
def test_json_output_decodes_to_subject(value: Any) -> None:
    writer = OutputWriter(value, "json")
    assert json.loads(writer.output()) == writer.subject


@mark_property
@given(value=normalized_values.filter(lambda v: v is not None))
def test_native_output_decodes_to_subject(value: Any) -> None:
    assert loads(OutputWriter(value, "native").output()) == value


def _strings(value: Any) -> Iterator[str]:
    if isinstance(value, str):
        yield value
    elif isinstance(value, dict):
        for key, item in value.items():
            yield key
            yield from _strings(item)
    elif isinstance(value, list):
        for item in value:
            yield from _strings(item)


def _xml_safe(text: str) -> bool:
    return all(
        ch in "\t\n\r" or 0x20 <= ord(ch) <= 0xD7FF or 0xE000 <= ord(ch) <= 0xFFFD
        or ord(ch) > 0xFFFF
        for ch in text
    )


@mark_property
@given(value=normalized_values.filter(lambda v: v is not None))
def test_markup_output_is_well_formed_or_rejected(value: Any) -> None:
    writer = OutputWriter(value, "xml")
    if not all(_xml_safe(text) for text in _strings(value)):
        with pytest.raises(UnsupportedShapeError):
            writer.output()
        return
    text: str = writer.output()
    declaration, body = text.split("\n", 1)
    assert declaration == '<?xml version="1.0" encoding="utf-8"?>'
    assert ET.fromstring(body).tag == "root"
