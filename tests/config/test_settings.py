# topmark:header:start
#
#   project      : OutputWriter
#   file         : test_settings.py
#   file_relpath : tests/config/test_settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for building the encoder settings store."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from outputwriter.config.keys import DEFAULT_SETTINGS, SettingKey
from outputwriter.config.settings import build_settings, parse_setting_assignments
from outputwriter.core.errors import ConfigError, InvalidKeyError

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    assert build_settings().get() == dict(DEFAULT_SETTINGS)


def test_layering_defaults_file_overrides(tmp_path: Path) -> None:
    path = tmp_path / "outputwriter.toml"
    path.write_text('[outputwriter]\nroot_tag = "file"\nindent = 8\n', encoding="utf-8")
    settings = build_settings({"root_tag": "override"}, config_path=path)
    assert settings.get(SettingKey.ROOT_TAG) == "override"
    assert settings.get(SettingKey.INDENT) == 8
    assert settings.get(SettingKey.ITEM_TAG) == "item"


def test_none_override_unsets_key() -> None:
    settings = build_settings({"xml_version": None})
    assert not settings.exists(SettingKey.XML_VERSION)


def test_invalid_override_key_leaves_no_override() -> None:
    with pytest.raises(InvalidKeyError):
        build_settings({"": 1})


def test_parse_assignments() -> None:
    assert parse_setting_assignments(["indent=4", "csv_delimiter=\\t", " root_tag =doc"]) == {
        "indent": 4,
        "csv_delimiter": "\t",
        "root_tag": "doc",
    }


@pytest.mark.parametrize("item", ["indent", "=x", "indent=four"])
def test_parse_assignments_rejects_malformed(item: str) -> None:
    with pytest.raises(ConfigError):
        parse_setting_assignments([item])
