# topmark:header:start
#
#   project      : OutputWriter
#   file         : keys.py
#   file_relpath : src/outputwriter/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical setting keys and their defaults.

These keys are the contract between the config file (``[outputwriter]`` in
``outputwriter.toml`` or ``[tool.outputwriter]`` in ``pyproject.toml``), caller
overrides, and the encoders that read them from the engine's settings store.

Notes:
    - Values must match user-facing TOML keys exactly.
    - Keep this module behavior-free; it is a pure namespace for constants.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Final

from outputwriter.constants import XML_DEFAULT_ENCODING, XML_DEFAULT_VERSION


class SettingKey:
    """Canonical setting keys held in the engine's `AttributeStore`."""

    # Markup
    ROOT_TAG: Final[str] = "root_tag"
    ITEM_TAG: Final[str] = "item_tag"
    XML_VERSION: Final[str] = "xml_version"
    XML_ENCODING: Final[str] = "xml_encoding"

    # Tabular
    CSV_DELIMITER: Final[str] = "csv_delimiter"
    CSV_LINE_TERMINATOR: Final[str] = "csv_line_terminator"

    # Shared
    INDENT: Final[str] = "indent"
    DEFAULT_FORMAT: Final[str] = "default_format"


DEFAULT_SETTINGS: Final[MappingProxyType[str, Any]] = MappingProxyType(
    {
        SettingKey.ROOT_TAG: "root",
        SettingKey.ITEM_TAG: "item",
        SettingKey.XML_VERSION: XML_DEFAULT_VERSION,
        SettingKey.XML_ENCODING: XML_DEFAULT_ENCODING,
        SettingKey.CSV_DELIMITER: ",",
        SettingKey.CSV_LINE_TERMINATOR: "\n",
        SettingKey.INDENT: 2,
        SettingKey.DEFAULT_FORMAT: "markup",
    }
)

# Expected Python type per key, used to validate config files and overrides.
SETTING_TYPES: Final[MappingProxyType[str, type]] = MappingProxyType(
    {key: type(value) for key, value in DEFAULT_SETTINGS.items()}
)
