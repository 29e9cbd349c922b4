# topmark:header:start
#
#   project      : OutputWriter
#   file         : settings.py
#   file_relpath : src/outputwriter/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build the encoder settings store.

Layering (later layers win):

1. built-in defaults ([`DEFAULT_SETTINGS`][outputwriter.config.keys.DEFAULT_SETTINGS])
2. an optional TOML config file
3. caller overrides

Each layer is imported into the store all-or-nothing, so an invalid key in
the overrides leaves no override applied.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from outputwriter.config.io import load_config_file, validate_settings
from outputwriter.config.keys import DEFAULT_SETTINGS
from outputwriter.core.errors import ConfigError
from outputwriter.core.store import AttributeStore

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


def build_settings(
    overrides: Mapping[str, Any] | None = None,
    *,
    config_path: Path | None = None,
) -> AttributeStore:
    """Return a settings store from defaults, a config file and overrides.

    Args:
        overrides (Mapping[str, Any] | None): Caller-supplied values. ``None``
            values reset a key to "unset". Keys not known to any encoder are
            kept as-is.
        config_path (Path | None): Optional config file to layer over the defaults.

    Returns:
        AttributeStore: The merged settings.

    Raises:
        ConfigError: If the config file is unreadable or invalid.
        InvalidInputError: If `overrides` is not a mapping.
        InvalidKeyError: If `overrides` carries an empty or non-string key.
    """
    store = AttributeStore(DEFAULT_SETTINGS)
    if config_path is not None:
        store.import_(load_config_file(config_path))
    if overrides is not None:
        store.import_(overrides)
    return store


def parse_setting_assignments(assignments: list[str] | tuple[str, ...]) -> dict[str, Any]:
    """Parse ``KEY=VALUE`` strings into typed settings.

    Values of known integer settings are converted with ``int()``; everything
    else stays a string. The escapes ``\\t`` and ``\\n`` are honoured so tab-separated
    output can be requested from a shell.

    Raises:
        ConfigError: On a malformed assignment or an invalid value.
    """
    raw: dict[str, Any] = {}
    for item in assignments:
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ConfigError(f"Expected KEY=VALUE, got '{item}'")
        decoded: str = value.replace("\\t", "\t").replace("\\n", "\n")
        default: Any = DEFAULT_SETTINGS.get(key)
        if isinstance(default, int) and not isinstance(default, bool):
            try:
                raw[key] = int(decoded)
            except ValueError as exc:
                raise ConfigError(f"Setting '{key}' expects an integer, got '{value}'") from exc
        else:
            raw[key] = decoded
    return validate_settings(raw, source="command line")
