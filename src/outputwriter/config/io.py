# topmark:header:start
#
#   project      : OutputWriter
#   file         : io.py
#   file_relpath : src/outputwriter/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load, discover and render TOML configuration.

Settings live in one of two places:
- the ``[outputwriter]`` table of an ``outputwriter.toml`` file, or
- the ``[tool.outputwriter]`` table of a ``pyproject.toml`` file.

Parsing is done with `tomlkit` and returned as plain `dict` structures. Unlike
lookups during discovery, an explicitly requested file that cannot be read or
parsed raises [`ConfigError`][outputwriter.core.errors.ConfigError].
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from outputwriter.config.keys import SETTING_TYPES
from outputwriter.config.logging import get_logger
from outputwriter.constants import CONFIG_FILE_NAME, CONFIG_TABLE, PYPROJECT_FILE_NAME
from outputwriter.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from outputwriter.config.logging import OutputWriterLogger

logger: OutputWriterLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_table(doc: TomlTable, *, pyproject: bool) -> TomlTable | None:
    """Return the OutputWriter table of a parsed document, or None if absent."""
    table: Any
    if pyproject:
        tool: Any = doc.get("tool")
        table = tool.get(CONFIG_TABLE) if isinstance(tool, Mapping) else None
    else:
        table = doc.get(CONFIG_TABLE)
    if table is None:
        return None
    if not isinstance(table, Mapping):
        raise ConfigError(f"[{CONFIG_TABLE}] must be a table, got {type(table).__name__}")
    return dict(cast("Mapping[str, Any]", table))


def validate_settings(values: Mapping[str, Any], *, source: str) -> TomlTable:
    """Validate setting values against their expected types.

    Unknown keys are logged and dropped. Booleans are rejected where integers
    are expected.

    Args:
        values (Mapping[str, Any]): Raw settings.
        source (str): Human-readable origin used in messages.

    Returns:
        TomlTable: The known, validated settings.

    Raises:
        ConfigError: If a known key carries a value of the wrong type.
    """
    out: TomlTable = {}
    for key, value in values.items():
        expected: type | None = SETTING_TYPES.get(key)
        if expected is None:
            logger.warning("Ignoring unknown setting '%s' in %s", key, source)
            continue
        if (isinstance(value, bool) and expected is not bool) or not isinstance(value, expected):
            raise ConfigError(
                f"Setting '{key}' in {source} must be of type {expected.__name__}, "
                f"got {type(value).__name__}"
            )
        out[key] = value
    return out


def load_config_file(path: Path) -> TomlTable:
    """Load validated settings from an ``outputwriter.toml`` or ``pyproject.toml``.

    A ``pyproject.toml`` (by file name) is read from ``[tool.outputwriter]``;
    any other file from ``[outputwriter]``. A file without the table yields an
    empty dict.

    Raises:
        ConfigError: If the file is unreadable, malformed or carries invalid values.
    """
    is_pyproject: bool = path.name == PYPROJECT_FILE_NAME
    doc: TomlTable = load_toml_dict(path)
    table: TomlTable | None = extract_table(doc, pyproject=is_pyproject)
    if table is None:
        logger.debug("No OutputWriter table in %s", path)
        return {}
    logger.debug("Loaded %d setting(s) from %s", len(table), path)
    return validate_settings(table, source=str(path))


def discover_config(start: Path) -> Path | None:
    """Find the nearest config file, walking up from `start`.

    In each directory ``outputwriter.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.outputwriter]`` table.
    Unreadable candidates are skipped during discovery.

    Args:
        start (Path): File or directory to start from.

    Returns:
        Path | None: The config file path, or None if nothing was found.
    """
    current: Path = start.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Discovered config file %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            try:
                if extract_table(load_toml_dict(pyproject), pyproject=True) is not None:
                    logger.debug("Discovered config table in %s", pyproject)
                    return pyproject
            except ConfigError as exc:
                logger.warning("Skipping %s during discovery: %s", pyproject, exc)
    return None


def render_settings_toml(settings: Mapping[str, Any], *, for_pyproject: bool = False) -> str:
    """Render settings as a TOML document.

    Args:
        settings (Mapping[str, Any]): The settings to render (``None`` values are omitted).
        for_pyproject (bool): Nest under ``[tool.outputwriter]`` instead of ``[outputwriter]``.

    Returns:
        str: TOML document text.
    """
    table = tomlkit.table()
    for key, value in settings.items():
        if value is None:
            continue
        table.add(key, value)
    doc: tomlkit.TOMLDocument = tomlkit.document()
    if for_pyproject:
        tool = tomlkit.table(is_super_table=True)
        tool.add(CONFIG_TABLE, table)
        doc.add("tool", tool)
    else:
        doc.add(CONFIG_TABLE, table)
    return tomlkit.dumps(doc)
