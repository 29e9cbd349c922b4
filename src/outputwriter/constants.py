# topmark:header:start
#
#   project      : OutputWriter
#   file         : constants.py
#   file_relpath : src/outputwriter/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OutputWriter Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

OUTPUTWRITER: str = "outputwriter"

try:
    OUTPUTWRITER_VERSION: str = get_version(OUTPUTWRITER)
except PackageNotFoundError:  # running from a source checkout
    OUTPUTWRITER_VERSION = "0.0.0"

# Config discovery
CONFIG_FILE_NAME: str = "outputwriter.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
CONFIG_TABLE: str = "outputwriter"

# Environment
LOG_LEVEL_ENV_VAR: str = "OUTPUTWRITER_LOG_LEVEL"

# Markup document header
XML_DEFAULT_VERSION: str = "1.0"
XML_DEFAULT_ENCODING: str = "utf-8"

# Native serialization document marker (bump on incompatible layout changes)
NATIVE_SENTINEL: str = "@outputwriter:1@"
