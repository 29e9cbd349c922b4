# topmark:header:start
#
#   project      : OutputWriter
#   file         : options.py
#   file_relpath : src/outputwriter/core/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatting flags understood by the encoders.

The engine stores the options bitmask as a plain ``int`` and never inspects
it; each encoder tests the bits it cares about and ignores the rest.
"""

from __future__ import annotations

from enum import IntFlag


class WriteOption(IntFlag):
    """Encoder formatting flags.

    Attributes:
        NONE: No flags (compact output).
        PRETTY_PRINT: Indent nested structures (json, markup, native).
        SORT_KEYS: Sort mapping keys (json) and columns (tabular).
        ESCAPE_UNICODE: Emit non-ASCII characters as ``\\uXXXX`` escapes (json, native).
        OMIT_HEADER: Do not write the header row (tabular).
        OMIT_DECLARATION: Do not write the ``<?xml ...?>`` declaration (markup).
    """

    NONE = 0
    PRETTY_PRINT = 1
    SORT_KEYS = 2
    ESCAPE_UNICODE = 4
    OMIT_HEADER = 8
    OMIT_DECLARATION = 16


def has_option(options: int, flag: WriteOption) -> bool:
    """Return True if `flag` is set in the `options` bitmask."""
    return bool(options & flag)
