# topmark:header:start
#
#   project      : OutputWriter
#   file         : __init__.py
#   file_relpath : src/outputwriter/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across OutputWriter.

The ``outputwriter.core`` package provides small, reusable building blocks that
are safe to import from anywhere in the codebase (engine, encoders, CLI, tests)
without pulling in console or Click concerns.

Included modules:

- ``errors``
  The exception taxonomy raised by the store, the engine and the encoders.

- ``store``
  `AttributeStore`, the generic string-keyed attribute container.

- ``formats``
  The closed `OutputFormat` vocabulary and its case-insensitive parser.

- ``options``
  The `WriteOption` bitmask understood by the encoders.

- ``values``
  Record projection and value normalization (the value model fed to encoders).

- ``enum_mixins``
  Typing-friendly Enum utilities (keyed string enums with aliases).

Design goals:

- Keep this package free of UI dependencies and side effects.
- Prefer small, well-typed helpers over framework-specific utilities.
"""

from __future__ import annotations
