# topmark:header:start
#
#   project      : OutputWriter
#   file         : __init__.py
#   file_relpath : src/outputwriter/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for OutputWriter.

Modules:

- ``logging``: TRACE-aware logger class, colored formatter, env-driven level.
- ``keys``: canonical setting keys (`SettingKey`) and their defaults.
- ``io``: TOML config discovery/loading/rendering with `tomlkit`.
- ``settings``: merge defaults, config files and overrides into an
  [`AttributeStore`][outputwriter.core.store.AttributeStore].

This package module performs no imports itself so that
``outputwriter.config.logging`` can be imported from the core without cycles.
"""

from __future__ import annotations
