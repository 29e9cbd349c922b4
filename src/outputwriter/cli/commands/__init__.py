# topmark:header:start
#
#   project      : OutputWriter
#   file         : __init__.py
#   file_relpath : src/outputwriter/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the `outputwriter` CLI."""
