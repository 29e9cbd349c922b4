# topmark:header:start
#
#   project      : OutputWriter
#   file         : __init__.py
#   file_relpath : src/outputwriter/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command-line interface for OutputWriter.

The entry point is [`cli`][outputwriter.cli.main.cli]; subcommands live in
`outputwriter.cli.commands`.
"""
