# topmark:header:start
#
#   project      : OutputWriter
#   file         : __main__.py
#   file_relpath : src/outputwriter/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running OutputWriter via ``python -m outputwriter``.

Equivalent to running the ``outputwriter`` console script; it delegates to
:func:`outputwriter.cli.main.cli`.

Examples:
    Convert a JSON document to XML::

        python -m outputwriter convert data.json -f xml
"""

from __future__ import annotations

from outputwriter.cli.main import cli

if __name__ == "__main__":
    cli()
