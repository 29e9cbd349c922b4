# topmark:header:start
#
#   project      : OutputWriter
#   file         : sinks.py
#   file_relpath : src/outputwriter/sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Emission sinks.

A sink is anything with a ``write(text)`` method. `OutputWriter.emit()` writes
the generated document to its sink exactly as generated (no newline is added).
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO, runtime_checkable

import click


@runtime_checkable
class TextSink(Protocol):
    """Protocol for objects accepting a single string write."""

    def write(self, text: str, /) -> object:
        """Write `text` to the sink."""
        ...


class StdoutSink:
    """Write to the process standard output.

    `sys.stdout` is looked up on every write, so redirections installed after
    construction (e.g. by test harnesses) are honoured.
    """

    def write(self, text: str) -> int:
        """Write `text` to stdout and flush."""
        written: int = sys.stdout.write(text)
        sys.stdout.flush()
        return written


class ClickSink:
    """Write through `click.echo`, which handles Windows consoles and broken pipes.

    Args:
        file (TextIO | None): Target stream. Defaults to Click's stdout.
    """

    def __init__(self, file: TextIO | None = None) -> None:
        self.file = file

    def write(self, text: str) -> None:
        """Echo `text` without appending a newline."""
        click.echo(text, nl=False, file=self.file)
