# topmark:header:start
#
#   project      : OutputWriter
#   file         : console.py
#   file_relpath : src/outputwriter/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console for messages addressed to the person running the CLI.

Diagnostics go through `logging`; generated documents go through an
[`OutputWriter`][outputwriter.writer.OutputWriter] sink. Everything else
(listings, version banners, error reports) is written via a console kept in
``ctx.obj["console"]``, so tests and embedders can swap it out.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """What CLI commands need from a console."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write `text` to the output stream."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write `text` to the error stream."""
        ...

    def styled(self, text: str, **style: Any) -> str:
        """Return `text` with `style` applied, if the console styles output."""
        ...


class ClickConsole:
    """A `ConsoleLike` writing through `click.echo`.

    Args:
        enable_color (bool): Keep ANSI styling in the written text.
        out (TextIO | None): Output stream; None means Click's stdout.
        err (TextIO | None): Error stream; None means `sys.stderr`.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self._out: TextIO | None = out
        self._err: TextIO = err if err is not None else sys.stderr

    def _write(self, stream: TextIO | None, text: str, nl: bool) -> None:
        click.echo(text, file=stream, nl=nl, color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write `text` to the output stream."""
        self._write(self._out, text, nl)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write `text` to the error stream, in bright red."""
        self._write(self._err, self.styled(text, fg="bright_red"), nl)

    def styled(self, text: str, **style: Any) -> str:
        """Return `text` passed through `click.style`, or as is without color."""
        return click.style(text, **style) if self.enable_color else text
