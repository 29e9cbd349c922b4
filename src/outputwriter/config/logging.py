# topmark:header:start
#
#   project      : OutputWriter
#   file         : logging.py
#   file_relpath : src/outputwriter/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for OutputWriter: a TRACE level, a logger class and colored stderr output.

Modules obtain their logger with ``logger = get_logger(__name__)`` and may call
``logger.trace(...)`` for very chatty diagnostics. Nothing is printed until
[`setup_logging`][outputwriter.config.logging.setup_logging] installs a
handler; the CLI does so once per invocation.

The level comes from ``-v``/``-q`` on the command line, or from the
``OUTPUTWRITER_LOG_LEVEL`` environment variable (a level name or a number),
which takes precedence.

Log records always go to stderr: stdout carries the generated documents.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from outputwriter.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class OutputWriterLogger(logging.Logger):
    """Logger with a `trace()` method for the TRACE level (below DEBUG)."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(OutputWriterLogger)

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Highest threshold first; a record takes the first style whose threshold it reaches.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright.bold),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)

_NAME_TO_LEVEL: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
}


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity with `yachalk`.

    Args:
        fmt (str): The log format string.
        use_color (bool): Emit ANSI colors. When False, records are left plain.
    """

    def __init__(self, fmt: str, *, use_color: bool = True) -> None:
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format `record`, colored by its level when color is enabled."""
        message: str = super().format(record)
        if not self.use_color:
            return message
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``OUTPUTWRITER_LOG_LEVEL``, or None if unset or unknown."""
    raw: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw or not raw.strip():
        return None
    token: str = raw.strip().upper()
    if token.isdigit():
        return int(token)
    return _NAME_TO_LEVEL.get(token)


def setup_logging(level: int | None = None, *, color: bool = True) -> None:
    """Install a single colored stderr handler on the root logger.

    Args:
        level (int | None): The root level. ``None`` consults the environment and
            falls back to CRITICAL.
        color (bool): Color records with ANSI escapes.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    # Below INFO, show where each record came from
    handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT, use_color=color)
    )
    root.addHandler(handler)


def get_logger(name: str) -> OutputWriterLogger:
    """Return the `OutputWriterLogger` called `name`."""
    return cast("OutputWriterLogger", logging.getLogger(name))
