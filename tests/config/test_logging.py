# topmark:header:start
#
#   project      : OutputWriter
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the logging setup."""

from __future__ import annotations

import logging
import sys

import pytest

from outputwriter.config.logging import (
    LOG_FORMAT,
    TRACE_LEVEL,
    ChalkFormatter,
    OutputWriterLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from outputwriter.constants import LOG_LEVEL_ENV_VAR
from tests.conftest import parametrize


@parametrize(
    ("raw", "expected"),
    [("trace", TRACE_LEVEL), ("DEBUG", logging.DEBUG), (" warn ", logging.WARNING), ("15", 15)],
)
def test_env_log_level(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert resolve_env_log_level() == expected


def test_env_log_level_unset_or_unknown(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_env_log_level() is None
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "loud")
    assert resolve_env_log_level() is None


def test_loggers_have_trace() -> None:
    logger = get_logger("outputwriter.test")
    assert isinstance(logger, OutputWriterLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_setup_logging_installs_single_stderr_handler() -> None:
    setup_logging(level=logging.INFO)
    try:
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
    finally:
        setup_logging(level=TRACE_LEVEL)


def _record(level: int) -> logging.LogRecord:
    return logging.LogRecord("outputwriter.test", level, __file__, 1, "hello", None, None)


def test_plain_formatter_leaves_records_uncolored() -> None:
    formatter = ChalkFormatter(LOG_FORMAT, use_color=False)
    assert formatter.format(_record(logging.WARNING)) == "[WARNING] hello"


def test_setup_logging_without_color() -> None:
    setup_logging(level=logging.WARNING, color=False)
    try:
        formatter = logging.getLogger().handlers[0].formatter
        assert isinstance(formatter, ChalkFormatter)
        assert formatter.use_color is False
    finally:
        setup_logging(level=TRACE_LEVEL)
