"""Tests for halfqwerty.log: TRACE level and CLI logging setup."""

from __future__ import annotations

import logging

import pytest

from halfqwerty.log import LOGGER_NAME, TRACE, reset_logging, setup_logging


@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    reset_logging()


def test_trace_level_registered():
    assert logging.getLevelName(TRACE) == "TRACE"
    assert hasattr(logging.getLogger("halfqwerty.test"), "trace")


def test_trace_emitted_only_when_enabled(caplog):
    log = logging.getLogger("halfqwerty.test.trace")
    with caplog.at_level(logging.DEBUG, logger="halfqwerty.test.trace"):
        log.trace("hidden")  # type: ignore[attr-defined]
    assert "hidden" not in caplog.text
    with caplog.at_level(TRACE, logger="halfqwerty.test.trace"):
        log.trace("shown %d", 5)  # type: ignore[attr-defined]
    assert "shown 5" in caplog.text


def test_setup_is_idempotent(tmp_path):
    log_file = str(tmp_path / "hq.log")
    first = setup_logging(log_file=log_file)
    second = setup_logging(log_file=log_file)
    assert first is second
    assert first.name == LOGGER_NAME
    assert len(first.handlers) == 2


def test_file_receives_debug(tmp_path):
    log_file = tmp_path / "nested" / "hq.log"
    log = setup_logging(log_file=str(log_file))
    log.setLevel(logging.DEBUG)
    logging.getLogger("halfqwerty.core.context").debug("chord opened")
    for handler in log.handlers:
        handler.flush()
    assert "chord opened" in log_file.read_text(encoding="utf-8")


def test_debug_enables_trace(tmp_path):
    log = setup_logging(debug=True, log_file=str(tmp_path / "hq.log"))
    assert log.isEnabledFor(TRACE)


def test_reset_removes_handlers(tmp_path):
    setup_logging(log_file=str(tmp_path / "hq.log"))
    reset_logging()
    assert logging.getLogger(LOGGER_NAME).handlers == []
