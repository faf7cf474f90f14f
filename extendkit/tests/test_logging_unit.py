"""Structured logging helpers."""

from __future__ import annotations

import json
import logging
import sys

from extendkit.base.log_support import JsonFormatter
from extendkit.base.logging import LogContext, configure_logger, get_logger, log_event
from extendkit.tests.utils import assert_true, log_lines


def test_env_level_filters_records(monkeypatch, capsys):
    monkeypatch.setenv("EXTENDKIT_LOG_LEVEL", "ERROR")
    logger = get_logger("extendkit.test.env")
    logger.warning("quiet")
    logger.error("loud")
    lines = log_lines(capsys.readouterr().err)
    assert [line["msg"] for line in lines] == ["loud"]  # nosec B101
    assert lines[0]["level"] == "ERROR"  # nosec B101
    assert lines[0]["logger"] == "extendkit.test.env"  # nosec B101


def test_log_event_hoists_fields(capsys):
    logger = get_logger("extendkit.test.event")
    log_event(
        logger,
        "registry.register",
        LogContext(type_name="int", operation="register", extra={"note": None}),
        level=logging.WARNING,
        names=["double"],
        skipped=None,
    )
    (data,) = log_lines(capsys.readouterr().err)
    assert data["event"] == "registry.register"  # nosec B101
    assert data["type_name"] == "int" and data["operation"] == "register"  # nosec B101
    assert data["names"] == ["double"]  # nosec B101
    assert "skipped" not in data and "note" not in data and "layers" not in data  # nosec B101
    assert "msg" not in data  # nosec B101


def test_log_event_keep_none(capsys):
    logger = get_logger("extendkit.test.keep")
    log_event(logger, "keep.none", level=logging.ERROR, keep_none=True, value=None)
    (data,) = log_lines(capsys.readouterr().err)
    assert "value" in data and data["value"] is None  # nosec B101


def test_log_event_below_level_is_dropped(capsys):
    logger = get_logger("extendkit.test.drop")
    log_event(logger, "too.quiet", level=logging.DEBUG)
    assert log_lines(capsys.readouterr().err) == []  # nosec B101


def test_child_loggers_do_not_duplicate(capsys):
    first = get_logger("extendkit.test.dup")
    second = get_logger("extendkit.test.dup")
    assert first is second  # nosec B101
    second.error("once")
    lines = [line for line in log_lines(capsys.readouterr().err) if line.get("msg") == "once"]
    assert_true(len(lines) == 1, f"expected a single emission, got {lines}")


def test_configure_logger_writes_file(tmp_path):
    path = tmp_path / "logs" / "engine.log"
    child = get_logger("extendkit.test.file")
    base = configure_logger(level="INFO", file_path=str(path))
    try:
        log_event(child, "file.event", level=logging.INFO, answer=42)
        for handler in base.handlers:
            handler.flush()
        lines = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
        assert lines[-1]["event"] == "file.event" and lines[-1]["answer"] == 42  # nosec B101
    finally:
        configure_logger(file_path=None)
    assert not any(getattr(h, "_extendkit_file_handler", False) for h in base.handlers)  # nosec B101


def test_json_formatter_keeps_plain_messages_and_exceptions():
    formatter = JsonFormatter()
    record = logging.LogRecord("extendkit.x", logging.INFO, __file__, 1, "plain %s", ("text",), None)
    data = json.loads(formatter.format(record))
    assert data["msg"] == "plain text"  # nosec B101
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord("extendkit.x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
    data = json.loads(formatter.format(record))
    assert "ValueError: boom" in data["exc"]  # nosec B101
