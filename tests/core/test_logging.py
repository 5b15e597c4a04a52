"""
Tests for core/logging module

Formatters, logger adapter, correlation context and LogTimer.
"""

import json
import logging
from unittest.mock import MagicMock

import pytest

from exam_coverage.core.logging import (
    REDACTED,
    DevelopmentFormatter,
    LoggerAdapter,
    LogTimer,
    StructuredFormatter,
    clear_context,
    get_logger,
    request_id_var,
    run_id_var,
    set_request_id,
    set_run_id,
    setup_logging,
)


def _record(msg="Test message", level=logging.INFO, exc_info=None):
    return logging.LogRecord(
        name="test.module",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


@pytest.fixture(autouse=True)
def reset_context():
    clear_context()
    yield
    clear_context()


class TestStructuredFormatter:
    def test_format_basic_log(self):
        parsed = json.loads(StructuredFormatter().format(_record()))
        assert parsed["level"] == "INFO"
        assert parsed["message"] == "Test message"
        assert parsed["logger"] == "test.module"
        assert parsed["timestamp"].endswith("Z")
        assert "extra" not in parsed

    def test_extra_fields_are_nested(self):
        record = _record()
        record.file_count = 3
        parsed = json.loads(StructuredFormatter().format(record))
        assert parsed["extra"]["file_count"] == 3

    def test_credentials_are_redacted(self):
        record = _record()
        record.api_key = "AIza-secret"
        record.payload = {"credential": "AIza-secret", "model": "gemini-3-pro-preview"}
        parsed = json.loads(StructuredFormatter().format(record))
        assert parsed["extra"]["api_key"] == REDACTED
        assert parsed["extra"]["payload"]["credential"] == REDACTED
        assert parsed["extra"]["payload"]["model"] == "gemini-3-pro-preview"

    def test_non_ascii_kept(self):
        parsed_text = StructuredFormatter().format(_record(msg="试卷分析"))
        assert "试卷分析" in parsed_text

    def test_correlation_ids(self):
        set_request_id("req-123")
        set_run_id("run-456")
        parsed = json.loads(StructuredFormatter().format(_record()))
        assert parsed["request_id"] == "req-123"
        assert parsed["run_id"] == "run-456"

    def test_format_with_exception(self):
        try:
            raise ValueError("Test exception")
        except ValueError:
            import sys
            exc_info = sys.exc_info()

        parsed = json.loads(StructuredFormatter().format(_record(level=logging.ERROR, exc_info=exc_info)))
        assert parsed["exception"]["type"] == "ValueError"
        assert parsed["exception"]["message"] == "Test exception"


class TestDevelopmentFormatter:
    def test_format_basic_log(self):
        result = DevelopmentFormatter().format(_record())
        assert "Test message" in result
        assert "INFO" in result

    def test_context_shown_shortened(self):
        set_request_id("abcdef0123456789")
        result = DevelopmentFormatter().format(_record())
        assert "req:abcdef01" in result


class TestLoggerAdapter:
    def test_process_adds_bound_context(self):
        adapter = LoggerAdapter(MagicMock(), extra={"component": "analysis_client"})
        msg, kwargs = adapter.process("Test message", {"extra": {}})
        assert msg == "Test message"
        assert kwargs["extra"]["component"] == "analysis_client"

    def test_call_site_extra_wins(self):
        adapter = LoggerAdapter(MagicMock(), extra={"component": "a"})
        _, kwargs = adapter.process("m", {"extra": {"component": "b", "user": "alice"}})
        assert kwargs["extra"] == {"component": "b", "user": "alice"}

    def test_get_logger(self):
        logger = get_logger("exam_coverage.test", component="tests")
        assert isinstance(logger, LoggerAdapter)
        assert logger.extra == {"component": "tests"}


class TestSetupLogging:
    def test_json_console(self):
        setup_logging(level="DEBUG", use_json=True)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)

    def test_log_file_is_json(self, tmp_path):
        log_file = tmp_path / "logs" / "app.jsonl"
        setup_logging(log_file=log_file)
        logging.getLogger("exam_coverage.test").info("written")
        for handler in logging.getLogger().handlers:
            handler.flush()
        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["message"] == "written"


class TestContext:
    def test_clear_context(self):
        set_request_id("r")
        set_run_id("x")
        clear_context()
        assert request_id_var.get() is None
        assert run_id_var.get() is None


class TestLogTimer:
    def test_success(self):
        logger = MagicMock()
        with LogTimer(logger, "exam analysis") as timer:
            pass
        assert timer.duration is not None
        messages = [c.args[1] for c in logger.log.call_args_list]
        assert messages == ["Starting: exam analysis", "Completed: exam analysis"]

    def test_failure_logged_and_reraised(self):
        logger = MagicMock()
        with pytest.raises(RuntimeError):
            with LogTimer(logger, "exam analysis"):
                raise RuntimeError("boom")
        logger.warning.assert_called_once()
        assert logger.warning.call_args.kwargs["extra"]["error"] == "boom"
