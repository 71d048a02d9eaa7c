"""Tests for logging setup."""

import json
import logging

from dotpath import LogContext, get_logger, setup_logging
from dotpath.logging import DetailedFormatter, SimpleFormatter, StructuredFormatter


def _record(message: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("dotpath.test", logging.INFO, __file__, 10, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestFormatters:
    """Tests for log formatters."""

    def test_structured_formatter_outputs_json(self):
        data = json.loads(StructuredFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "dotpath.test"
        assert data["message"] == "hello"
        assert "timestamp" in data

    def test_structured_formatter_includes_extra_fields(self):
        data = json.loads(StructuredFormatter().format(_record(extra_fields={"command": "evaluate"})))
        assert data["command"] == "evaluate"

    def test_simple_formatter(self):
        assert SimpleFormatter().format(_record()) == "INFO     | dotpath.test | hello"


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_console_handler_and_level(self):
        setup_logging(level="debug", format="detailed")
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, DetailedFormatter)

    def test_file_handler_writes_json(self, tmp_path):
        log_file = tmp_path / "logs" / "dotpath.log"
        setup_logging(level="INFO", log_file=log_file)

        logging.getLogger("dotpath.test").info("to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["message"] == "to file"


class TestGetLogger:
    """Tests for get_logger function."""

    def test_names_below_package(self):
        assert get_logger("cli").name == "dotpath.cli"
        assert get_logger("dotpath.normalizer").name == "dotpath.normalizer"
        assert get_logger("dotpath").name == "dotpath"


class TestLogContext:
    """Tests for LogContext."""

    def test_fields_added_and_removed(self):
        logger = logging.getLogger("dotpath.test")
        factory = logging.getLogRecordFactory()

        with LogContext(logger, command="parent"):
            record = logging.getLogRecordFactory()("dotpath.test", logging.INFO, __file__, 1, "x", None, None)
            assert record.extra_fields == {"command": "parent"}

        assert logging.getLogRecordFactory() is factory
