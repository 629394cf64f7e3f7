"""Tests for logging configuration utilities."""

from io import StringIO
import json
import logging
import sys

from starbar.core.rating import StarRatingWidget
from starbar.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
)


def _record(msg: str = "Rating changed", level: int = logging.INFO, exc_info=None):
    record = logging.LogRecord(
        name="starbar.core.rating.widget",
        level=level,
        pathname="/path/to/widget.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.funcName = "dispatch"
    record.module = "widget"
    return record


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self):
        """Record fields land in the LogEntry layout."""
        data = json.loads(StructuredJSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Rating changed"
        assert "timestamp" in data
        assert data["context"]["logger_name"] == "starbar.core.rating.widget"
        assert data["context"]["module"] == "widget"
        assert data["context"]["function"] == "dispatch"
        assert data["context"]["line"] == 42

    def test_extra_fields_in_context(self):
        """Extra attributes (as LoggerAdapter adds them) go into context."""
        record = _record()
        record.widget_id = "review-stars"
        record.previous = 3.0

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["widget_id"] == "review-stars"
        assert data["context"]["previous"] == 3.0

    def test_exception_info(self):
        """Exception type, message and trace are captured."""
        try:
            raise ValueError("color_bands must contain a band at threshold 0")
        except ValueError:
            exc_info = sys.exc_info()

        record = _record("Invalid config", logging.ERROR, exc_info)
        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["level"] == "ERROR"
        assert data["context"]["error_type"] == "ValueError"
        assert "threshold 0" in data["context"]["error_message"]
        assert "ValueError" in data["context"]["stack_trace"]


class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_standard_logging_to_stdout(self, capsys):
        configure_logging(level="INFO")

        logging.getLogger("test.standard").info("Widget ready")

        out = capsys.readouterr().out
        assert "Widget ready" in out
        assert "test.standard" in out
        assert "INFO" in out

    def test_structured_logging_to_file(self, tmp_path):
        log_file = tmp_path / "starbar.jsonl"
        configure_logging(level="DEBUG", structured=True, filename=str(log_file))

        logging.getLogger("test.file").debug("Debug message")
        logging.getLogger("test.file").warning("Warning message")

        lines = [json.loads(line) for line in log_file.read_text().splitlines() if line]
        assert [line["level"] for line in lines[-2:]] == ["DEBUG", "WARNING"]
        assert all("context" in line for line in lines)

    def test_widget_debug_logs(self, tmp_path):
        """Accepted interactions are logged at DEBUG."""
        log_file = tmp_path / "widget.jsonl"
        configure_logging(level="DEBUG", structured=True, filename=str(log_file))

        StarRatingWidget().key_down("ArrowUp")

        messages = [json.loads(line)["message"] for line in log_file.read_text().splitlines()]
        assert any("Rating changed" in m for m in messages)

    def test_widget_id_in_structured_logs(self, tmp_path):
        """A named widget tags its records with widget_id."""
        log_file = tmp_path / "widget.jsonl"
        configure_logging(level="DEBUG", structured=True, filename=str(log_file))

        StarRatingWidget(widget_id="review-stars").key_down("ArrowUp")

        entries = [json.loads(line) for line in log_file.read_text().splitlines()]
        changes = [e for e in entries if "Rating changed" in e["message"]]
        assert changes
        assert changes[0]["context"]["widget_id"] == "review-stars"

    def test_reconfigure_logging(self):
        configure_logging(level="INFO")
        configure_logging(level="WARNING", structured=True)

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, StructuredJSONFormatter)


class TestGetLogger:
    """Test suite for get_logger function."""

    def test_get_logger_without_context(self):
        logger = get_logger("test.plain")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.plain"

    def test_get_logger_with_context(self):
        logger = get_logger("test.context", widget_id="review-stars")
        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.extra["widget_id"] == "review-stars"

    def test_adapter_context_in_structured_logs(self):
        stream = StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(StructuredJSONFormatter())

        logger = get_logger("test.adapter", widget_id="review-stars")
        logger.logger.addHandler(handler)
        logger.logger.setLevel(logging.INFO)
        try:
            logger.info("Message with context")
        finally:
            logger.logger.removeHandler(handler)

        data = json.loads(stream.getvalue().strip())
        assert data["context"]["widget_id"] == "review-stars"
