"""Logging setup for Starbar.

Widgets log through module loggers, or through a ``LoggerAdapter`` carrying a
``widget_id`` when a host names its widget. ``configure_logging`` installs one
root handler writing either plain lines or one JSON object per record.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# LogRecord attributes that are not caller context
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class StructuredJSONFormatter(logging.Formatter):
    """One JSON object per record.

    ``{"level", "message", "timestamp", "context"}``, where ``context`` holds
    the logger location plus any ``extra`` fields such as ``widget_id``.
    """

    def format(self, record: logging.LogRecord) -> str:
        context: dict[str, Any] = {
            "logger_name": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            exc_type, exc, _ = record.exc_info
            context["error_type"] = exc_type.__name__ if exc_type else None
            context["error_message"] = str(exc) if exc else None
            context["stack_trace"] = record.exc_text or self.formatException(record.exc_info)

        context.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )

        return json.dumps(
            {
                "level": record.levelname,
                "message": record.getMessage(),
                "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
                "context": context,
            },
            default=str,
        )


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """Install the root log handler, replacing any earlier one.

    Args:
        level: Level name, case-insensitive
        format_string: Line format for plain output, ignored when structured
        filename: Log file path, stdout when None
        structured: Write StructuredJSONFormatter lines

    Example:
        >>> configure_logging(level="DEBUG", structured=True, filename="starbar.jsonl")
    """
    handler: logging.Handler
    if filename:
        handler = logging.FileHandler(filename)
    else:
        handler = logging.StreamHandler(sys.stdout)

    if structured:
        handler.setFormatter(StructuredJSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    logging.basicConfig(level=getattr(logging, level.upper()), handlers=[handler], force=True)


def get_logger(name: str, **context: Any) -> logging.Logger | logging.LoggerAdapter:
    """Logger for ``name``, wrapped in a LoggerAdapter when context is given."""
    base = logging.getLogger(name)
    if context:
        return logging.LoggerAdapter(base, context)
    return base
