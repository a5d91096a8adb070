"""Logging configuration for the zoo habitat evaluator."""

from __future__ import annotations

import json
import logging
import sys
from typing import Optional, TextIO

_HANDLER_NAME = "zoohabitat"


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "INFO", format_json: bool = False, stream: Optional[TextIO] = None) -> None:
    """
    Configure logging for the application.

    Calling this again replaces the handler installed by the previous call.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Whether to output one JSON object per log line
        stream: Destination stream, stderr by default so CLI output stays clean
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(_HANDLER_NAME)
    if format_json:
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    handler.setFormatter(formatter)

    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    logging.root.setLevel(log_level)
    logging.root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The logger name (usually __name__)

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)


__all__ = ["JsonFormatter", "get_logger", "setup_logging"]
