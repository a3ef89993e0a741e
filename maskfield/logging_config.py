"""Logging setup for the command line tool.

The library only creates module loggers; handlers are installed here, by the
application that embeds it or by the CLI.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

_RESERVED_ATTRS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "message",
    "taskName",
}


class JsonFormatter(logging.Formatter):
    """JSON formatter for standard logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "funcName": record.funcName,
            "lineno": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def configure_logging(
    level: str = "WARNING",
    fmt: str = "text",
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Install a single stream handler on the ``maskfield`` logger.

    Args:
        level: Level name such as ``"DEBUG"``; unknown names fall back to WARNING
        fmt: ``"text"`` or ``"json"``
        stream: Target stream, stderr by default

    Returns:
        The installed handler
    """
    if fmt == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger("maskfield")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler
