"""Structured logging configuration for the jira_rest package.

- JSON structured logging with StructuredFormatter
- Logger hierarchy under the ``jira_rest`` namespace
- Environment variable control (JIRA_REST_LOG_LEVEL, JIRA_REST_LOG_FORMAT)
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Optional

LOGGER_NAME = "jira_rest"

# Keys redacted from the "context" block of every record
SENSITIVE_KEYS = {
    "password",
    "token",
    "secret",
    "api_key",
    "authorization",
    "auth",
    "auth_header",
    "credential",
}

# Attributes every LogRecord carries; anything else came in through extra=
_STANDARD_FIELDS = {
    "name",
    "msg",
    "args",
    "created",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "message",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "thread",
    "threadName",
    "exc_info",
    "exc_text",
    "stack_info",
    "taskName",
}


class StructuredFormatter(logging.Formatter):
    """Render log records as single-line JSON objects.

    Output keys:
    - timestamp: UTC ISO 8601 with 'Z' suffix
    - level: level name
    - logger: logger name (jira_rest hierarchy)
    - message: the event name
    - context: values passed through ``extra=``, sensitive keys redacted
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = {
            k: ("[REDACTED]" if k.lower() in SENSITIVE_KEYS else v)
            for k, v in record.__dict__.items()
            if k not in _STANDARD_FIELDS and not k.startswith("_")
        }
        if context:
            log_data["context"] = context

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable formatter, selected with JIRA_REST_LOG_FORMAT=text."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the ``jira_rest`` logger hierarchy.

    Args:
        level: Optional level override. Falls back to JIRA_REST_LOG_LEVEL,
               then INFO.

    Returns:
        The configured package logger.

    Environment Variables:
        JIRA_REST_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR. Default: INFO
        JIRA_REST_LOG_FORMAT: json or text. Default: json
    """
    if level is None:
        level = os.getenv("JIRA_REST_LOG_LEVEL", "INFO")
    log_level = getattr(logging, level.upper(), logging.INFO)

    log_format = os.getenv("JIRA_REST_LOG_FORMAT", "json").lower()
    formatter = TextFormatter() if log_format == "text" else StructuredFormatter()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    # Only one handler, however many times this runs
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    else:
        for handler in logger.handlers:
            handler.setFormatter(formatter)

    logger.propagate = False
    return logger
