"""Opt-in logging for collapsesimulator.

Nothing is printed unless a handler is installed here: the package logger
only carries a NullHandler. The command-line entry point installs one from
``--log-level`` or, failing that, from the environment.

Environment variables:
    CS_LOGGING: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    CS_LOG_JSON: "1" to emit one JSON object per record
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime

__all__ = ["configure_from_env", "enable_console_logging"]

LOGGER_NAME = "collapsesimulator"

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON line per record with timestamp, level, logger and message."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _to_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def enable_console_logging(level: str | int = "INFO", json_output: bool = False) -> logging.StreamHandler:
    """Log the package to stderr at ``level``.

    Handlers installed by earlier calls are replaced, so calling this twice
    does not duplicate output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if json_output else logging.Formatter(TEXT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(_to_level(level))
    return handler


def configure_from_env() -> logging.StreamHandler | None:
    """Enable console logging when CS_LOGGING is set, else leave logging off."""
    level = os.environ.get("CS_LOGGING", "")
    if not level:
        return None
    return enable_console_logging(level, json_output=os.environ.get("CS_LOG_JSON") == "1")
