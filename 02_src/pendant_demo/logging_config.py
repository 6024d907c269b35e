"""Structured logging configuration for the demo extension."""

import json
import logging
import logging.config
import logging.handlers
import os
from datetime import datetime, timezone
from pathlib import Path

from .config import DEFAULT_LOG_PATH

# Chatty third-party loggers; the event poll issues one request per interval
_QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        # Event / item the record relates to, passed as extra={"context": ...}
        if hasattr(record, "context"):
            entry["context"] = record.context

        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(
    log_level: str | None = None,
    log_file: str | None = None,
    console: bool = True,
) -> None:
    """
    Configure the root logger for the extension process.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL.
                   Defaults to the LOG_LEVEL env var, then INFO.
        log_file: Path of the rotating log file. Defaults to 04_logs/extension.log.
        console: Also write records to stdout (the pendant captures stdout
                 of extensions running on the device).
    """
    level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_path = Path(log_file) if log_file else DEFAULT_LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handlers = {
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": str(log_path),
            "maxBytes": 5 * 1024 * 1024,
            "backupCount": 3,
            "formatter": "json",
            "encoding": "utf-8",
        },
    }
    if console:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {"()": "pendant_demo.logging_config.JSONFormatter"},
            },
            "handlers": handlers,
            "loggers": {
                name: {"level": "WARNING"} for name in _QUIET_LOGGERS
            },
            "root": {"level": level, "handlers": list(handlers)},
        }
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (pass __name__)."""
    return logging.getLogger(name)
