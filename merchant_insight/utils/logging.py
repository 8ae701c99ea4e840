"""Structured logging configuration"""

import logging
import json
import os
from datetime import datetime
from typing import Any, Dict


class StructuredLogger:
    """
    JSON logger that carries key/value context on every record

    Keyword arguments given to a log call, plus any context bound with
    bind(), end up as top-level fields of the JSON line.
    """

    def __init__(self, name: str, level: str = "INFO", **context):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        self.level = level
        self.context: Dict[str, Any] = context

        # One handler per named logger; get_logger may be called repeatedly
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def bind(self, **context) -> "StructuredLogger":
        """Child logger whose records all include the given fields"""
        return StructuredLogger(self.logger.name, self.level, **{**self.context, **context})

    def log(self, level: str, message: str, exc_info: bool = False, **kwargs):
        self.logger.log(
            getattr(logging, level.upper(), logging.INFO),
            message,
            exc_info=exc_info,
            extra={"context": {**self.context, **kwargs}}
        )

    def info(self, message: str, **kwargs):
        self.log("info", message, **kwargs)

    def warning(self, message: str, **kwargs):
        self.log("warning", message, **kwargs)

    def error(self, message: str, **kwargs):
        self.log("error", message, **kwargs)

    def exception(self, message: str, **kwargs):
        """Error record with the active traceback attached"""
        self.log("error", message, exc_info=True, **kwargs)

    def debug(self, message: str, **kwargs):
        self.log("debug", message, **kwargs)


class JSONFormatter(logging.Formatter):
    """One JSON object per line; record context is merged at the top level"""

    RESERVED = ("timestamp", "level", "logger", "message", "exception")

    def format(self, record):
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in getattr(record, "context", {}).items():
            # Context never overwrites the core fields
            if key not in self.RESERVED:
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str, ensure_ascii=False)


def get_logger(name: str) -> StructuredLogger:
    """Get or create structured logger"""
    log_level = os.getenv("LOG_LEVEL", "INFO")
    return StructuredLogger(name, log_level)
