"""Structured JSON logging."""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from src.shared.config import ModelSettings, get_settings
from src.shared.constants import MODEL_LOGGER_NAME


class JSONFormatter(logging.Formatter):
    """Custom JSON log formatter."""

    def __init__(self, service_name: str = "unknown") -> None:
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service_name": self.service_name,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = str(record.exc_info[1])
        return json.dumps(log_entry)


def setup_logging(service_name: str, level: str = "INFO") -> logging.Logger:
    """Configure structured JSON logging.

    Args:
        service_name: Name used both as the logger name and in log entries.
            Passing a package name (e.g. ``"src.asyncapi_model"``) routes
            every module logger below it through the JSON handler.
        level: Log level string (e.g. "INFO", "DEBUG").

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(service_name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter(service_name=service_name))
    logger.addHandler(handler)

    return logger


def configure_logging(settings: ModelSettings | None = None) -> logging.Logger:
    """Route every model module logger through the JSON handler.

    The level comes from ``settings.log_level`` (``LOG_LEVEL``); settings
    are read from the environment when not given.
    """
    if settings is None:
        settings = get_settings()
    return setup_logging(MODEL_LOGGER_NAME, settings.log_level)
