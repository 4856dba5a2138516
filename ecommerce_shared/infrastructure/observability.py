"""Structured Logging — JSON formatter and setup for API client observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Request fields (method, url, status_code, error_code, duration_ms) surfaced when present
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter on stdlib logging: library code only calls logging.getLogger(__name__),
      the host application decides whether to install this formatter
    - setup_logging called once by the host process; it replaces handlers it installed before
"""

import json
import logging
from datetime import datetime, timezone

from ecommerce_shared.config import Settings

_EXTRA_KEYS = ("method", "url", "status_code", "error_code", "duration_ms")

_HANDLER_NAME = "ecommerce_shared"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging; returns the installed handler."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


def setup_logging_from_settings(settings: Settings) -> logging.Handler:
    return setup_logging(settings.log_level, settings.log_format)
