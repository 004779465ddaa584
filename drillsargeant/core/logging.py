"""Structured JSON logging configuration.

All log output goes to stdout in JSON format so the desktop shell can
capture backend logs line by line.

Format per line:
    {"ts": "2025-03-01T12:00:00Z", "level": "INFO", "logger": "drillsargeant.services.watch_service", "msg": "...", ...}
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone

# Attributes callers may attach via extra={} that end up in the payload
_EXTRA_FIELDS = ("command", "path")


class JSONFormatter(logging.Formatter):
    """Emit each log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)

        # Include exception info when present
        if record.exc_info and record.exc_info[0] is not None:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def setup_logging() -> None:
    """Configure root logger with JSON output to stdout.

    The log level is controlled by the ``LOG_LEVEL`` env var
    (default ``INFO``).
    """
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers (e.g. uvicorn defaults)
    root.handlers.clear()
    root.addHandler(handler)

    # Quiet noisy third-party loggers
    for noisy in ("uvicorn.access", "httpcore", "httpx"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
