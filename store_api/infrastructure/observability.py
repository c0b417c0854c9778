"""Structured Logging — JSON log lines for the whole process.

Invariants:
    - Every line has timestamp, level, logger and message
    - Known request fields (see REQUEST_FIELDS) are copied from `extra` when set
    - setup_logging owns one root handler: calling it again swaps that handler

Design Decisions:
    - Stdlib logging plus a small formatter; uvicorn runs with log_config=None
      so its loggers flow through the same root handler
"""

import json
import logging
from datetime import datetime, timezone

REQUEST_FIELDS = (
    "request_id", "method", "path", "status_code", "duration_ms",
    "error_code", "user_id",
)

_root_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update({
            field: getattr(record, field)
            for field in REQUEST_FIELDS
            if getattr(record, field, None) is not None
        })
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the root handler ("json" or plain text) and set the root level."""
    global _root_handler
    if fmt == "json":
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    if _root_handler is not None:
        root.removeHandler(_root_handler)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _root_handler = handler
    return handler

