"""Structured logging: JSON formatter and one-time setup.

Every record carries timestamp, level, logger name and message. Extra fields
(number, path, status_code, elapsed_ms, error_code) are added when present.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

_EXTRA_KEYS = ("number", "method", "path", "status_code", "elapsed_ms", "error_code")
HANDLER_NAME = "numclass_api"


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

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


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """Configure the root logger; a second call replaces the handler the first one installed."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    handler.set_name(HANDLER_NAME)
    remove_handler()
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


def remove_handler() -> None:
    """Detach the handler installed by setup_logging(), if any."""
    for h in list(logging.root.handlers):
        if h.get_name() == HANDLER_NAME:
            logging.root.removeHandler(h)
