"""Structured JSON logging for the bootstrap process."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
from typing import Any, Dict

import orjson

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        if record.stack_info:
            payload["stack"] = record.stack_info

        return orjson.dumps(payload).decode()


def configure_logging(level: str = "INFO", *, json: bool = True, name: str = "cqconfig") -> logging.Logger:
    """Install a single stream handler on the root logger and return ``name``'s logger.

    ``json=False`` keeps human-readable lines for interactive first runs.
    """

    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if json else logging.Formatter(PLAIN_FORMAT))
    root.addHandler(handler)
    root.setLevel(level.upper())
    return logging.getLogger(name)


__all__ = ["JsonFormatter", "PLAIN_FORMAT", "configure_logging"]
