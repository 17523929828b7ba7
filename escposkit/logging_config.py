"""
Logging setup for applications embedding escposkit.

The library itself only creates module loggers; call configure_logging()
from an entry point to get console output. ESCPOSKIT_JSON_LOGS switches to
one JSON object per line, ESCPOSKIT_LOG_LEVEL sets the default level.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Optional, Union

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s %(message)s"


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter: timestamp, level, logger name and message."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        base = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            base["exc"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "false").lower() in ("1", "true", "yes")


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Configure root logging once.

    Existing root handlers are replaced so repeated calls do not duplicate
    output. Returns the root logger.
    """
    if level is None:
        level = os.environ.get("ESCPOSKIT_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = []

    formatter: logging.Formatter
    if _env_flag("ESCPOSKIT_JSON_LOGS"):
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(LOG_FORMAT)
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root.addHandler(handler)
    return root


__all__ = ["JsonFormatter", "configure_logging"]
