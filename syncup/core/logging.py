# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
JSON log lines on stdout.

Services pass kick-off context through ``extra=``; any of CONTEXT_FIELDS
present on a record is copied into its line, so a group's activity can be
followed with one filter on ``group_id``.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from syncup.core.config import settings

CONTEXT_FIELDS = ("request_id", "group_id", "member_id")


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        line: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "service": settings.SERVICE_NAME,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                line[field] = value
        if record.exc_info and record.exc_info[1]:
            exc = record.exc_info[1]
            line["error"] = str(exc)
            line["error_type"] = type(exc).__name__
        return json.dumps(line, default=str)


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger writing JSON lines at ``LOG_LEVEL``; configured once per name."""
    logger = logging.getLogger(name or settings.SERVICE_NAME)
    if logger.handlers:
        return logger
    logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger
