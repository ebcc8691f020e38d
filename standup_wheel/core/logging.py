# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Structured JSON logging for the wheel.

Every record is one JSON line. Round-related records carry their context
(round id, role, member) as top-level keys so a round can be traced from
draw to override with a single filter.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Optional

from standup_wheel.core.config import settings

# Attributes copied from ``extra=`` onto the JSON line when present.
ROUND_CONTEXT_FIELDS = ("round_id", "role", "member_id", "member_name")


class JSONFormatter(logging.Formatter):
    """Render a record, plus any round context, as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "service": settings.SERVICE_NAME,
            "version": settings.SERVICE_VERSION,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in ROUND_CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value
        if record.exc_info and record.exc_info[1]:
            log_data["error"] = str(record.exc_info[1])
            log_data["error_type"] = type(record.exc_info[1]).__name__
        return json.dumps(log_data, default=str)


class RoundLogger(logging.LoggerAdapter):
    """Logger adapter that stamps every record with one round's context."""

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger for ``name``, attaching the JSON handler once."""
    logger = logging.getLogger(name or settings.SERVICE_NAME)
    if not logger.handlers:
        logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def round_logger(logger: logging.Logger, round_id: str, **context: Any) -> RoundLogger:
    """Bind ``round_id`` (and e.g. ``role=``) to every record sent through ``logger``."""
    return RoundLogger(logger, {"round_id": round_id, **context})
