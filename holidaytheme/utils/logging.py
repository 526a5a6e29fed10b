"""
JSON log lines for the holiday service.

Each line carries the request's correlation ID plus whatever display context
is bound at the time (session timezone, holiday being resolved). Bind context
once around a unit of work with `log_context(...)` instead of repeating
`extra={...}` on every call; explicit extras still win for a single line.
"""
import json
import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Iterable, Iterator, Optional

correlation_id_ctx: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
_bound_ctx: ContextVar[dict] = ContextVar("holiday_log_context", default={})

HOLIDAY_FIELDS = ("holiday_id", "timezone", "year", "day_of_holiday", "delay_ms")
QUIET_LOGGERS = ("uvicorn.access", "httpcore", "httpx")


def get_correlation_id() -> Optional[str]:
    return correlation_id_ctx.get()


def set_correlation_id(cid: str) -> None:
    correlation_id_ctx.set(cid)


def generate_correlation_id() -> str:
    return uuid.uuid4().hex


@contextmanager
def log_context(**fields) -> Iterator[dict]:
    """Attach fields to every record logged inside the block (None values are dropped)."""
    merged = {**_bound_ctx.get(), **{k: v for k, v in fields.items() if v is not None}}
    token = _bound_ctx.set(merged)
    try:
        yield merged
    finally:
        _bound_ctx.reset(token)


class StructuredJsonFormatter(logging.Formatter):
    """
    One JSON object per record:
    {"timestamp": ..., "level": ..., "correlation_id": ..., "module": ..., "message": ..., "timezone": ...}

    The timestamp is the record's creation time, not the time it was
    formatted, so buffered handlers keep the order of events.
    """

    def __init__(self, fields: Iterable[str] = HOLIDAY_FIELDS):
        super().__init__()
        self.fields = tuple(fields)

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "correlation_id": get_correlation_id(),
            "module": record.name,
            "message": record.getMessage(),
        }

        bound = _bound_ctx.get()
        for key in self.fields:
            value = getattr(record, key, None)
            if value is None:
                value = bound.get(key)
            if value is not None:
                entry[key] = value

        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


def configure_structured_logging(log_level: str = "INFO") -> logging.Handler:
    """Route the root logger through a single JSON handler. Call once at startup."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredJsonFormatter())
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
