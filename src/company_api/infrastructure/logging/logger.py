# src/company_api/infrastructure/logging/logger.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""JSON logging.

Every line is one JSON object with ``ts``, ``level``, ``logger`` and
``message``, plus ``request_id``/``trace_id`` when the current request has
them. Structured fields go in ``extra={"extra": {...}}``::

    log = get_json_logger(__name__)
    log.info("company_created", extra={"extra": {"isin": company.isin}})
"""

from __future__ import annotations

import json
import logging
import os
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

__all__ = [
    "configure_root_logging",
    "get_json_logger",
    "get_request_id",
    "get_trace_id",
    "set_request_context",
]

_request_id: ContextVar[str | None] = ContextVar("company_api_request_id", default=None)
_trace_id: ContextVar[str | None] = ContextVar("company_api_trace_id", default=None)


def set_request_context(*, request_id: str | None = None, trace_id: str | None = None) -> None:
    """Bind correlation ids to the running task. ``None`` leaves a value as is."""
    if request_id is not None:
        _request_id.set(request_id)
    if trace_id is not None:
        _trace_id.set(trace_id)


def get_request_id() -> str | None:
    return _request_id.get()


def get_trace_id() -> str | None:
    return _trace_id.get()


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, ctx in (("request_id", _request_id), ("trace_id", _trace_id)):
            value = getattr(record, key, None) or ctx.get()
            if value:
                payload[key] = value

        if record.exc_info and record.exc_info[0] is not None:
            payload["exc_type"] = record.exc_info[0].__name__
            payload["exc_message"] = str(record.exc_info[1])

        fields = getattr(record, "extra", None)
        if isinstance(fields, dict):
            payload.update(fields)
        return json.dumps(payload, default=str, ensure_ascii=False, separators=(",", ":"))


def configure_root_logging(level: str | int | None = None) -> None:
    """Install the JSON handler on the root logger.

    Safe to call repeatedly; the level is refreshed every time but only one
    JSON handler is ever attached.

    Args:
        level: Level name or number. Defaults to ``$LOG_LEVEL`` or ``INFO``.
    """
    root = logging.getLogger()
    root.setLevel(level if level is not None else os.getenv("LOG_LEVEL", "INFO").upper())
    if any(isinstance(h.formatter, _JsonFormatter) for h in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(_JsonFormatter())
    root.addHandler(handler)


def get_json_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(name)``; output is JSON once the root is configured."""
    return logging.getLogger(name)
