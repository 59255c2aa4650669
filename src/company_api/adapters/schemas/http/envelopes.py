# src/company_api/adapters/schemas/http/envelopes.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Error envelope returned by every failing endpoint.

Success bodies are bare resources; only errors are wrapped::

    {"error": {"code": "UniqueISIN", "http_status": 400, "message": "..."}}
"""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field

from company_api.adapters.schemas.http.base import BaseHTTPSchema

__all__ = ["ErrorEnvelope", "ErrorObject"]


class ErrorObject(BaseHTTPSchema):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "code": "UniqueISIN",
                    "http_status": 400,
                    "message": "The ISIN 'US0378331005' already exists and must be unique",
                    "details": {"property": "ISIN", "value": "US0378331005"},
                    "trace_id": "3f0c9c1e-6d3b-4a8e-9b84-0f5a2f1c7d10",
                }
            ]
        },
    )

    code: str = Field(..., description="Machine-readable error code.")
    http_status: int
    message: str
    details: dict[str, Any] | None = None
    trace_id: str | None = Field(None, description="Value of the x-trace-id response header.")


class ErrorEnvelope(BaseHTTPSchema):
    error: ErrorObject
