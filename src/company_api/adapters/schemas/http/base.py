# src/company_api/adapters/schemas/http/base.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Pydantic base for request and response bodies.

Unknown fields are rejected and strings are stripped before validation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class BaseHTTPSchema(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, str_strip_whitespace=True)

    def model_dump_http(self, **kwargs: Any) -> dict[str, Any]:
        """``model_dump`` in JSON mode, ready for a ``JSONResponse``."""
        return self.model_dump(mode="json", **kwargs)
