# src/company_api/application/schemas/dto/base.py
# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""Shared pydantic base for application DTOs. Knows nothing about HTTP."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)
