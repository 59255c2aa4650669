# Copyright (c) Company API.
# SPDX-License-Identifier: MIT
"""
Result value object.

Summary:
    Success/failure container returned by operations whose ordinary bad input
    is reported as data rather than raised.

Layer:
    domain/value_objects
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an operation that may fail softly.

    Attributes:
        value: Payload on success; ``None`` on failure.
        error: Human-readable failure message; ``None`` on success.
        code: Machine-readable failure code; ``None`` on success.
    """

    value: T | None = None
    error: str | None = None
    code: str | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: str, code: str | None = None) -> Result[T]:
        if not error:
            raise ValueError("failure result requires a non-empty error message")
        return cls(error=error, code=code)

    def unwrap(self) -> T:
        """Return the success value.

        Raises:
            ValueError: If the result is a failure.
        """
        if self.error is not None or self.value is None:
            raise ValueError(f"cannot unwrap a failed result: {self.error}")
        return self.value
