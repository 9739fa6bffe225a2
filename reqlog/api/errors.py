"""
reqlog.api.errors

Purpose:
    Internal exception types for API error handling.
    Routes raise ApiError; the global handler converts it to ErrorResponse.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from reqlog.api.contracts.error_contract import ApiErrorCode


@dataclass(eq=False)
class ApiError(Exception):
    status_code: int
    error_code: ApiErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"
