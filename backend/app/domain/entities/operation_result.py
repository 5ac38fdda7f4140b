"""Discriminated result returned by form-submission use cases."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Failure kinds a caller can branch on."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_CATEGORY = "INVALID_CATEGORY"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"
    NOT_FOUND = "NOT_FOUND"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


@dataclass
class OperationResult:
    """Either ``success`` with ``data`` or a failure with ``errors`` and ``code``."""

    success: bool
    message: str
    data: Any = None
    errors: dict[str, Any] | None = None
    code: ErrorCode | None = None

    @classmethod
    def ok(cls, data: Any, message: str) -> "OperationResult":
        return cls(success=True, message=message, data=data)

    @classmethod
    def failure(
        cls,
        code: ErrorCode,
        message: str,
        errors: dict[str, Any] | None = None,
    ) -> "OperationResult":
        return cls(success=False, message=message, errors=errors or {}, code=code)
