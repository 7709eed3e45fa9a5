"""
Result type returned by every mutating service operation.
"""

from typing import Any, Optional
from enum import Enum
from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Failure categories shared by all services."""
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"
    PERSISTENCE_ERROR = "persistence_error"


class OperationResult(BaseModel):
    """Outcome of a create, update or delete operation."""

    success: bool = Field(..., description="Whether the operation was applied and persisted")
    error: Optional[ErrorCode] = Field(None, description="Failure category when success is False")
    message: Optional[str] = Field(None, description="Human readable detail")
    record: Optional[Any] = Field(None, description="Created or updated record, if any")

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, record: Any = None, message: Optional[str] = None) -> "OperationResult":
        return cls(success=True, record=record, message=message)

    @classmethod
    def failure(cls, error: ErrorCode, message: str) -> "OperationResult":
        return cls(success=False, error=error, message=message)
