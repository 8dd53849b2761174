"""Standard API response envelope helpers."""

from __future__ import annotations

from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Canonical API response envelope.

    A successful envelope carries ``data`` and/or ``message``; a failed one
    carries only ``error``. Unset keys are dropped from the wire form.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    success: bool = Field(..., description="Indicates whether the operation completed successfully")
    data: Optional[T] = Field(None, description="Optional domain payload")
    message: Optional[str] = Field(None, description="Human readable confirmation")
    error: Optional[str] = Field(None, description="Human readable failure reason")

    @model_validator(mode="after")
    def _check_outcome(self) -> "ApiResponse[T]":
        if self.success and self.error is not None:
            raise ValueError("Successful responses cannot carry an error")
        if not self.success and (self.error is None or self.data is not None):
            raise ValueError("Failed responses must carry an error and no data")
        return self


def api_response(
    *,
    success: bool,
    data: T | None = None,
    message: str | None = None,
    error: str | None = None,
) -> Dict[str, Any]:
    """Return a serialisable API envelope with a consistent schema."""

    envelope = ApiResponse[Any](success=success, data=data, message=message, error=error)
    return envelope.model_dump(exclude_none=True)


def ok(message: str | None = None, data: T | None = None) -> Dict[str, Any]:
    """Shortcut for successful responses."""

    return api_response(success=True, data=data, message=message)


def error(message: str) -> Dict[str, Any]:
    """Shortcut for error responses; the HTTP status is chosen by the caller."""

    return api_response(success=False, error=message)


__all__ = ["ApiResponse", "api_response", "ok", "error"]
