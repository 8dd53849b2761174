"""Utilities for formatting structured HTTP error responses."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import status

from core.exceptions import (
    InternalError,
    NotFoundError,
    ServiceError,
    ValidationError,
)
from core.pydantic_schemas import error as api_error

GENERIC_ERROR_MESSAGE = "Internal server error"
NOT_FOUND_MESSAGE = "Endpoint not found"
PAYLOAD_TOO_LARGE_MESSAGE = "Request body too large"


def format_validation_error(exc: ValidationError) -> Dict[str, Any]:
    """Return a standard payload for :class:`ValidationError`."""

    return api_error(exc.message)


def format_not_found_error(exc: NotFoundError | None = None) -> Dict[str, Any]:
    """Return a standard payload for unknown routes."""

    return api_error(exc.message if exc is not None else NOT_FOUND_MESSAGE)


def format_internal_error(exc: InternalError | None = None) -> Dict[str, Any]:
    """Return a generic payload; the cause is never echoed."""

    return api_error(exc.message if exc is not None else GENERIC_ERROR_MESSAGE)


def status_for(exc: ServiceError) -> int:
    """Map a service exception to its HTTP status code."""

    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def format_service_error(exc: ServiceError) -> Dict[str, Any]:
    """Return a standard payload for any service error.

    Only validation and not-found messages are caller-facing; configuration
    and delivery failures collapse into the generic message.
    """

    if isinstance(exc, ValidationError):
        return format_validation_error(exc)
    if isinstance(exc, NotFoundError):
        return format_not_found_error(exc)
    if isinstance(exc, InternalError):
        return format_internal_error(exc)
    return format_internal_error()


__all__ = [
    "GENERIC_ERROR_MESSAGE",
    "NOT_FOUND_MESSAGE",
    "PAYLOAD_TOO_LARGE_MESSAGE",
    "format_internal_error",
    "format_not_found_error",
    "format_service_error",
    "format_validation_error",
    "status_for",
]
