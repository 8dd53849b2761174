"""Custom Exception Hierarchy for the New Yuga site backend
This module defines a typed exception hierarchy that enables precise error
handling and structured error responses across the application.

Exception Handling Flow:
    1. Service layer raises typed exception
    2. FastAPI exception handler catches it (see main.py)
    3. Handler converts to structured JSON envelope
    4. Client receives ``{"success": false, "error": ...}``
"""

from __future__ import annotations


class ServiceError(Exception):
    """Base exception for all service layer errors."""


class ValidationError(ServiceError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(self.message)


class NotFoundError(ServiceError):
    """Raised when a requested resource cannot be located."""

    def __init__(self, message: str = "Endpoint not found", resource: str | None = None):
        self.message = message
        self.resource = resource
        super().__init__(self.message)


class InternalError(ServiceError):
    """Raised for unexpected faults; ``message`` is safe to show to callers."""

    def __init__(self, message: str = "Internal server error", original_error: Exception | None = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)


class ConfigurationError(ServiceError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, key: str | None = None):
        self.message = message
        self.key = key
        super().__init__(self.message)


class DeliveryError(ServiceError):
    """Raised when a submission cannot be handed to its collaborator."""

    def __init__(self, message: str, target: str | None = None, original_error: Exception | None = None):
        self.message = message
        self.target = target
        self.original_error = original_error
        super().__init__(self.message)
