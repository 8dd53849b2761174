"""Exceptions raised by the page client API layer."""

from __future__ import annotations

NETWORK_ERROR_MESSAGE = "Network error - please check your connection"


class ClientError(Exception):
    """Base class for failures the page reports to the user."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ApiError(ClientError):
    """The server answered, but with an error envelope or status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NetworkError(ClientError):
    """The request never produced a server response."""

    def __init__(self, message: str = NETWORK_ERROR_MESSAGE, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


__all__ = ["ApiError", "ClientError", "NETWORK_ERROR_MESSAGE", "NetworkError"]
