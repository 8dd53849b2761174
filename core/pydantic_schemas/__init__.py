"""Public pydantic schema exports for FastAPI interfaces."""

from .api_envelope import ApiResponse, api_response, error, ok
from .health import HealthStatus

__all__ = [
    "ApiResponse",
    "HealthStatus",
    "api_response",
    "error",
    "ok",
]
