"""Health check response schema."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field


def _utcnow_iso() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


class HealthStatus(BaseModel):
    """Liveness payload returned by ``GET /api/health``."""

    success: bool = True
    status: Literal["healthy"] = "healthy"
    timestamp: str = Field(default_factory=_utcnow_iso, description="ISO 8601 UTC timestamp")


__all__ = ["HealthStatus"]
