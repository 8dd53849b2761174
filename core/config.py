"""Settings dataclass for dependency injection.

Domain-specific configuration lives in ``config/`` modules:
- HTTP API (CORS, body limits, webhooks): config.server
- Page client (timings, labels, storage keys): config.client
- Environment detection: config.environment
"""

from __future__ import annotations

from dataclasses import dataclass, field

from config import server as server_config
from config.environment import ENVIRONMENT, IS_DEVELOPMENT, IS_PRODUCTION, IS_TEST, get_node_env
from core.utils.env import get_bool_env

DEBUG_MODE = get_bool_env("DEBUG_MODE", False)


@dataclass(frozen=True)
class Settings:
    """Cross-cutting settings for the content service."""

    environment: str = field(default_factory=get_node_env)
    debug_mode: bool = DEBUG_MODE
    cors_origins: tuple[str, ...] = field(
        default_factory=lambda: tuple(server_config.get_cors_origins())
    )
    max_body_bytes: int = field(default_factory=server_config.get_max_body_bytes)
    field_max_length: int = server_config.FIELD_MAX_LENGTH
    subscribe_webhook_url: str | None = field(default_factory=server_config.get_subscribe_webhook_url)
    contact_webhook_url: str | None = field(default_factory=server_config.get_contact_webhook_url)


def get_settings() -> Settings:
    """Build settings from the current environment."""

    return Settings()


__all__ = [
    "DEBUG_MODE",
    "ENVIRONMENT",
    "IS_DEVELOPMENT",
    "IS_PRODUCTION",
    "IS_TEST",
    "Settings",
    "get_settings",
]
