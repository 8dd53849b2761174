"""Content service (HTTP API) configuration."""

from __future__ import annotations

from config.environment import is_production
from core.utils.env import get_env, get_int_env, get_list_env

# Origins allowed to call the API from a browser
PRODUCTION_CORS_ORIGINS = ["https://yourdomain.com"]
DEVELOPMENT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5500",
]

# Transport-level body ceiling (10 MiB)
DEFAULT_MAX_BODY_BYTES = 10 * 1024 * 1024

# Validation-level cap applied to every free-text field
FIELD_MAX_LENGTH = 1000

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


def get_cors_origins() -> list[str]:
    """Return the CORS allow-list for the current environment.

    ``SITE_CORS_ORIGINS`` (comma separated) overrides the built-in list.
    """

    default = PRODUCTION_CORS_ORIGINS if is_production() else DEVELOPMENT_CORS_ORIGINS
    return get_list_env("SITE_CORS_ORIGINS", default)


def get_max_body_bytes() -> int:
    return get_int_env("SITE_MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES)


def get_port() -> int:
    return get_int_env("PORT", DEFAULT_PORT)


def get_host() -> str:
    return get_env("HOST", default=DEFAULT_HOST) or DEFAULT_HOST


def get_subscribe_webhook_url() -> str | None:
    """Optional mailing-list endpoint that receives new subscribers."""

    return (get_env("SITE_SUBSCRIBE_WEBHOOK_URL") or "").strip() or None


def get_contact_webhook_url() -> str | None:
    """Optional notification endpoint that receives contact messages."""

    return (get_env("SITE_CONTACT_WEBHOOK_URL") or "").strip() or None


WEBHOOK_TIMEOUT_SECONDS = 10.0

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_MAX_BODY_BYTES",
    "DEFAULT_PORT",
    "DEVELOPMENT_CORS_ORIGINS",
    "FIELD_MAX_LENGTH",
    "PRODUCTION_CORS_ORIGINS",
    "WEBHOOK_TIMEOUT_SECONDS",
    "get_contact_webhook_url",
    "get_cors_origins",
    "get_host",
    "get_max_body_bytes",
    "get_port",
    "get_subscribe_webhook_url",
]
