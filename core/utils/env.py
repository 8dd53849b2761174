"""Common environment helpers used across the backend."""

from __future__ import annotations

import os

from core.exceptions import ConfigurationError

__all__ = ["get_env", "get_bool_env", "get_int_env", "get_list_env"]


def get_env(key: str, default: str | None = None, *, required: bool = False) -> str | None:
    """Return an environment variable and optionally enforce its presence."""

    value = os.getenv(key, default)
    if required and value is None:
        raise ConfigurationError(f"Required environment variable {key} not set", key=key)
    return value


def get_bool_env(key: str, default: bool = False) -> bool:
    raw = get_env(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def get_int_env(key: str, default: int) -> int:
    """Return an integer environment variable, rejecting malformed values."""

    raw = get_env(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(f"Environment variable {key} must be an integer", key=key) from exc


def get_list_env(key: str, default: list[str]) -> list[str]:
    """Return a comma separated environment variable as a list."""

    raw = get_env(key)
    if raw is None or not raw.strip():
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]
