"""Page client defaults: endpoints, timings, storage keys and UI wording."""

from __future__ import annotations

from core.utils.env import get_env

DEFAULT_API_BASE_URL = "http://localhost:3000/api"

# Request timeout for every client call (seconds)
REQUEST_TIMEOUT_SECONDS = 10.0

# Toasts stay visible for TOAST_DURATION then fade out during TOAST_EXIT
TOAST_DURATION_SECONDS = 4.0
TOAST_EXIT_SECONDS = 0.3

# Content older than this is refreshed when the page becomes visible again
STALE_AFTER_MS = 5 * 60 * 1000

# Local storage keys
THEME_STORAGE_KEY = "theme"
LAST_LOAD_STORAGE_KEY = "lastDataLoad"

DEFAULT_THEME = "light"
THEME_LABELS = {
    "light": "\U0001f319 Dark",
    "dark": "☀️ Light",
}

SUBSCRIBE_BUSY_LABEL = "Loading..."
CONTACT_BUSY_LABEL = "Sending..."

MESSAGES = {
    "offline_content": "Using offline content. Server may be unavailable.",
    "subscribe_success": "Successfully subscribed to newsletter!",
    "subscribe_failed": "Failed to subscribe",
    "contact_success": "Message sent successfully!",
    "contact_failed": "Failed to send message",
    "online": "Connection restored",
    "offline": "You are offline. Some features may not work.",
}


def get_api_base_url() -> str:
    return (get_env("SITE_API_BASE_URL", default=DEFAULT_API_BASE_URL) or DEFAULT_API_BASE_URL).rstrip("/")


__all__ = [
    "CONTACT_BUSY_LABEL",
    "DEFAULT_API_BASE_URL",
    "DEFAULT_THEME",
    "LAST_LOAD_STORAGE_KEY",
    "MESSAGES",
    "REQUEST_TIMEOUT_SECONDS",
    "STALE_AFTER_MS",
    "SUBSCRIBE_BUSY_LABEL",
    "THEME_LABELS",
    "THEME_STORAGE_KEY",
    "TOAST_DURATION_SECONDS",
    "TOAST_EXIT_SECONDS",
    "get_api_base_url",
]
