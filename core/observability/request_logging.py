"""Request logging helpers for HTTP traffic."""
from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from fastapi import FastAPI, Request

_PAYLOAD_PREVIEW_LIMIT = 4096
# Paths to skip HTTP request logging (high-frequency probes)
_QUIET_PATH_PREFIXES = ("/api/health",)
_SENSITIVE_PAYLOAD_KEYS = {
    "authorization",
    "cookie",
    "password",
    "secret",
    "token",
}
_EMAIL_PAYLOAD_KEYS = {"email"}


def mask_email(value: Any) -> str:
    """Return an email with the local part hidden, e.g. ``j***@example.com``."""

    if not isinstance(value, str) or "@" not in value:
        return "***"
    local, _, domain = value.partition("@")
    return f"{local[:1]}***@{domain}"


def _format_client_address(client: tuple[str, int] | None) -> str:
    if not client:
        return "unknown"
    host, port = client
    return f"{host}:{port}" if port is not None else host


def _format_body_preview(body: bytes) -> str:
    if not body:
        return "<empty>"

    is_truncated = len(body) > _PAYLOAD_PREVIEW_LIMIT
    snippet = body[:_PAYLOAD_PREVIEW_LIMIT]

    try:
        text = snippet.decode("utf-8")
    except UnicodeDecodeError:
        return f"<binary {len(body)} bytes>"

    text = " ".join(text.split())
    if is_truncated:
        return f"{text}... ({len(body)} bytes)"
    return text


def _redact_payload(value: Any, *, depth: int = 8) -> Any:
    if depth <= 0:
        return "<max depth reached>"

    if isinstance(value, Mapping):
        redacted: dict[Any, Any] = {}
        for key, item in value.items():
            key_str = str(key).lower()
            if key_str in _SENSITIVE_PAYLOAD_KEYS:
                redacted[key] = "***"
            elif key_str in _EMAIL_PAYLOAD_KEYS:
                redacted[key] = mask_email(item)
            else:
                redacted[key] = _redact_payload(item, depth=depth - 1)
        return redacted

    if isinstance(value, (list, tuple)):
        return [_redact_payload(item, depth=depth - 1) for item in value]

    return value


def render_payload_preview(payload: Any) -> str:
    """Return a redacted, length-limited preview for request logging."""

    if payload is None:
        return "<none>"

    if isinstance(payload, (bytes, bytearray)):
        try:
            payload = json.loads(bytes(payload))
        except (UnicodeDecodeError, ValueError):
            return _format_body_preview(bytes(payload))

    if isinstance(payload, str):
        return _format_body_preview(payload.encode("utf-8", errors="ignore"))

    serialized = json.dumps(
        _redact_payload(payload),
        default=repr,
        ensure_ascii=False,
        separators=(",", ":"),
    )
    return _format_body_preview(serialized.encode("utf-8", errors="ignore"))


def register_http_request_logging(app: FastAPI, *, logger_name: str = "core.http") -> None:
    """Attach middleware that logs every HTTP request and its outcome."""

    if getattr(app.state, "_http_request_logging_installed", False):  # pragma: no cover - idempotence
        return

    logger = logging.getLogger(logger_name)

    @app.middleware("http")
    async def _log_request(request: Request, call_next):  # type: ignore[override]
        path = request.url.path
        is_quiet = any(path.startswith(prefix) for prefix in _QUIET_PATH_PREFIXES)

        if not is_quiet:
            client = request.client
            client_addr = _format_client_address((client.host, client.port) if client else None)
            logger.info("HTTP %s %s from %s", request.method, path, client_addr)

            if request.method in {"POST", "PUT", "PATCH"} and logger.isEnabledFor(logging.DEBUG):
                body = await request.body()
                logger.debug("HTTP %s %s payload %s", request.method, path, render_payload_preview(body))

        response = await call_next(request)

        if not is_quiet:
            logger.info("HTTP %s %s -> %s", request.method, path, response.status_code)
        return response

    app.state._http_request_logging_installed = True


__all__ = ["mask_email", "register_http_request_logging", "render_payload_preview"]
