"""Observability helpers for request logging."""

from .request_logging import (
    mask_email,
    register_http_request_logging,
    render_payload_preview,
)

__all__ = [
    "mask_email",
    "register_http_request_logging",
    "render_payload_preview",
]
