"""Transport-level request body limits."""

from __future__ import annotations

import logging

from fastapi import FastAPI, status
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from core.http.errors import PAYLOAD_TOO_LARGE_MESSAGE
from core.pydantic_schemas import error as api_error

logger = logging.getLogger(__name__)

_BODY_METHODS = {"POST", "PUT", "PATCH"}


def _too_large() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        content=api_error(PAYLOAD_TOO_LARGE_MESSAGE),
    )


class BodySizeLimitMiddleware:
    """Reject request bodies larger than ``max_bytes`` with a 413 envelope.

    A declared ``Content-Length`` is checked up front. Bodies without one are
    counted chunk by chunk as they arrive; the request is rejected as soon as
    the count passes the cap, otherwise the buffered chunks are replayed to
    the application.
    """

    def __init__(self, app: ASGIApp, max_bytes: int) -> None:
        self.app = app
        self.max_bytes = max_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        method = scope["method"]
        path = scope["path"]
        declared = Headers(scope=scope).get("content-length")
        if declared is not None:
            try:
                declared_size = int(declared)
            except ValueError:
                declared_size = 0
            if declared_size > self.max_bytes:
                logger.warning(
                    "Rejected %s %s: declared body %s bytes exceeds %s",
                    method,
                    path,
                    declared_size,
                    self.max_bytes,
                )
                await _too_large()(scope, receive, send)
                return
            await self.app(scope, receive, send)
            return

        if method not in _BODY_METHODS:
            await self.app(scope, receive, send)
            return

        buffered: list[Message] = []
        received = 0
        while True:
            message = await receive()
            buffered.append(message)
            if message["type"] != "http.request":
                break
            received += len(message.get("body", b""))
            if received > self.max_bytes:
                logger.warning("Rejected %s %s: streamed body exceeds %s", method, path, self.max_bytes)
                await _too_large()(scope, receive, send)
                return
            if not message.get("more_body", False):
                break

        pending = iter(buffered)

        async def replay() -> Message:
            try:
                return next(pending)
            except StopIteration:
                return await receive()

        await self.app(scope, replay, send)


def register_body_size_limit(app: FastAPI, max_bytes: int) -> None:
    """Install :class:`BodySizeLimitMiddleware` on ``app``."""

    app.add_middleware(BodySizeLimitMiddleware, max_bytes=max_bytes)


__all__ = ["BodySizeLimitMiddleware", "register_body_size_limit"]
