from __future__ import annotations

"""New Yuga site API - Main Application Entry Point
This is the FastAPI application factory for the marketing site backend.
Architecture Overview:
    - Read-only marketing content snapshot built once at startup
    - Two form submissions (newsletter signup, contact message) validated
      server-side and handed to substitutable collaborators
    - Every response is a JSON envelope: ``{"success": ..., "data"|"message"|"error": ...}``
Entry Points:
    - GET  /api/home      - marketing content
    - POST /api/subscribe - newsletter signup
    - POST /api/contact   - contact message
    - GET  /api/health    - health check
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import Settings, get_settings
from core.exceptions import InternalError, ServiceError, ValidationError
from core.http.errors import format_internal_error, format_not_found_error, format_service_error, status_for
from core.http.limits import register_body_size_limit
from core.logging import setup_logging
from core.observability import register_http_request_logging
from core.pydantic_schemas import error as api_error
from features.site import router as site_router

setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events."""
    settings: Settings = app.state.settings
    logger.info("New Yuga API starting (environment=%s)", settings.environment)
    logger.info("CORS origins: %s", ", ".join(settings.cors_origins))
    yield
    logger.info("Application shutting down...")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Application factory returning a configured FastAPI instance."""

    settings = settings or get_settings()

    app = FastAPI(
        title="New Yuga Site API",
        description="Marketing content and form submissions for the New Yuga website",
        version="1.0.0",
        debug=settings.debug_mode,
        lifespan=lifespan,
    )
    app.state.settings = settings

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        """Return a structured envelope for typed service errors."""

        if isinstance(exc, ValidationError):
            logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
        elif isinstance(exc, InternalError) and exc.original_error is not None:
            logger.error(
                "Internal error on %s %s",
                request.method,
                request.url.path,
                exc_info=exc.original_error,
            )
        return JSONResponse(status_code=status_for(exc), content=format_service_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Unknown routes and methods share the catch-all 404 envelope."""

        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=format_not_found_error())
        return JSONResponse(status_code=exc.status_code, content=api_error(str(exc.detail)))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info("Request validation failed on %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=api_error("Invalid request"))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=format_internal_error(),
        )

    # Innermost first: body limit, then request logging, then CORS outermost
    register_body_size_limit(app, settings.max_body_bytes)
    register_http_request_logging(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(site_router)

    logger.info("Application created with site router")
    return app


app = create_app()


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    import uvicorn

    from config.server import get_host, get_port

    port = get_port()
    logger.info("New Yuga API server running on http://localhost:%s", port)
    logger.info("Health check: http://localhost:%s/api/health", port)
    uvicorn.run(app, host=get_host(), port=port)
