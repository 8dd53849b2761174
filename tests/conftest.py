"""Test configuration helpers."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# Declared explicitly so runners that disable plugin auto-discovery via
# ``PYTEST_DISABLE_PLUGIN_AUTOLOAD`` still get the event loop fixtures.
pytest_plugins = ("pytest_asyncio",)

# Ensure the repository root is importable so ``import core`` and the other
# top-level packages resolve from any working directory.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("NODE_ENV", "test")

from core.config import Settings  # noqa: E402
from features.site.dependencies import get_site_service  # noqa: E402
from features.site.service import SiteService  # noqa: E402
from tests.helpers import RecordingContactNotifier, RecordingSubscriptionStore  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def suppress_asyncio_debug_logging() -> None:
    """Prevent asyncio debug logs from writing to closed pytest capture streams."""

    logger = logging.getLogger("asyncio")
    if logger.getEffectiveLevel() < logging.INFO:
        logger.setLevel(logging.INFO)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        environment="test",
        cors_origins=("http://localhost:3000",),
        max_body_bytes=1024,
        subscribe_webhook_url=None,
        contact_webhook_url=None,
    )


@pytest.fixture
def subscription_store() -> RecordingSubscriptionStore:
    return RecordingSubscriptionStore()


@pytest.fixture
def contact_notifier() -> RecordingContactNotifier:
    return RecordingContactNotifier()


@pytest.fixture
def site_service(
    subscription_store: RecordingSubscriptionStore,
    contact_notifier: RecordingContactNotifier,
) -> SiteService:
    return SiteService(subscription_store=subscription_store, contact_notifier=contact_notifier)


@pytest.fixture
def site_app(test_settings: Settings, site_service: SiteService) -> FastAPI:
    """Return an application wired to recording collaborators."""

    from main import create_app

    app = create_app(test_settings)
    app.dependency_overrides[get_site_service] = lambda: site_service
    return app


@pytest_asyncio.fixture
async def async_client(site_app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=site_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
