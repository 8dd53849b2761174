"""FastAPI dependencies for the site feature."""

from __future__ import annotations

import logging

from fastapi import Request

from core.config import Settings
from features.site.collaborators import build_contact_notifier, build_subscription_store
from features.site.service import SiteService

logger = logging.getLogger(__name__)


def build_site_service(settings: Settings) -> SiteService:
    """Wire a SiteService with collaborators selected by ``settings``."""

    logger.debug("Initialising site service (environment=%s)", settings.environment)
    return SiteService(
        subscription_store=build_subscription_store(settings),
        contact_notifier=build_contact_notifier(settings),
        field_max_length=settings.field_max_length,
    )


def get_site_service(request: Request) -> SiteService:
    """Return the application's SiteService, building it from app settings on first use."""

    state = request.app.state
    service = getattr(state, "site_service", None)
    if service is None:
        service = build_site_service(state.settings)
        state.site_service = service
    return service


__all__ = ["build_site_service", "get_site_service"]
