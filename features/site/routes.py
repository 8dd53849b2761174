"""FastAPI routes for the marketing site API."""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from core.exceptions import InternalError, ValidationError
from core.http.errors import GENERIC_ERROR_MESSAGE
from core.pydantic_schemas import ok as api_ok
from features.site.dependencies import get_site_service
from features.site.schemas import ContactRequest, SubscribeRequest
from features.site.service import SiteService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["site"])

SUBSCRIBE_FAILED_MESSAGE = "Failed to process subscription"
CONTACT_FAILED_MESSAGE = "Failed to send message"


async def _read_json_object(request: Request) -> dict[str, Any]:
    """Return the JSON body as a dict; anything else counts as an empty body."""

    body = await request.body()
    if not body:
        return {}
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, ValueError):
        logger.info("Ignoring non-JSON body on %s", request.url.path)
        return {}
    return payload if isinstance(payload, dict) else {}


@router.get("/home")
async def get_home(service: SiteService = Depends(get_site_service)) -> dict:
    """Return the marketing content snapshot."""
    try:
        content = service.get_home()
        return api_ok(data=content.model_dump())
    except Exception as exc:
        logger.exception("Error serving home data: %s", exc)
        raise InternalError(GENERIC_ERROR_MESSAGE, original_error=exc) from exc


@router.post("/subscribe")
async def subscribe(request: Request, service: SiteService = Depends(get_site_service)) -> dict:
    """
    Subscribe an email address to the newsletter.

    Repeated submissions of the same address are each accepted.
    """
    try:
        body = SubscribeRequest.model_validate(await _read_json_object(request))
        message = await service.subscribe(body.email)
    except ValidationError:
        raise
    except Exception as exc:
        logger.exception("Subscription error: %s", exc)
        raise InternalError(SUBSCRIBE_FAILED_MESSAGE, original_error=exc) from exc
    return api_ok(message)


@router.post("/contact")
async def contact(request: Request, service: SiteService = Depends(get_site_service)) -> dict:
    """Accept a contact form message."""
    try:
        body = ContactRequest.model_validate(await _read_json_object(request))
        message = await service.submit_contact(body.name, body.email, body.message)
    except ValidationError:
        raise
    except Exception as exc:
        logger.exception("Contact form error: %s", exc)
        raise InternalError(CONTACT_FAILED_MESSAGE, original_error=exc) from exc
    return api_ok(message)


@router.get("/health")
async def health_check(service: SiteService = Depends(get_site_service)) -> dict:
    return service.health_check().model_dump()


__all__ = ["CONTACT_FAILED_MESSAGE", "SUBSCRIBE_FAILED_MESSAGE", "router"]
