"""Downstream collaborators that receive accepted form submissions.

The default implementations only log. When a webhook URL is configured the
submission is forwarded as JSON (for example to a mailing-list provider or a
notification relay).
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any, Protocol

import httpx

from config.server import WEBHOOK_TIMEOUT_SECONDS
from core.config import Settings
from core.exceptions import DeliveryError
from core.validation import ContactSubmission

logger = logging.getLogger(__name__)


class SubscriptionStore(Protocol):
    async def add(self, email: str) -> None: ...


class ContactNotifier(Protocol):
    async def notify(self, submission: ContactSubmission) -> None: ...


class LoggingSubscriptionStore:
    """Record subscriptions in the application log only."""

    async def add(self, email: str) -> None:
        logger.info("New subscription: %s", email)


class LoggingContactNotifier:
    """Record contact messages in the application log only."""

    async def notify(self, submission: ContactSubmission) -> None:
        logger.info(
            "New contact form submission: name=%s email=%s message=%r",
            submission.name,
            submission.email,
            submission.message,
        )


class WebhookForwarder:
    """POST JSON payloads to a fixed URL, raising on any delivery failure."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = WEBHOOK_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._url = url
        self._timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    async def post(self, payload: dict[str, Any]) -> None:
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(self._url, json=payload)
        except httpx.RequestError as exc:
            logger.error("Webhook delivery to %s failed: %s", self._url, exc)
            raise DeliveryError("Webhook request failed", target=self._url, original_error=exc) from exc

        if response.status_code >= 400:
            logger.warning("Webhook %s returned %s: %s", self._url, response.status_code, response.text)
            raise DeliveryError(
                f"Webhook returned HTTP {response.status_code}",
                target=self._url,
            )


def _utcnow_iso() -> str:
    return datetime.now(UTC).isoformat()


class WebhookSubscriptionStore:
    def __init__(self, forwarder: WebhookForwarder):
        self._forwarder = forwarder

    async def add(self, email: str) -> None:
        await self._forwarder.post({"email": email, "subscribed_at": _utcnow_iso()})
        logger.info("Subscription forwarded to %s", self._forwarder.url)


class WebhookContactNotifier:
    def __init__(self, forwarder: WebhookForwarder):
        self._forwarder = forwarder

    async def notify(self, submission: ContactSubmission) -> None:
        await self._forwarder.post(
            {
                "name": submission.name,
                "email": submission.email,
                "message": submission.message,
                "received_at": _utcnow_iso(),
            }
        )
        logger.info("Contact message forwarded to %s", self._forwarder.url)


def build_subscription_store(settings: Settings) -> SubscriptionStore:
    if settings.subscribe_webhook_url:
        return WebhookSubscriptionStore(WebhookForwarder(settings.subscribe_webhook_url))
    return LoggingSubscriptionStore()


def build_contact_notifier(settings: Settings) -> ContactNotifier:
    if settings.contact_webhook_url:
        return WebhookContactNotifier(WebhookForwarder(settings.contact_webhook_url))
    return LoggingContactNotifier()


__all__ = [
    "ContactNotifier",
    "LoggingContactNotifier",
    "LoggingSubscriptionStore",
    "SubscriptionStore",
    "WebhookContactNotifier",
    "WebhookForwarder",
    "WebhookSubscriptionStore",
    "build_contact_notifier",
    "build_subscription_store",
]
