"""Service layer for the site content feature."""

from __future__ import annotations

import logging
from typing import Any

from config.server import FIELD_MAX_LENGTH
from core.pydantic_schemas import HealthStatus
from core.validation import validate_contact, validate_subscription
from features.site.collaborators import (
    ContactNotifier,
    LoggingContactNotifier,
    LoggingSubscriptionStore,
    SubscriptionStore,
)
from features.site.content import HOME_CONTENT
from features.site.schemas import PageContent

logger = logging.getLogger(__name__)

SUBSCRIBE_SUCCESS_MESSAGE = "Successfully subscribed to newsletter"
CONTACT_SUCCESS_MESSAGE = "Message sent successfully"


class SiteService:
    """Business logic behind the marketing site API.

    Holds no per-request state: the content snapshot is immutable and the
    collaborators are expected to be safe for concurrent use.
    """

    def __init__(
        self,
        content: PageContent = HOME_CONTENT,
        subscription_store: SubscriptionStore | None = None,
        contact_notifier: ContactNotifier | None = None,
        *,
        field_max_length: int = FIELD_MAX_LENGTH,
    ):
        self._content = content
        self._subscriptions = subscription_store or LoggingSubscriptionStore()
        self._notifier = contact_notifier or LoggingContactNotifier()
        self._field_max_length = field_max_length

    def get_home(self) -> PageContent:
        return self._content

    async def subscribe(self, email: Any) -> str:
        """Validate and hand a newsletter signup to the subscription store.

        Raises:
            ValidationError: missing or malformed email.
        """
        sanitized = validate_subscription(email, max_length=self._field_max_length)
        await self._subscriptions.add(sanitized)
        return SUBSCRIBE_SUCCESS_MESSAGE

    async def submit_contact(self, name: Any, email: Any, message: Any) -> str:
        """Validate and hand a contact message to the notifier.

        Raises:
            ValidationError: the first failing rule (presence, email shape,
                name length, message length).
        """
        submission = validate_contact(name, email, message, max_length=self._field_max_length)
        await self._notifier.notify(submission)
        return CONTACT_SUCCESS_MESSAGE

    def health_check(self) -> HealthStatus:
        return HealthStatus()


__all__ = ["CONTACT_SUCCESS_MESSAGE", "SUBSCRIBE_SUCCESS_MESSAGE", "SiteService"]
