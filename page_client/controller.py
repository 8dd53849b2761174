"""Top-level page controller wiring content, forms, theme and toasts."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Mapping

from config.client import (
    CONTACT_BUSY_LABEL,
    MESSAGES,
    STALE_AFTER_MS,
    SUBSCRIBE_BUSY_LABEL,
)
from core.exceptions import ValidationError
from core.validation import DEFAULT_MESSAGES, ValidationMessages, validate_contact, validate_subscription
from features.site.schemas import PageContent
from page_client.api import ApiClient
from page_client.controls import Button, ContactForm, TextInput, busy
from page_client.exceptions import ClientError
from page_client.fallback import FALLBACK_CONTENT
from page_client.render import PageRegions, render_page
from page_client.state import ClientState, Theme, ThemeManager
from page_client.storage import JsonFileStorage, KeyValueStorage, MemoryStorage
from page_client.toast import Toaster

logger = logging.getLogger(__name__)


def _epoch_ms() -> int:
    return int(time.time() * 1000)


class PageController:
    """Drive one page view.

    Handlers never raise: every failure is logged, reported through the
    toaster, and any control disabled for the call is re-enabled.
    """

    def __init__(
        self,
        api: ApiClient,
        regions: PageRegions,
        state: ClientState,
        toaster: Toaster,
        *,
        theme: ThemeManager | None = None,
        fallback: PageContent = FALLBACK_CONTENT,
        validation_messages: ValidationMessages = DEFAULT_MESSAGES,
        messages: Mapping[str, str] = MESSAGES,
        stale_after_ms: int = STALE_AFTER_MS,
        now_ms: Callable[[], int] = _epoch_ms,
    ):
        self._api = api
        self.regions = regions
        self.state = state
        self.toaster = toaster
        self.theme = theme or ThemeManager(state)
        self._fallback = fallback
        self._validation_messages = validation_messages
        self._messages = messages
        self._stale_after_ms = stale_after_ms
        self._now_ms = now_ms

    @staticmethod
    def _failure_message(exc: Exception, generic: str) -> str:
        if isinstance(exc, ClientError) and exc.message:
            return exc.message
        return generic

    async def load_content(self) -> bool:
        """Fetch and render content, falling back to the bundled copy on failure."""

        try:
            envelope = await self._api.get_home()
            content = PageContent.model_validate(envelope.get("data"))
        except Exception as exc:
            logger.warning("Failed to load data: %s", exc)
            render_page(self._fallback, self.regions)
            self.toaster.show(self._messages["offline_content"], "warning")
            return False

        render_page(content, self.regions)
        self.state.mark_loaded(self._now_ms())
        return True

    def toggle_theme(self) -> Theme:
        return self.theme.toggle()

    async def handle_subscription(self, email_input: TextInput, button: Button) -> bool:
        email = email_input.value.strip()
        try:
            validate_subscription(email, messages=self._validation_messages)
        except ValidationError as exc:
            self.toaster.show(exc.message, "error")
            email_input.focus()
            return False

        with busy(button, SUBSCRIBE_BUSY_LABEL):
            try:
                await self._api.subscribe(email)
            except Exception as exc:
                logger.warning("Subscription failed: %s", exc)
                self.toaster.show(self._failure_message(exc, self._messages["subscribe_failed"]), "error")
                return False

        self.toaster.show(self._messages["subscribe_success"], "success")
        email_input.value = ""
        return True

    async def handle_contact(self, form: ContactForm) -> bool:
        name, email, message = form.values()
        try:
            submission = validate_contact(name, email, message, messages=self._validation_messages)
        except ValidationError as exc:
            self.toaster.show(exc.message, "error")
            return False

        with busy(form.submit, CONTACT_BUSY_LABEL):
            try:
                await self._api.send_contact(submission.name, submission.email, submission.message)
            except Exception as exc:
                logger.warning("Contact submission failed: %s", exc)
                self.toaster.show(self._failure_message(exc, self._messages["contact_failed"]), "error")
                return False

        self.toaster.show(self._messages["contact_success"], "success")
        form.reset()
        return True

    async def on_online(self) -> None:
        self.toaster.show(self._messages["online"], "success")
        await self.load_content()

    def on_offline(self) -> None:
        self.toaster.show(self._messages["offline"], "warning")

    async def on_visibility_change(self, hidden: bool) -> bool:
        """Reload stale content when the page comes back to the foreground."""

        if hidden:
            return False
        if not self.state.is_stale(self._now_ms(), self._stale_after_ms):
            return False
        logger.debug("Content is stale; reloading")
        await self.load_content()
        return True

    async def aclose(self) -> None:
        await self.toaster.aclose()
        await self._api.aclose()


def build_page_controller(
    *,
    base_url: str | None = None,
    storage: KeyValueStorage | None = None,
    storage_path: str | Path | None = None,
    theme_toggle: Button | None = None,
) -> PageController:
    """Assemble a controller from configuration defaults.

    ``storage_path`` selects a :class:`JsonFileStorage`; without it the state
    lives in memory for the lifetime of the controller.
    """

    if storage is None:
        storage = JsonFileStorage(storage_path) if storage_path else MemoryStorage()
    state = ClientState.load(storage)
    return PageController(
        ApiClient(base_url),
        PageRegions(),
        state,
        Toaster(),
        theme=ThemeManager(state, theme_toggle or Button(label="")),
    )


__all__ = ["PageController", "build_page_controller"]
