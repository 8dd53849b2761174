"""Tests for the page controller flows."""

from __future__ import annotations

from typing import Any, Callable

import pytest
import pytest_asyncio

from features.site.content import HOME_CONTENT
from page_client.controller import PageController, build_page_controller
from page_client.controls import Button, ContactForm, TextInput
from page_client.exceptions import ApiError, NetworkError
from page_client.render import PageRegions
from page_client.state import ClientState, ThemeManager
from page_client.storage import MemoryStorage
from page_client.toast import Toast, Toaster


class FakeApi:
    """Scriptable stand-in for ApiClient."""

    def __init__(self) -> None:
        self.home: Any = {"success": True, "data": HOME_CONTENT.model_dump()}
        self.home_error: Exception | None = None
        self.submit_error: Exception | None = None
        self.calls: list[tuple[str, tuple]] = []
        self.during_call: Callable[[], None] | None = None

    async def get_home(self) -> dict:
        self.calls.append(("home", ()))
        if self.home_error is not None:
            raise self.home_error
        return self.home

    async def _submit(self, name: str, args: tuple) -> dict:
        self.calls.append((name, args))
        if self.during_call is not None:
            self.during_call()
        if self.submit_error is not None:
            raise self.submit_error
        return {"success": True, "message": "ok"}

    async def subscribe(self, email: str) -> dict:
        return await self._submit("subscribe", (email,))

    async def send_contact(self, name: str, email: str, message: str) -> dict:
        return await self._submit("contact", (name, email, message))


class Clock:
    def __init__(self, now: int = 1_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def clock() -> Clock:
    return Clock()


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def toasts() -> list[Toast]:
    return []


@pytest_asyncio.fixture
async def controller(api: FakeApi, clock: Clock, storage: MemoryStorage, toasts: list[Toast]):
    toaster = Toaster(duration=60, exit_duration=0)
    toaster.add_listener(lambda event, toast: toasts.append(toast) if event == "show" else None)
    state = ClientState.load(storage)
    page = PageController(
        api,  # type: ignore[arg-type]
        PageRegions(),
        state,
        toaster,
        theme=ThemeManager(state, Button(label="")),
        now_ms=clock,
    )
    yield page
    await toaster.aclose()


@pytest.mark.asyncio
async def test_load_content_renders_and_records_timestamp(
    controller: PageController, storage: MemoryStorage, toasts: list[Toast]
):
    assert await controller.load_content() is True

    assert "live the change" in controller.regions.hero.markup
    assert storage.get_item("lastDataLoad") == "1000000"
    assert toasts == []


@pytest.mark.asyncio
async def test_failed_load_uses_fallback_and_warns_once(
    controller: PageController, api: FakeApi, storage: MemoryStorage, toasts: list[Toast]
):
    api.home_error = NetworkError()

    assert await controller.load_content() is False

    assert '<h1 id="hero-title">New Yuga — Design the future</h1>' in controller.regions.hero.markup
    assert [(toast.kind, toast.message) for toast in toasts] == [
        ("warning", "Using offline content. Server may be unavailable.")
    ]
    assert controller.toaster.current is toasts[0]
    assert storage.get_item("lastDataLoad") is None


@pytest.mark.asyncio
async def test_malformed_content_uses_fallback(controller: PageController, api: FakeApi, toasts: list[Toast]):
    api.home = {"success": True, "data": {"hero": "nope"}}

    assert await controller.load_content() is False
    assert "New Yuga — Design the future" in controller.regions.hero.markup
    assert len(toasts) == 1


@pytest.mark.asyncio
async def test_toggle_theme_twice_restores_state(controller: PageController, storage: MemoryStorage):
    controller.toggle_theme()
    assert storage.get_item("theme") == "dark"

    controller.toggle_theme()
    assert storage.get_item("theme") == "light"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("value", "expected"),
    [("", "Email is required"), ("   ", "Email is required"), ("nope@", "Please enter a valid email address")],
)
async def test_subscription_rejected_locally(
    controller: PageController, api: FakeApi, toasts: list[Toast], value: str, expected: str
):
    email_input = TextInput(value=value)
    button = Button(label="Subscribe")

    assert await controller.handle_subscription(email_input, button) is False

    assert api.calls == []
    assert toasts[-1].message == expected
    assert toasts[-1].kind == "error"
    assert email_input.focused is True
    assert button.disabled is False
    assert button.label == "Subscribe"


@pytest.mark.asyncio
async def test_subscription_success(controller: PageController, api: FakeApi, toasts: list[Toast]):
    email_input = TextInput(value="  reader@example.com ")
    button = Button(label="Subscribe")
    seen: list[tuple[bool, str]] = []
    api.during_call = lambda: seen.append((button.disabled, button.label))

    assert await controller.handle_subscription(email_input, button) is True

    assert api.calls == [("subscribe", ("reader@example.com",))]
    assert seen == [(True, "Loading...")]
    assert email_input.value == ""
    assert toasts[-1].message == "Successfully subscribed to newsletter!"
    assert button.disabled is False
    assert button.label == "Subscribe"


@pytest.mark.asyncio
async def test_subscription_server_error(controller: PageController, api: FakeApi, toasts: list[Toast]):
    api.submit_error = ApiError("Please enter a valid email address", status_code=400)
    email_input = TextInput(value="reader@example.com")
    button = Button(label="Subscribe")

    assert await controller.handle_subscription(email_input, button) is False

    assert toasts[-1].message == "Please enter a valid email address"
    assert email_input.value == "reader@example.com"
    assert button.disabled is False
    assert button.label == "Subscribe"


@pytest.mark.asyncio
async def test_subscription_unexpected_error_uses_generic_message(
    controller: PageController, api: FakeApi, toasts: list[Toast]
):
    api.submit_error = RuntimeError("boom")
    button = Button(label="Subscribe")

    assert await controller.handle_subscription(TextInput(value="reader@example.com"), button) is False

    assert toasts[-1].message == "Failed to subscribe"
    assert button.disabled is False


@pytest.mark.asyncio
async def test_contact_reports_first_violation(controller: PageController, api: FakeApi, toasts: list[Toast]):
    form = ContactForm()
    form.name.value = "A"
    form.email.value = "a@b.com"
    form.message.value = "1234567890"

    assert await controller.handle_contact(form) is False

    assert api.calls == []
    assert [toast.message for toast in toasts] == ["Name must be at least 2 characters long"]
    assert form.submit.disabled is False
    assert form.name.value == "A"


@pytest.mark.asyncio
async def test_contact_success_resets_form(controller: PageController, api: FakeApi, toasts: list[Toast]):
    form = ContactForm()
    form.name.value = " Al "
    form.email.value = "a@b.com"
    form.message.value = "1234567890"
    seen: list[tuple[bool, str]] = []
    api.during_call = lambda: seen.append((form.submit.disabled, form.submit.label))

    assert await controller.handle_contact(form) is True

    assert api.calls == [("contact", ("Al", "a@b.com", "1234567890"))]
    assert seen == [(True, "Sending...")]
    assert form.values() == ("", "", "")
    assert toasts[-1].message == "Message sent successfully!"
    assert form.submit.disabled is False
    assert form.submit.label == "Send message"


@pytest.mark.asyncio
async def test_contact_failure_keeps_fields(controller: PageController, api: FakeApi, toasts: list[Toast]):
    api.submit_error = NetworkError()
    form = ContactForm()
    form.name.value = "Ada"
    form.email.value = "ada@example.com"
    form.message.value = "Hello there, world"

    assert await controller.handle_contact(form) is False

    assert toasts[-1].message == "Network error - please check your connection"
    assert form.name.value == "Ada"
    assert form.submit.disabled is False
    assert form.submit.label == "Send message"


@pytest.mark.asyncio
async def test_online_reloads_and_informs(controller: PageController, api: FakeApi, toasts: list[Toast]):
    await controller.on_online()

    assert toasts[0].message == "Connection restored"
    assert ("home", ()) in api.calls


@pytest.mark.asyncio
async def test_offline_informs_without_reload(controller: PageController, api: FakeApi, toasts: list[Toast]):
    controller.on_offline()

    assert toasts[-1].kind == "warning"
    assert toasts[-1].message == "You are offline. Some features may not work."
    assert api.calls == []


@pytest.mark.asyncio
async def test_visibility_reloads_only_when_stale(controller: PageController, api: FakeApi, clock: Clock):
    assert await controller.on_visibility_change(hidden=False) is True
    assert len(api.calls) == 1

    clock.now += 5 * 60 * 1000
    assert await controller.on_visibility_change(hidden=False) is False

    clock.now += 1
    assert await controller.on_visibility_change(hidden=False) is True
    assert len(api.calls) == 2


@pytest.mark.asyncio
async def test_hidden_page_never_reloads(controller: PageController, api: FakeApi):
    assert await controller.on_visibility_change(hidden=True) is False
    assert api.calls == []


@pytest.mark.asyncio
async def test_build_page_controller_uses_persisted_theme(tmp_path):
    path = tmp_path / "page.json"
    path.write_text('{"theme": "dark"}', encoding="utf-8")
    toggle = Button(label="")

    page = build_page_controller(base_url="http://api.test/api", storage_path=path, theme_toggle=toggle)

    assert page.theme.theme == "dark"
    assert toggle.label == "☀️ Light"
    await page.aclose()
