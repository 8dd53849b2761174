"""Test doubles shared across the suite."""

from __future__ import annotations

from typing import Callable

import httpx

from core.validation import ContactSubmission


class RecordingSubscriptionStore:
    """Subscription store that remembers every accepted address."""

    def __init__(self, error: Exception | None = None):
        self.emails: list[str] = []
        self._error = error

    async def add(self, email: str) -> None:
        if self._error is not None:
            raise self._error
        self.emails.append(email)


class RecordingContactNotifier:
    """Contact notifier that remembers every accepted submission."""

    def __init__(self, error: Exception | None = None):
        self.submissions: list[ContactSubmission] = []
        self._error = error

    async def notify(self, submission: ContactSubmission) -> None:
        if self._error is not None:
            raise self._error
        self.submissions.append(submission)


def json_transport(
    handler: Callable[[httpx.Request], httpx.Response],
    calls: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """Wrap ``handler`` in a MockTransport, optionally recording requests."""

    def _handle(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        return handler(request)

    return httpx.MockTransport(_handle)


__all__ = ["RecordingContactNotifier", "RecordingSubscriptionStore", "json_transport"]
