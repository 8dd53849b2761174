"""Form validation rules shared by the content service and the page client.

Rules run in a fixed order and stop at the first failure, so a malformed
submission always receives exactly one message:

    presence -> email shape -> name length -> message length
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any

from config.server import FIELD_MAX_LENGTH
from core.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

MIN_NAME_LENGTH = 2
MIN_MESSAGE_LENGTH = 10


@dataclass(frozen=True)
class ValidationMessages:
    """User-facing wording for each rule."""

    email_required: str = "Email is required"
    fields_required: str = "All fields are required"
    invalid_email: str = "Please enter a valid email address"
    name_too_short: str = f"Name must be at least {MIN_NAME_LENGTH} characters long"
    message_too_short: str = f"Message must be at least {MIN_MESSAGE_LENGTH} characters long"


DEFAULT_MESSAGES = ValidationMessages()


@dataclass(frozen=True)
class ContactSubmission:
    """Sanitized contact form fields."""

    name: str
    email: str
    message: str


def is_present(value: Any) -> bool:
    """Return True when a raw JSON value counts as supplied.

    Missing keys, ``null``, ``false``, ``0`` and empty strings are absent;
    whitespace-only strings are present and fail later rules instead.
    """

    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value != 0 and not (isinstance(value, float) and math.isnan(value))
    return True


def sanitize_input(value: Any, max_length: int = FIELD_MAX_LENGTH) -> str:
    """Trim and length-cap free text; non-strings become an empty string."""

    if not isinstance(value, str):
        return ""
    return value.strip()[:max_length]


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(email))


def validate_subscription(
    email: Any,
    *,
    messages: ValidationMessages = DEFAULT_MESSAGES,
    max_length: int = FIELD_MAX_LENGTH,
) -> str:
    """Return the sanitized email or raise :class:`ValidationError`."""

    if not is_present(email):
        raise ValidationError(messages.email_required, field="email")

    sanitized = sanitize_input(email, max_length)
    if not is_valid_email(sanitized):
        raise ValidationError(messages.invalid_email, field="email")
    return sanitized


def validate_contact(
    name: Any,
    email: Any,
    message: Any,
    *,
    messages: ValidationMessages = DEFAULT_MESSAGES,
    max_length: int = FIELD_MAX_LENGTH,
) -> ContactSubmission:
    """Return sanitized contact fields or raise on the first failing rule."""

    if not (is_present(name) and is_present(email) and is_present(message)):
        raise ValidationError(messages.fields_required)

    submission = ContactSubmission(
        name=sanitize_input(name, max_length),
        email=sanitize_input(email, max_length),
        message=sanitize_input(message, max_length),
    )

    if not is_valid_email(submission.email):
        raise ValidationError(messages.invalid_email, field="email")
    if len(submission.name) < MIN_NAME_LENGTH:
        raise ValidationError(messages.name_too_short, field="name")
    if len(submission.message) < MIN_MESSAGE_LENGTH:
        raise ValidationError(messages.message_too_short, field="message")
    return submission


__all__ = [
    "DEFAULT_MESSAGES",
    "EMAIL_PATTERN",
    "MIN_MESSAGE_LENGTH",
    "MIN_NAME_LENGTH",
    "ContactSubmission",
    "ValidationMessages",
    "is_present",
    "is_valid_email",
    "sanitize_input",
    "validate_contact",
    "validate_subscription",
]
