"""Pydantic schemas for the site content feature."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class HeroSection(_FrozenModel):
    title: str
    subtitle: str


class ContentItem(_FrozenModel):
    """A titled entry in the feature list or service grid."""

    title: str
    desc: str


class ContactInfo(_FrozenModel):
    email: str
    social: str


class PageContent(_FrozenModel):
    """Canonical snapshot of the marketing copy served to every caller."""

    hero: HeroSection
    features: tuple[ContentItem, ...]
    services: tuple[ContentItem, ...]
    blog: tuple[str, ...]
    about: str
    contact: ContactInfo


class SubscribeRequest(BaseModel):
    """Newsletter signup body.

    Fields accept any JSON value so that the ordered validation rules, not
    schema parsing, decide which message a bad submission receives.
    """

    model_config = ConfigDict(extra="ignore")

    email: Any = None


class ContactRequest(BaseModel):
    """Contact form body; see :class:`SubscribeRequest` for field typing."""

    model_config = ConfigDict(extra="ignore")

    name: Any = None
    email: Any = None
    message: Any = None


__all__ = [
    "ContactInfo",
    "ContactRequest",
    "ContentItem",
    "HeroSection",
    "PageContent",
    "SubscribeRequest",
]
