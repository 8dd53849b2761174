"""Persisted client state: theme preference and last content load."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Mapping

from config.client import DEFAULT_THEME, LAST_LOAD_STORAGE_KEY, THEME_LABELS, THEME_STORAGE_KEY
from page_client.controls import Button
from page_client.storage import KeyValueStorage

logger = logging.getLogger(__name__)

Theme = Literal["light", "dark"]
THEMES: tuple[Theme, ...] = ("light", "dark")


def _parse_theme(raw: str | None) -> Theme:
    if raw in THEMES:
        return raw  # type: ignore[return-value]
    return DEFAULT_THEME  # type: ignore[return-value]


def _parse_timestamp(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring malformed %s value %r", LAST_LOAD_STORAGE_KEY, raw)
        return None


@dataclass
class ClientState:
    """Small mutable state shared by the page controller.

    Every mutation is written through to ``storage`` immediately.
    """

    storage: KeyValueStorage
    theme: Theme = DEFAULT_THEME  # type: ignore[assignment]
    last_load_ms: int | None = None

    @classmethod
    def load(cls, storage: KeyValueStorage) -> "ClientState":
        return cls(
            storage=storage,
            theme=_parse_theme(storage.get_item(THEME_STORAGE_KEY)),
            last_load_ms=_parse_timestamp(storage.get_item(LAST_LOAD_STORAGE_KEY)),
        )

    def set_theme(self, theme: Theme) -> None:
        self.theme = _parse_theme(theme)
        self.storage.set_item(THEME_STORAGE_KEY, self.theme)

    def mark_loaded(self, now_ms: int) -> None:
        self.last_load_ms = now_ms
        self.storage.set_item(LAST_LOAD_STORAGE_KEY, str(now_ms))

    def is_stale(self, now_ms: int, max_age_ms: int) -> bool:
        """True when nothing was loaded yet or the last load is older than ``max_age_ms``."""

        return self.last_load_ms is None or now_ms - self.last_load_ms > max_age_ms


class ThemeManager:
    """Binary light/dark switch mirrored on a visible toggle control."""

    def __init__(
        self,
        state: ClientState,
        indicator: Button | None = None,
        *,
        labels: Mapping[str, str] = THEME_LABELS,
    ):
        self._state = state
        self._indicator = indicator
        self._labels = labels
        self.apply(state.theme)

    @property
    def theme(self) -> Theme:
        return self._state.theme

    def apply(self, theme: Theme) -> None:
        self._state.set_theme(theme)
        if self._indicator is not None:
            self._indicator.label = self._labels[self._state.theme]

    def toggle(self) -> Theme:
        self.apply("dark" if self.theme == "light" else "light")
        logger.debug("Theme switched to %s", self.theme)
        return self.theme


__all__ = ["ClientState", "THEMES", "Theme", "ThemeManager"]
