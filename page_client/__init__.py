"""Async page client for the New Yuga site API.

Fetches and renders marketing content, runs the newsletter and contact forms,
and keeps a persisted light/dark theme preference.
"""

from page_client.api import ApiClient
from page_client.controller import PageController, build_page_controller
from page_client.controls import Button, ContactForm, TextInput
from page_client.exceptions import ApiError, ClientError, NetworkError
from page_client.render import PageRegions, Region, render_page
from page_client.state import ClientState, ThemeManager
from page_client.storage import JsonFileStorage, KeyValueStorage, MemoryStorage
from page_client.toast import Toast, Toaster

__all__ = [
    "ApiClient",
    "ApiError",
    "Button",
    "ClientError",
    "ClientState",
    "ContactForm",
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "NetworkError",
    "PageController",
    "PageRegions",
    "Region",
    "TextInput",
    "ThemeManager",
    "Toast",
    "Toaster",
    "build_page_controller",
    "render_page",
]
