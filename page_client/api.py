"""Async HTTP client for the site API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from config.client import REQUEST_TIMEOUT_SECONDS, get_api_base_url
from page_client.exceptions import ApiError, NetworkError

logger = logging.getLogger(__name__)


class ApiClient:
    """Thin JSON client that turns every failure into a :class:`ClientError`.

    ``ApiError`` carries the server's ``error`` text when one was returned;
    transport failures (refused connections, timeouts) become ``NetworkError``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (base_url or get_api_base_url()).rstrip("/")
        self._client = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def request(
        self,
        endpoint: str,
        *,
        method: str = "GET",
        payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        url = f"{self._base_url}{endpoint}"
        try:
            response = await self._client.request(method, url, json=payload)
        except httpx.TransportError as exc:
            logger.error("API Error (%s): %s", endpoint, exc)
            raise NetworkError(original_error=exc) from exc

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success:
            error = data.get("error") if isinstance(data, dict) else None
            logger.error("API Error (%s): HTTP %s %s", endpoint, response.status_code, error or "")
            raise ApiError(error or f"HTTP {response.status_code}", status_code=response.status_code)

        if not isinstance(data, dict):
            logger.error("API Error (%s): response is not a JSON object", endpoint)
            raise ApiError("Invalid response from server", status_code=response.status_code)
        return data

    async def get_home(self) -> dict[str, Any]:
        return await self.request("/home")

    async def subscribe(self, email: str) -> dict[str, Any]:
        return await self.request("/subscribe", method="POST", payload={"email": email})

    async def send_contact(self, name: str, email: str, message: str) -> dict[str, Any]:
        return await self.request(
            "/contact",
            method="POST",
            payload={"name": name, "email": email, "message": message},
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


__all__ = ["ApiClient"]
