"""Unsplash API client."""

import logging
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote

import httpx

from photo_gallery.domain.errors import RemoteCallError

logger = logging.getLogger(__name__)


class PhotoSourceClient(Protocol):
    """Interface for the remote photo source."""

    async def random_photos(self, count: int) -> object:
        """Return raw JSON for a random sample (a photo or a list of photos)."""

    async def search_photos(self, query: str) -> dict[str, object]:
        """Return raw JSON for a keyword search."""

    async def get_photo(self, photo_id: str) -> dict[str, object]:
        """Return raw JSON for a single photo."""


@dataclass
class HttpxUnsplashClient(PhotoSourceClient):
    """HTTPX-backed Unsplash client."""

    access_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, access_key: str, base_url: str) -> "HttpxUnsplashClient":
        """Create an Unsplash client with a managed httpx session."""
        return cls(
            access_key=access_key, base_url=base_url, http_client=httpx.AsyncClient()
        )

    async def random_photos(self, count: int) -> object:
        """Fetch a random sample of photos."""
        return await self._get("/photos/random", params={"count": count})

    async def search_photos(self, query: str) -> dict[str, object]:
        """Search photos by keyword."""
        return await self._get("/search/photos", params={"query": query})

    async def get_photo(self, photo_id: str) -> dict[str, object]:
        """Fetch a photo by its identifier."""
        return await self._get(f"/photos/{quote(photo_id, safe='')}")

    async def _get(
        self, path: str, params: dict[str, object] | None = None
    ) -> object:
        try:
            response = await self.http_client.get(
                f"{self.base_url}{path}",
                params=params,
                headers={"Authorization": f"Client-ID {self.access_key}"},
                timeout=15,
            )
        except httpx.HTTPError as exc:
            logger.warning("Photo source request failed: %s", exc)
            raise RemoteCallError(str(exc) or exc.__class__.__name__) from exc
        if response.is_error:
            raise RemoteCallError(
                error_message_from_response(response),
                status_code=response.status_code,
            )
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def error_message_from_response(response: httpx.Response) -> str:
    """Build a readable message from an error response body.

    Precedence is the body's ``errors`` list, then its ``message`` field, then
    the HTTP status line.
    """
    try:
        payload = response.json()
    except ValueError:
        return f"HTTP error! status: {response.status_code}"
    if isinstance(payload, dict):
        errors = payload.get("errors")
        if isinstance(errors, list) and errors:
            return ", ".join(str(error) for error in errors)
        message = payload.get("message")
        if isinstance(message, str) and message:
            return message
    return f"{response.status_code} {response.reason_phrase}".strip()
