"""ImgBB image hosting client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from photo_gallery.adapters.unsplash_client import error_message_from_response
from photo_gallery.domain.errors import RemoteCallError


class ImageHostClient(Protocol):
    """Interface for the image host."""

    async def upload(self, encoded_image: str, name: str | None = None) -> str:
        """Upload a base64 payload and return its public URL."""


@dataclass
class HttpxImgbbClient(ImageHostClient):
    """Image host client using the ImgBB upload API."""

    api_key: str
    upload_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, upload_url: str) -> "HttpxImgbbClient":
        """Create an ImgBB client with a managed httpx session."""
        return cls(
            api_key=api_key, upload_url=upload_url, http_client=httpx.AsyncClient()
        )

    async def upload(self, encoded_image: str, name: str | None = None) -> str:
        """Post the base64 payload as a form and return the hosted URL."""
        form: dict[str, str] = {"key": self.api_key, "image": encoded_image}
        if name:
            form["name"] = name
        try:
            response = await self.http_client.post(
                self.upload_url, data=form, timeout=30
            )
        except httpx.HTTPError as exc:
            raise RemoteCallError(str(exc) or exc.__class__.__name__) from exc
        if response.is_error:
            raise RemoteCallError(
                error_message_from_response(response),
                status_code=response.status_code,
            )
        payload = response.json()
        url = (payload.get("data") or {}).get("url")
        if not url:
            raise RemoteCallError("Image host returned no URL")
        return str(url)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
