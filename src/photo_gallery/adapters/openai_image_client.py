"""OpenAI Images API client for prompt-based generation."""

import base64
from dataclasses import dataclass
from typing import Protocol

from openai import AsyncOpenAI


class ImageGenerationClient(Protocol):
    """Interface for generative image models."""

    async def generate(self, *, model: str, prompt: str) -> bytes:
        """Return image bytes generated from a prompt."""


@dataclass
class OpenAIImageClient(ImageGenerationClient):
    """Image generation client backed by the OpenAI Images API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIImageClient":
        """Create an OpenAI image client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def generate(self, *, model: str, prompt: str) -> bytes:
        """Generate one image and return its decoded bytes."""
        response = await self.client.images.generate(model=model, prompt=prompt, n=1)
        if not response.data or not response.data[0].b64_json:
            raise RuntimeError("OpenAI returned no image data")
        return base64.b64decode(response.data[0].b64_json)

    async def close(self) -> None:
        await self.client.close()
