"""Prompt-based image generation."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from photo_gallery.adapters.openai_image_client import ImageGenerationClient
from photo_gallery.domain.errors import (
    AuthRequiredError,
    GenerationFailedError,
    InputValidationError,
    PersistenceError,
)
from photo_gallery.domain.records import GeneratedImageRecord, SessionUser

logger = logging.getLogger(__name__)


class GeneratedImageRepository(Protocol):
    """Persistence interface for generated images."""

    def create_generated(
        self, user_id: UUID, prompt: str, image_url: str, created_at: datetime
    ) -> GeneratedImageRecord:
        """Create a generated image record and return it."""

    def list_generated(self, user_id: UUID) -> list[GeneratedImageRecord]:
        """Return generated images owned by the user."""


class ImageStorage(Protocol):
    """Object storage for generated image files."""

    def store(self, path: str, content: bytes, content_type: str) -> str:
        """Store bytes at a path and return a public URL."""


@dataclass
class ImageGenerationService:
    """Generates an image, stores the file and records it."""

    client: ImageGenerationClient
    storage: ImageStorage
    repository: GeneratedImageRepository
    model: str

    async def generate(
        self, user: SessionUser | None, prompt: str
    ) -> GeneratedImageRecord:
        """Generate an image for a prompt and return the stored record."""
        if user is None:
            raise AuthRequiredError("Please login to generate images")
        cleaned = prompt.strip()
        if not cleaned:
            raise InputValidationError("Please enter a prompt")
        try:
            content = await self.client.generate(model=self.model, prompt=cleaned)
            created_at = datetime.now(tz=UTC)
            millis = int(created_at.timestamp() * 1000)
            path = f"generated_images/{user.id}/{millis}.png"
            image_url = self.storage.store(path, content, "image/png")
            return self.repository.create_generated(
                user_id=user.id,
                prompt=cleaned,
                image_url=image_url,
                created_at=created_at,
            )
        except Exception as exc:
            logger.exception("Error generating image for %s", user.id)
            raise GenerationFailedError(
                "Failed to generate image. Please try again."
            ) from exc

    def list_generated(self, user_id: UUID | None) -> list[GeneratedImageRecord]:
        """Return the user's previous generations."""
        if user_id is None:
            raise AuthRequiredError("Please login to generate images")
        try:
            return self.repository.list_generated(user_id)
        except Exception as exc:
            logger.exception("Error fetching generated images for %s", user_id)
            raise PersistenceError("Failed to fetch your images") from exc
