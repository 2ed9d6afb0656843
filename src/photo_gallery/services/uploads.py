"""Upload flow for personal images."""

import base64
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from photo_gallery.adapters.imgbb_client import ImageHostClient
from photo_gallery.domain.errors import (
    AuthRequiredError,
    InputValidationError,
    PersistenceError,
    UploadFailedError,
)
from photo_gallery.domain.records import (
    SessionUser,
    UploadCandidate,
    UploadedImageRecord,
)

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = 2 * 1024 * 1024


class UploadedImageRepository(Protocol):
    """Persistence interface for uploaded images."""

    def create_image(
        self, user_id: UUID, image_url: str, user_name: str, created_at: datetime
    ) -> UploadedImageRecord:
        """Create an uploaded image record and return it."""

    def list_images(self, user_id: UUID) -> list[UploadedImageRecord]:
        """Return uploaded images owned by the user."""


@dataclass
class UploadService:
    """Validates, hosts and records user uploads."""

    image_host: ImageHostClient
    repository: UploadedImageRepository
    max_upload_bytes: int = MAX_UPLOAD_BYTES

    def validate(
        self, user: SessionUser | None, candidate: UploadCandidate
    ) -> SessionUser:
        """Reject uploads that cannot proceed, before any network call."""
        if user is None:
            raise AuthRequiredError("Please login to upload images")
        if not candidate.content_type.startswith("image/"):
            raise InputValidationError("Please select an image file")
        if candidate.size > self.max_upload_bytes:
            limit_mb = self.max_upload_bytes // (1024 * 1024)
            raise InputValidationError(f"Image size should be less than {limit_mb}MB")
        return user

    async def upload_image(
        self, user: SessionUser | None, candidate: UploadCandidate
    ) -> UploadedImageRecord:
        """Upload an image and record it for the user.

        The record is written only after the host accepts the file; a hosted
        file whose record write fails is left in place.
        """
        owner = self.validate(user, candidate)
        try:
            payload = _strip_data_url_prefix(_to_data_url(candidate))
            image_url = await self.image_host.upload(payload, name=candidate.filename)
            return self.repository.create_image(
                user_id=owner.id,
                image_url=image_url,
                user_name=owner.display_name or "Anonymous",
                created_at=datetime.now(tz=UTC),
            )
        except Exception as exc:
            logger.exception("Error uploading image for %s", owner.id)
            message = "Failed to upload image. Please try again."
            raise UploadFailedError(message) from exc

    def list_images(self, user_id: UUID | None) -> list[UploadedImageRecord]:
        """Return the user's uploads."""
        if user_id is None:
            raise AuthRequiredError("Please login to upload and view images")
        try:
            return self.repository.list_images(user_id)
        except Exception as exc:
            logger.exception("Error fetching images for %s", user_id)
            raise PersistenceError("Failed to fetch your images") from exc


def _to_data_url(candidate: UploadCandidate) -> str:
    """Encode file contents as a base64 data URL."""
    encoded = base64.b64encode(candidate.content).decode("utf-8")
    return f"data:{candidate.content_type};base64,{encoded}"


def _strip_data_url_prefix(data_url: str) -> str:
    """Drop the scheme and encoding prefix, keeping the raw payload."""
    _, _, payload = data_url.partition(",")
    return payload
