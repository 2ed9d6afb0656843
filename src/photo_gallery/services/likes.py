"""Liked-photo reconciliation between the gallery and the document store."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from photo_gallery.domain.errors import AuthRequiredError, PersistenceError
from photo_gallery.domain.photos import Photo
from photo_gallery.domain.records import LikedPhotoRecord

logger = logging.getLogger(__name__)

LikedMapping = dict[str, UUID]


class LikedPhotoRepository(Protocol):
    """Persistence interface for liked photos."""

    def create_like(  # noqa: PLR0913
        self,
        user_id: UUID,
        photo_id: str,
        image_url: str,
        description: str | None,
        photographer_name: str,
        liked_at: datetime,
    ) -> LikedPhotoRecord:
        """Create a liked photo record and return it."""

    def delete_like(self, user_id: UUID, record_id: UUID) -> None:
        """Delete a liked photo record."""

    def list_likes(self, user_id: UUID) -> list[LikedPhotoRecord]:
        """Return all liked photo records owned by the user."""


@dataclass
class LikedPhotoService:
    """Keeps an in-memory liked mapping in step with stored records.

    The mapping goes from source photo id to the id of the user's record for
    that like. It mirrors the store as of the last load or toggle; callers
    reload it whenever the signed-in user changes.
    """

    repository: LikedPhotoRepository

    def load_liked_set(self, user_id: UUID | None) -> LikedMapping:
        """Return the liked mapping for a user, empty when signed out."""
        if user_id is None:
            return {}
        try:
            records = self.repository.list_likes(user_id)
        except Exception as exc:
            logger.exception("Failed to load liked photos for %s", user_id)
            raise PersistenceError("Failed to fetch liked photos") from exc
        return {record.photo_id: record.id for record in records}

    def toggle_like(
        self, user_id: UUID | None, photo: Photo, liked: LikedMapping
    ) -> bool:
        """Like or unlike a photo, updating ``liked`` in place.

        Returns whether the photo is liked afterwards.
        """
        if user_id is None:
            raise AuthRequiredError("Please login to like photos")
        try:
            record_id = liked.get(photo.id)
            if record_id is not None:
                self.repository.delete_like(user_id, record_id)
                liked.pop(photo.id, None)
                return False
            record = self.repository.create_like(
                user_id=user_id,
                photo_id=photo.id,
                image_url=photo.urls.regular or "",
                description=photo.display_description,
                photographer_name=photo.user.name,
                liked_at=datetime.now(tz=UTC),
            )
        except Exception as exc:
            logger.exception("Failed to toggle like for photo %s", photo.id)
            raise PersistenceError("Failed to update like status") from exc
        liked[photo.id] = record.id
        return True

    def list_liked_photos(self, user_id: UUID | None) -> list[LikedPhotoRecord]:
        """Return the user's liked photo records."""
        if user_id is None:
            raise AuthRequiredError("Please login to view your liked photos")
        try:
            return self.repository.list_likes(user_id)
        except Exception as exc:
            logger.exception("Failed to list liked photos for %s", user_id)
            raise PersistenceError("Failed to fetch liked photos") from exc

    def unlike(self, user_id: UUID | None, record_id: UUID) -> None:
        """Delete a liked photo record by its store id."""
        if user_id is None:
            raise AuthRequiredError("Please login to unlike photos")
        try:
            self.repository.delete_like(user_id, record_id)
        except Exception as exc:
            logger.exception("Failed to unlike record %s", record_id)
            raise PersistenceError("Failed to unlike photo") from exc
