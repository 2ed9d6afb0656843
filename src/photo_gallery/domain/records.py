"""Domain records owned by a signed-in user."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class SessionUser:
    """Projection of the identity provider's current session."""

    id: UUID
    display_name: str | None = None
    avatar_url: str | None = None


@dataclass(frozen=True)
class LikedPhotoRecord:
    """Snapshot of a photo taken when the user liked it."""

    id: UUID
    user_id: UUID
    photo_id: str
    image_url: str
    description: str | None
    photographer_name: str
    liked_at: datetime


@dataclass(frozen=True)
class UploadedImageRecord:
    """Image uploaded by a user to the image host."""

    id: UUID
    user_id: UUID
    image_url: str
    user_name: str
    created_at: datetime


@dataclass(frozen=True)
class GeneratedImageRecord:
    """Image produced from a text prompt."""

    id: UUID
    user_id: UUID
    prompt: str
    image_url: str
    created_at: datetime


@dataclass(frozen=True)
class UploadCandidate:
    """Locally selected file awaiting upload."""

    filename: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)
