"""Supabase-backed liked photo repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from photo_gallery.domain.records import LikedPhotoRecord
from photo_gallery.services.likes import LikedPhotoRepository


@dataclass
class SupabaseLikedPhotoRepository(LikedPhotoRepository):
    """Supabase implementation for per-user liked photos."""

    client: Client

    def create_like(  # noqa: PLR0913
        self,
        user_id: UUID,
        photo_id: str,
        image_url: str,
        description: str | None,
        photographer_name: str,
        liked_at: datetime,
    ) -> LikedPhotoRecord:
        """Insert a liked photo row and return it."""
        response = (
            self.client.table("liked_photos")
            .insert(
                {
                    "user_id": str(user_id),
                    "photo_id": photo_id,
                    "image_url": image_url,
                    "description": description,
                    "photographer_name": photographer_name,
                    "liked_at": liked_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create liked photo")
        return _parse_like(response.data[0])

    def delete_like(self, user_id: UUID, record_id: UUID) -> None:
        """Delete a liked photo row owned by the user."""
        (
            self.client.table("liked_photos")
            .delete()
            .eq("id", str(record_id))
            .eq("user_id", str(user_id))
            .execute()
        )

    def list_likes(self, user_id: UUID) -> list[LikedPhotoRecord]:
        """Return every liked photo of the user, newest first."""
        response = (
            self.client.table("liked_photos")
            .select("*")
            .eq("user_id", str(user_id))
            .order("liked_at", desc=True)
            .execute()
        )
        return [_parse_like(row) for row in response.data or []]


def _parse_like(row: dict[str, object]) -> LikedPhotoRecord:
    return LikedPhotoRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        photo_id=str(row.get("photo_id", "")),
        image_url=str(row.get("image_url", "")),
        description=row.get("description"),
        photographer_name=str(row.get("photographer_name") or ""),
        liked_at=datetime.fromisoformat(str(row["liked_at"])),
    )
