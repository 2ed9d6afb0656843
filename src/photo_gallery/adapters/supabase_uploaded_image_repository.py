"""Supabase-backed repository for user uploads."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from photo_gallery.domain.records import UploadedImageRecord
from photo_gallery.services.uploads import UploadedImageRepository


@dataclass
class SupabaseUploadedImageRepository(UploadedImageRepository):
    """Supabase implementation for uploaded image metadata."""

    client: Client

    def create_image(
        self, user_id: UUID, image_url: str, user_name: str, created_at: datetime
    ) -> UploadedImageRecord:
        """Insert an uploaded image row and return it."""
        response = (
            self.client.table("uploaded_images")
            .insert(
                {
                    "user_id": str(user_id),
                    "image_url": image_url,
                    "user_name": user_name,
                    "created_at": created_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create uploaded image")
        return _parse_image(response.data[0])

    def list_images(self, user_id: UUID) -> list[UploadedImageRecord]:
        """Return the user's uploads, newest first."""
        response = (
            self.client.table("uploaded_images")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_image(row) for row in response.data or []]


def _parse_image(row: dict[str, object]) -> UploadedImageRecord:
    return UploadedImageRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        image_url=str(row.get("image_url", "")),
        user_name=str(row.get("user_name") or "Anonymous"),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
