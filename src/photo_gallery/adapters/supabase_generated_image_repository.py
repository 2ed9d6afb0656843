"""Supabase-backed repository for generated images."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from photo_gallery.domain.records import GeneratedImageRecord
from photo_gallery.services.generation import GeneratedImageRepository


@dataclass
class SupabaseGeneratedImageRepository(GeneratedImageRepository):
    """Supabase implementation for generated image metadata."""

    client: Client

    def create_generated(
        self, user_id: UUID, prompt: str, image_url: str, created_at: datetime
    ) -> GeneratedImageRecord:
        """Insert a generated image row and return it."""
        response = (
            self.client.table("generated_images")
            .insert(
                {
                    "user_id": str(user_id),
                    "prompt": prompt,
                    "image_url": image_url,
                    "created_at": created_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create generated image")
        return _parse_generated(response.data[0])

    def list_generated(self, user_id: UUID) -> list[GeneratedImageRecord]:
        """Return generated images for a user."""
        response = (
            self.client.table("generated_images")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_generated(row) for row in response.data or []]


def _parse_generated(row: dict[str, object]) -> GeneratedImageRecord:
    return GeneratedImageRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        prompt=str(row.get("prompt", "")),
        image_url=str(row.get("image_url", "")),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
