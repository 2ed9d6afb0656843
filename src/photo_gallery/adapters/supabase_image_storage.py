"""Supabase Storage bucket for generated image files."""

from dataclasses import dataclass

from supabase import Client

from photo_gallery.services.generation import ImageStorage


@dataclass
class SupabaseImageStorage(ImageStorage):
    """Stores image bytes in a public Supabase Storage bucket."""

    client: Client
    bucket: str

    def store(self, path: str, content: bytes, content_type: str) -> str:
        """Upload bytes to the bucket and return their public URL."""
        bucket = self.client.storage.from_(self.bucket)
        bucket.upload(path, content, {"content-type": content_type})
        return bucket.get_public_url(path)
