"""Photo lookups against the remote photo source."""

import logging
from dataclasses import dataclass

from pydantic import ValidationError

from photo_gallery.adapters.unsplash_client import PhotoSourceClient
from photo_gallery.domain.errors import RemoteCallError
from photo_gallery.domain.photos import Photo
from photo_gallery.services.cache import Cache

logger = logging.getLogger(__name__)


@dataclass
class PhotoService:
    """Normalizes photo source payloads into lists of photos."""

    client: PhotoSourceClient
    cache: Cache
    random_ttl_seconds: int = 300

    async def random_photos(self, count: int, fresh: bool = False) -> list[Photo]:
        """Return a random sample, reusing a cached batch until it expires."""
        cache_key = f"random:{count}"
        if fresh:
            self.cache.invalidate(cache_key)
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return list(cached)
        payload = await self.client.random_photos(count)
        photos = _parse_photos(payload)
        self.cache.set(cache_key, photos, ttl_seconds=self.random_ttl_seconds)
        return photos

    async def search_photos(self, query: str) -> tuple[list[Photo], int]:
        """Search photos and return the results with the reported total."""
        payload = await self.client.search_photos(query)
        results = payload.get("results") if isinstance(payload, dict) else None
        photos = _parse_photos(results or [])
        total = payload.get("total") if isinstance(payload, dict) else None
        return photos, int(total) if isinstance(total, int) else len(photos)

    async def get_photo(self, photo_id: str) -> list[Photo]:
        """Fetch one photo, wrapped in a list."""
        payload = await self.client.get_photo(photo_id)
        return _parse_photos(payload)


def _parse_photos(payload: object) -> list[Photo]:
    """Parse a scalar or list payload into photos."""
    items = payload if isinstance(payload, list) else [payload]
    try:
        return [Photo.model_validate(item) for item in items]
    except ValidationError as exc:
        logger.warning("Malformed photo payload: %s", exc)
        raise RemoteCallError("Received malformed photo data") from exc
