"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

import pytest

from photo_gallery.adapters.imgbb_client import ImageHostClient
from photo_gallery.adapters.openai_image_client import ImageGenerationClient
from photo_gallery.adapters.unsplash_client import PhotoSourceClient
from photo_gallery.config import Settings
from photo_gallery.containers import AppContainer
from photo_gallery.domain.errors import RemoteCallError
from photo_gallery.domain.records import (
    GeneratedImageRecord,
    LikedPhotoRecord,
    SessionUser,
    UploadedImageRecord,
)
from photo_gallery.services.auth import AuthService, IdentityProvider
from photo_gallery.services.cache import InMemoryCache
from photo_gallery.services.generation import (
    GeneratedImageRepository,
    ImageGenerationService,
    ImageStorage,
)
from photo_gallery.services.likes import LikedPhotoRepository, LikedPhotoService
from photo_gallery.services.photos import PhotoService
from photo_gallery.services.uploads import UploadedImageRepository, UploadService


def photo_payload(photo_id: str = "abc123", **overrides: object) -> dict[str, object]:
    """Return a photo payload shaped like the Unsplash API."""
    payload: dict[str, object] = {
        "id": photo_id,
        "description": f"Photo {photo_id}",
        "alt_description": f"alt {photo_id}",
        "urls": {
            "full": f"https://images.test/{photo_id}/full.jpg",
            "regular": f"https://images.test/{photo_id}/regular.jpg",
            "thumb": f"https://images.test/{photo_id}/thumb.jpg",
        },
        "links": {"html": f"https://unsplash.test/photos/{photo_id}"},
        "user": {
            "name": "Jane Doe",
            "links": {"html": "https://unsplash.test/@jane"},
        },
        "likes": 12,
    }
    payload.update(overrides)
    return payload


@dataclass
class FakeUnsplashClient(PhotoSourceClient):
    """Fake photo source that records calls."""

    search_payload: dict[str, object] = field(
        default_factory=lambda: {
            "total": 2,
            "results": [photo_payload("s1"), photo_payload("s2")],
        }
    )
    error: RemoteCallError | None = None
    calls: list[tuple[str, object]] = field(default_factory=list)

    async def random_photos(self, count: int) -> object:
        self.calls.append(("random", count))
        if self.error:
            raise self.error
        if count == 1:
            return photo_payload("r0")
        return [photo_payload(f"r{index}") for index in range(count)]

    async def search_photos(self, query: str) -> dict[str, object]:
        self.calls.append(("search", query))
        if self.error:
            raise self.error
        return self.search_payload

    async def get_photo(self, photo_id: str) -> dict[str, object]:
        self.calls.append(("by_id", photo_id))
        if self.error:
            raise self.error
        return photo_payload(photo_id)


@dataclass
class FakeImageHostClient(ImageHostClient):
    """Fake image host that returns a URL per upload."""

    uploads: list[str] = field(default_factory=list)
    fail: bool = False

    async def upload(self, encoded_image: str, name: str | None = None) -> str:
        self.uploads.append(encoded_image)
        if self.fail:
            raise RemoteCallError("400 Bad Request", status_code=400)
        return f"https://i.host.test/{len(self.uploads)}.png"


@dataclass
class FakeImageGenerationClient(ImageGenerationClient):
    """Fake generative model returning static bytes."""

    content: bytes = b"\x89PNG\r\n\x1a\nfake"
    prompts: list[str] = field(default_factory=list)

    async def generate(self, *, model: str, prompt: str) -> bytes:
        self.prompts.append(prompt)
        return self.content


@dataclass
class InMemoryImageStorage(ImageStorage):
    """In-memory object storage for tests."""

    files: dict[str, bytes] = field(default_factory=dict)

    def store(self, path: str, content: bytes, content_type: str) -> str:
        self.files[path] = content
        return f"https://storage.test/{path}"


@dataclass
class InMemoryLikedPhotoRepository(LikedPhotoRepository):
    """In-memory liked photo repository for tests."""

    records: dict[UUID, LikedPhotoRecord] = field(default_factory=dict)
    fail: bool = False

    def create_like(  # noqa: PLR0913
        self,
        user_id: UUID,
        photo_id: str,
        image_url: str,
        description: str | None,
        photographer_name: str,
        liked_at: datetime,
    ) -> LikedPhotoRecord:
        if self.fail:
            raise RuntimeError("store unavailable")
        record = LikedPhotoRecord(
            id=uuid4(),
            user_id=user_id,
            photo_id=photo_id,
            image_url=image_url,
            description=description,
            photographer_name=photographer_name,
            liked_at=liked_at,
        )
        self.records[record.id] = record
        return record

    def delete_like(self, user_id: UUID, record_id: UUID) -> None:
        if self.fail:
            raise RuntimeError("store unavailable")
        record = self.records.get(record_id)
        if record and record.user_id == user_id:
            del self.records[record_id]

    def list_likes(self, user_id: UUID) -> list[LikedPhotoRecord]:
        if self.fail:
            raise RuntimeError("store unavailable")
        return [r for r in self.records.values() if r.user_id == user_id]

    def count_for(self, user_id: UUID, photo_id: str) -> int:
        return sum(
            1
            for r in self.records.values()
            if r.user_id == user_id and r.photo_id == photo_id
        )


@dataclass
class InMemoryUploadedImageRepository(UploadedImageRepository):
    """In-memory uploaded image repository for tests."""

    images: list[UploadedImageRecord] = field(default_factory=list)
    fail: bool = False

    def create_image(
        self, user_id: UUID, image_url: str, user_name: str, created_at: datetime
    ) -> UploadedImageRecord:
        if self.fail:
            raise RuntimeError("store unavailable")
        record = UploadedImageRecord(
            id=uuid4(),
            user_id=user_id,
            image_url=image_url,
            user_name=user_name,
            created_at=created_at,
        )
        self.images.insert(0, record)
        return record

    def list_images(self, user_id: UUID) -> list[UploadedImageRecord]:
        if self.fail:
            raise RuntimeError("store unavailable")
        return [image for image in self.images if image.user_id == user_id]


@dataclass
class InMemoryGeneratedImageRepository(GeneratedImageRepository):
    """In-memory generated image repository for tests."""

    images: list[GeneratedImageRecord] = field(default_factory=list)

    def create_generated(
        self, user_id: UUID, prompt: str, image_url: str, created_at: datetime
    ) -> GeneratedImageRecord:
        record = GeneratedImageRecord(
            id=uuid4(),
            user_id=user_id,
            prompt=prompt,
            image_url=image_url,
            created_at=created_at,
        )
        self.images.append(record)
        return record

    def list_generated(self, user_id: UUID) -> list[GeneratedImageRecord]:
        return [image for image in self.images if image.user_id == user_id]


@dataclass
class FakeIdentityProvider(IdentityProvider):
    """Identity provider backed by a token table."""

    users: dict[str, SessionUser] = field(default_factory=dict)
    signed_out: list[str] = field(default_factory=list)
    fail_sign_out: bool = False

    def sign_in_url(self, redirect_to: str | None) -> str:
        return f"https://auth.test/authorize?redirect_to={redirect_to or ''}"

    def get_user(self, access_token: str) -> SessionUser | None:
        return self.users.get(access_token)

    def sign_out(self, access_token: str) -> None:
        if self.fail_sign_out:
            raise RuntimeError("identity provider unavailable")
        self.signed_out.append(access_token)
        self.users.pop(access_token, None)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        unsplash_access_key="unsplash-key",
        imgbb_api_key="imgbb-key",
        openai_api_key="openai-key",
    )


@pytest.fixture
def session_user() -> SessionUser:
    return SessionUser(
        id=uuid4(), display_name="Jane", avatar_url="https://a.test/j.png"
    )


@pytest.fixture
def identity_provider(session_user: SessionUser) -> FakeIdentityProvider:
    return FakeIdentityProvider(users={"good-token": session_user})


@pytest.fixture
def unsplash_client() -> FakeUnsplashClient:
    return FakeUnsplashClient()


@pytest.fixture
def liked_repository() -> InMemoryLikedPhotoRepository:
    return InMemoryLikedPhotoRepository()


@pytest.fixture
def image_host() -> FakeImageHostClient:
    return FakeImageHostClient()


@pytest.fixture
def container(
    settings: Settings,
    identity_provider: FakeIdentityProvider,
    unsplash_client: FakeUnsplashClient,
    liked_repository: InMemoryLikedPhotoRepository,
    image_host: FakeImageHostClient,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        auth_service=AuthService(identity_provider),
        photo_service=PhotoService(client=unsplash_client, cache=InMemoryCache()),
        liked_photo_service=LikedPhotoService(liked_repository),
        upload_service=UploadService(
            image_host=image_host, repository=InMemoryUploadedImageRepository()
        ),
        generation_service=ImageGenerationService(
            client=FakeImageGenerationClient(),
            storage=InMemoryImageStorage(),
            repository=InMemoryGeneratedImageRepository(),
            model=settings.openai_image_model,
        ),
        close_resources=close_resources,
    )
