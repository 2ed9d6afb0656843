"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from photo_gallery.adapters.imgbb_client import HttpxImgbbClient
from photo_gallery.adapters.openai_image_client import OpenAIImageClient
from photo_gallery.adapters.supabase_generated_image_repository import (
    SupabaseGeneratedImageRepository,
)
from photo_gallery.adapters.supabase_identity_provider import (
    SupabaseIdentityProvider,
)
from photo_gallery.adapters.supabase_image_storage import SupabaseImageStorage
from photo_gallery.adapters.supabase_liked_photo_repository import (
    SupabaseLikedPhotoRepository,
)
from photo_gallery.adapters.supabase_uploaded_image_repository import (
    SupabaseUploadedImageRepository,
)
from photo_gallery.adapters.unsplash_client import HttpxUnsplashClient
from photo_gallery.config import Settings
from photo_gallery.services.auth import AuthService
from photo_gallery.services.cache import InMemoryCache
from photo_gallery.services.gallery import GallerySession, GalleryStateMachine
from photo_gallery.services.generation import ImageGenerationService
from photo_gallery.services.likes import LikedPhotoService
from photo_gallery.services.photos import PhotoService
from photo_gallery.services.uploads import UploadService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    photo_service: PhotoService
    liked_photo_service: LikedPhotoService
    upload_service: UploadService
    generation_service: ImageGenerationService
    close_resources: Callable[[], Awaitable[None]]

    def new_gallery_session(self) -> GallerySession:
        """Create the state for one gallery view."""
        machine = GalleryStateMachine(
            photo_service=self.photo_service,
            default_count=self.settings.random_photo_count,
        )
        return GallerySession(
            machine=machine, liked_photo_service=self.liked_photo_service
        )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    unsplash_client = HttpxUnsplashClient.create(
        access_key=resolved_settings.unsplash_access_key,
        base_url=resolved_settings.unsplash_base_url,
    )
    imgbb_client = HttpxImgbbClient.create(
        api_key=resolved_settings.imgbb_api_key,
        upload_url=resolved_settings.imgbb_upload_url,
    )
    openai_client = OpenAIImageClient.create(resolved_settings.openai_api_key)

    auth_service = AuthService(SupabaseIdentityProvider(supabase_client))
    photo_service = PhotoService(
        client=unsplash_client,
        cache=InMemoryCache(),
        random_ttl_seconds=resolved_settings.random_cache_ttl_seconds,
    )
    liked_photo_service = LikedPhotoService(
        SupabaseLikedPhotoRepository(supabase_client)
    )
    upload_service = UploadService(
        image_host=imgbb_client,
        repository=SupabaseUploadedImageRepository(supabase_client),
        max_upload_bytes=resolved_settings.max_upload_bytes,
    )
    generation_service = ImageGenerationService(
        client=openai_client,
        storage=SupabaseImageStorage(
            supabase_client, bucket=resolved_settings.generated_images_bucket
        ),
        repository=SupabaseGeneratedImageRepository(supabase_client),
        model=resolved_settings.openai_image_model,
    )

    async def close_resources() -> None:
        await unsplash_client.close()
        await imgbb_client.close()
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        photo_service=photo_service,
        liked_photo_service=liked_photo_service,
        upload_service=upload_service,
        generation_service=generation_service,
        close_resources=close_resources,
    )
