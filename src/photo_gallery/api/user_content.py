"""Endpoints for a user's liked, uploaded and generated images."""

from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile

from photo_gallery.api.dependencies import current_user, get_container
from photo_gallery.api.schemas import GenerateImageRequest, ToggleLikeResponse
from photo_gallery.containers import AppContainer
from photo_gallery.domain.photos import Photo
from photo_gallery.domain.records import (
    GeneratedImageRecord,
    LikedPhotoRecord,
    SessionUser,
    UploadCandidate,
    UploadedImageRecord,
)

router = APIRouter(tags=["library"])


def _user_id(user: SessionUser | None) -> UUID | None:
    return user.id if user else None


@router.get("/likes")
async def list_likes(
    user: SessionUser | None = Depends(current_user),
    container: AppContainer = Depends(get_container),
) -> list[LikedPhotoRecord]:
    """Return the user's liked photos."""
    return container.liked_photo_service.list_liked_photos(_user_id(user))


@router.get("/likes/ids")
async def liked_ids(
    user: SessionUser | None = Depends(current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, UUID]:
    """Return the liked mapping from photo id to record id."""
    return container.liked_photo_service.load_liked_set(_user_id(user))


@router.post("/likes/toggle")
async def toggle_like(
    photo: Photo,
    user: SessionUser | None = Depends(current_user),
    container: AppContainer = Depends(get_container),
) -> ToggleLikeResponse:
    """Like a photo, or unlike it when already liked."""
    service = container.liked_photo_service
    liked = service.load_liked_set(_user_id(user))
    now_liked = service.toggle_like(_user_id(user), photo, liked)
    return ToggleLikeResponse(photo_id=photo.id, liked=now_liked)


@router.delete("/likes/{record_id}")
async def unlike(
    record_id: UUID,
    user: SessionUser | None = Depends(current_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Remove a liked photo by record id."""
    container.liked_photo_service.unlike(_user_id(user), record_id)
    return {"status": "ok"}


@router.get("/uploads")
async def list_uploads(
    user: SessionUser | None = Depends(current_user),
    container: AppContainer = Depends(get_container),
) -> list[UploadedImageRecord]:
    """Return the user's uploaded images."""
    return container.upload_service.list_images(_user_id(user))


@router.post("/uploads")
async def upload_image(
    file: UploadFile = File(...),
    user: SessionUser | None = Depends(current_user),
    container: AppContainer = Depends(get_container),
) -> UploadedImageRecord:
    """Upload an image to the image host and record it."""
    candidate = UploadCandidate(
        filename=file.filename or "upload",
        content_type=file.content_type or "",
        content=await file.read(container.upload_service.max_upload_bytes + 1),
    )
    return await container.upload_service.upload_image(user, candidate)


@router.get("/generations")
async def list_generations(
    user: SessionUser | None = Depends(current_user),
    container: AppContainer = Depends(get_container),
) -> list[GeneratedImageRecord]:
    """Return the user's previous generations."""
    return container.generation_service.list_generated(_user_id(user))


@router.post("/generations")
async def generate_image(
    request: GenerateImageRequest,
    user: SessionUser | None = Depends(current_user),
    container: AppContainer = Depends(get_container),
) -> GeneratedImageRecord:
    """Generate an image from a prompt."""
    return await container.generation_service.generate(user, request.prompt)
