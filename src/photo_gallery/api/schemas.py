"""Request and response models for the HTTP API."""

from pydantic import BaseModel

from photo_gallery.domain.gallery import (
    DisplayMode,
    FetchStatus,
    GalleryViewState,
    RenderBranch,
)
from photo_gallery.domain.photos import Photo
from photo_gallery.services.gallery import GallerySession


class GalleryPhoto(BaseModel):
    """A displayed photo with the viewer's like flag."""

    photo: Photo
    liked: bool = False


class GalleryView(BaseModel):
    """Serialized gallery state after an operation settles."""

    status: FetchStatus
    render_branch: RenderBranch
    display_mode: DisplayMode
    loading: bool
    error: str | None
    photos: list[GalleryPhoto]

    @classmethod
    def from_session(cls, session: GallerySession) -> "GalleryView":
        state: GalleryViewState = session.machine.state
        return cls(
            status=state.status,
            render_branch=state.render_branch,
            display_mode=state.display_mode,
            loading=state.loading,
            error=state.error,
            photos=[
                GalleryPhoto(photo=photo, liked=session.is_liked(photo.id))
                for photo in state.photos
            ],
        )


class ToggleLikeResponse(BaseModel):
    photo_id: str
    liked: bool


class GenerateImageRequest(BaseModel):
    prompt: str


class LoginResponse(BaseModel):
    url: str


class SessionUserResponse(BaseModel):
    id: str
    display_name: str | None
    avatar_url: str | None
