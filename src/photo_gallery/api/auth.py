"""Sign-in and session endpoints."""

from fastapi import APIRouter, Depends

from photo_gallery.api.dependencies import bearer_token, current_user, get_container
from photo_gallery.api.schemas import LoginResponse, SessionUserResponse
from photo_gallery.containers import AppContainer
from photo_gallery.domain.errors import AuthRequiredError
from photo_gallery.domain.records import SessionUser

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/login")
async def login(
    redirect_to: str | None = None,
    container: AppContainer = Depends(get_container),
) -> LoginResponse:
    """Return the OAuth URL to open in the sign-in popup."""
    return LoginResponse(url=container.auth_service.login_url(redirect_to))


@router.get("/me")
async def me(user: SessionUser | None = Depends(current_user)) -> SessionUserResponse:
    """Return the signed-in user."""
    if user is None:
        raise AuthRequiredError("Please login to continue")
    return SessionUserResponse(
        id=str(user.id), display_name=user.display_name, avatar_url=user.avatar_url
    )


@router.post("/logout")
async def logout(
    token: str | None = Depends(bearer_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """End the current session."""
    container.auth_service.logout(token)
    return {"status": "ok"}
