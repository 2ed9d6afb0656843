"""Request dependencies shared by the API routers."""

from fastapi import Depends, Header, Request

from photo_gallery.containers import AppContainer
from photo_gallery.domain.records import SessionUser


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Extract a bearer token from the Authorization header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def current_user(
    token: str | None = Depends(bearer_token),
    container: AppContainer = Depends(get_container),
) -> SessionUser | None:
    """Resolve the signed-in user, or None."""
    return container.auth_service.resolve_user(token)
