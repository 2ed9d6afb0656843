"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse

from photo_gallery.api.auth import router as auth_router
from photo_gallery.api.dependencies import current_user, get_container
from photo_gallery.api.schemas import GalleryView
from photo_gallery.api.user_content import router as user_content_router
from photo_gallery.app_logging import configure_logging
from photo_gallery.containers import AppContainer
from photo_gallery.domain.errors import (
    AuthRequiredError,
    GalleryError,
    InputValidationError,
)
from photo_gallery.domain.records import SessionUser
from photo_gallery.services.gallery import GallerySession

_ERROR_STATUS: dict[type[GalleryError], int] = {
    AuthRequiredError: status.HTTP_401_UNAUTHORIZED,
    InputValidationError: status.HTTP_400_BAD_REQUEST,
}


def _log_session_change(user: SessionUser | None) -> None:
    logger = logging.getLogger(__name__)
    if user is None:
        logger.info("Session ended")
    else:
        logger.info("Session started for %s", user.id)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        unsubscribe = app.state.container.auth_service.subscribe(_log_session_change)
        yield
        unsubscribe()
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(auth_router)
    app.include_router(user_content_router)

    @app.exception_handler(GalleryError)
    async def gallery_error_handler(
        request: Request, exc: GalleryError
    ) -> JSONResponse:
        status_code = _ERROR_STATUS.get(type(exc), status.HTTP_502_BAD_GATEWAY)
        logger.info(
            "%s %s -> %s: %s", request.method, request.url.path, status_code, exc
        )
        return JSONResponse(status_code=status_code, content={"detail": exc.message})

    def gallery_session(
        user: SessionUser | None = Depends(current_user),
        state_container: AppContainer = Depends(get_container),
    ) -> GallerySession:
        session = state_container.new_gallery_session()
        session.on_session_changed(user)
        return session

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/photos")
    async def gallery_home(
        session: GallerySession = Depends(gallery_session),
    ) -> GalleryView:
        """Initial gallery load: a batch of random photos."""
        await session.mount()
        return GalleryView.from_session(session)

    @app.get("/photos/random")
    async def random_photos(
        count: int | None = None,
        fresh: bool = False,
        session: GallerySession = Depends(gallery_session),
    ) -> GalleryView:
        """Fetch random photos."""
        await session.machine.fetch_random(count, fresh=fresh)
        return GalleryView.from_session(session)

    @app.get("/photos/search")
    async def search_photos(
        query: str = "",
        session: GallerySession = Depends(gallery_session),
    ) -> GalleryView:
        """Search photos by keyword."""
        await session.machine.search(query)
        return GalleryView.from_session(session)

    @app.get("/photos/{photo_id}")
    async def photo_by_id(
        photo_id: str,
        session: GallerySession = Depends(gallery_session),
    ) -> GalleryView:
        """Fetch a single photo by id."""
        await session.machine.fetch_by_id(photo_id)
        return GalleryView.from_session(session)

    return app
