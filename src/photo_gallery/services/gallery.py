"""Fetch/display state machine shared by every gallery view."""

import logging
from dataclasses import dataclass, field, replace
from uuid import UUID

from photo_gallery.domain.errors import GalleryError, InputValidationError
from photo_gallery.domain.gallery import (
    DisplayMode,
    GalleryOperation,
    GalleryViewState,
    OperationKind,
)
from photo_gallery.domain.photos import Photo
from photo_gallery.domain.records import SessionUser
from photo_gallery.services.likes import LikedMapping, LikedPhotoService
from photo_gallery.services.photos import PhotoService

logger = logging.getLogger(__name__)


@dataclass
class GalleryStateMachine:
    """Drives loading, error and result state for photo fetches.

    Every trigger takes a new generation number. A response that comes back
    after a newer trigger is dropped, so the view always reflects the most
    recently triggered operation.
    """

    photo_service: PhotoService
    default_count: int = 10
    state: GalleryViewState = field(default_factory=GalleryViewState)
    _generation: int = field(default=0, init=False, repr=False)

    async def mount(self) -> GalleryViewState:
        """Fetch a first random batch when nothing has been shown yet."""
        current = self.state
        if current.display_mode is DisplayMode.INITIAL and not current.loading:
            return await self.trigger(GalleryOperation.random(self.default_count))
        return current

    async def fetch_random(
        self, count: int | None = None, fresh: bool = False
    ) -> GalleryViewState:
        if count is None:
            count = self.default_count
        operation = GalleryOperation.random(count, fresh=fresh)
        return await self.trigger(operation)

    async def search(self, keyword: str) -> GalleryViewState:
        return await self.trigger(GalleryOperation.search(keyword))

    async def fetch_by_id(self, photo_id: str) -> GalleryViewState:
        return await self.trigger(GalleryOperation.by_id(photo_id))

    async def trigger(self, operation: GalleryOperation) -> GalleryViewState:
        """Run one fetch operation and apply its outcome."""
        self._generation += 1
        generation = self._generation
        try:
            _validate(operation)
        except InputValidationError as exc:
            self.state = GalleryViewState(
                display_mode=DisplayMode.PHOTOS, error=exc.message
            )
            return self.state

        self.state = replace(self.state, loading=True, error=None, empty_result=False)
        try:
            photos, notice = await self._run(operation)
        except GalleryError as exc:
            logger.warning("Gallery %s failed: %s", operation.kind, exc.message)
            return self._apply(
                generation,
                GalleryViewState(display_mode=DisplayMode.PHOTOS, error=exc.message),
            )
        except Exception as exc:
            logger.exception("Gallery %s failed", operation.kind)
            return self._apply(
                generation,
                GalleryViewState(display_mode=DisplayMode.PHOTOS, error=str(exc)),
            )
        return self._apply(
            generation,
            GalleryViewState(
                photos=tuple(photos),
                display_mode=DisplayMode.PHOTOS,
                error=notice,
                empty_result=not photos,
            ),
        )

    def dismiss_error(self) -> GalleryViewState:
        """Clear the current error without re-fetching."""
        if self.state.display_mode is DisplayMode.INITIAL:
            self.state = replace(self.state, error=None)
            return self.state
        self.state = replace(
            self.state, error=None, empty_result=not self.state.photos
        )
        return self.state

    def report_error(self, message: str) -> GalleryViewState:
        """Show an error raised by an action outside the fetch cycle."""
        self.state = replace(self.state, loading=False, error=message)
        return self.state

    async def _run(
        self, operation: GalleryOperation
    ) -> tuple[list[Photo], str | None]:
        if operation.kind is OperationKind.RANDOM:
            photos = await self.photo_service.random_photos(
                operation.count, fresh=operation.fresh
            )
            return photos, None
        if operation.kind is OperationKind.SEARCH:
            keyword = operation.keyword.strip()
            photos, total = await self.photo_service.search_photos(keyword)
            if not photos or total == 0:
                return [], f'No photos found for "{keyword}".'
            return photos, None
        return await self.photo_service.get_photo(operation.photo_id.strip()), None

    def _apply(self, generation: int, outcome: GalleryViewState) -> GalleryViewState:
        if generation != self._generation:
            logger.debug("Dropping stale gallery response %s", generation)
            return self.state
        self.state = outcome
        return self.state


def _validate(operation: GalleryOperation) -> None:
    if operation.kind is OperationKind.SEARCH and not operation.keyword.strip():
        raise InputValidationError("Please enter a search query.")
    if operation.kind is OperationKind.BY_ID and not operation.photo_id.strip():
        raise InputValidationError("Please enter a photo ID.")
    if operation.kind is OperationKind.RANDOM and operation.count < 1:
        raise InputValidationError("Please request at least one photo.")


@dataclass
class GallerySession:
    """One gallery view: the state machine plus the viewer's liked photos."""

    machine: GalleryStateMachine
    liked_photo_service: LikedPhotoService
    user: SessionUser | None = None
    liked: LikedMapping = field(default_factory=dict)
    liked_error: str | None = None

    def on_session_changed(self, user: SessionUser | None) -> None:
        """Reload the liked mapping for a newly signed-in (or out) user."""
        self.user = user
        self.liked_error = None
        try:
            self.liked = self.liked_photo_service.load_liked_set(self.user_id)
        except GalleryError as exc:
            self.liked = {}
            self.liked_error = exc.message
            self.machine.report_error(exc.message)

    async def mount(self) -> GalleryViewState:
        """Run the first fetch, keeping any liked-photo load error visible."""
        state = await self.machine.mount()
        if self.liked_error is not None and state.error is None:
            return self.machine.report_error(self.liked_error)
        return state

    @property
    def user_id(self) -> UUID | None:
        return self.user.id if self.user else None

    def is_liked(self, photo_id: str) -> bool:
        return photo_id in self.liked

    def toggle_like(self, photo: Photo) -> bool | None:
        """Toggle a like; failures land in the view's error state."""
        try:
            return self.liked_photo_service.toggle_like(
                self.user_id, photo, self.liked
            )
        except GalleryError as exc:
            self.machine.report_error(exc.message)
            return None
