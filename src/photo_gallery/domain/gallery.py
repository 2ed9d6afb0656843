"""View state for the photo gallery."""

from dataclasses import dataclass, field
from enum import StrEnum

from photo_gallery.domain.photos import Photo


class DisplayMode(StrEnum):
    """Coarse display mode: nothing fetched yet, or a result set exists."""

    INITIAL = "initial"
    PHOTOS = "photos"


class FetchStatus(StrEnum):
    """States of the fetch/display state machine."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS_WITH_RESULTS = "success-with-results"
    SUCCESS_EMPTY = "success-empty"
    ERROR = "error"


class RenderBranch(StrEnum):
    """Mutually exclusive render branches of the gallery."""

    SPINNER = "spinner"
    ERROR = "error"
    RESULTS = "results"
    EMPTY = "empty"


class OperationKind(StrEnum):
    """Kinds of operation that trigger a fetch."""

    RANDOM = "random"
    SEARCH = "search"
    BY_ID = "by_id"


@dataclass(frozen=True)
class GalleryOperation:
    """A triggered fetch with its argument."""

    kind: OperationKind
    count: int = 10
    fresh: bool = False
    keyword: str = ""
    photo_id: str = ""

    @classmethod
    def random(cls, count: int = 10, fresh: bool = False) -> "GalleryOperation":
        return cls(kind=OperationKind.RANDOM, count=count, fresh=fresh)

    @classmethod
    def search(cls, keyword: str) -> "GalleryOperation":
        return cls(kind=OperationKind.SEARCH, keyword=keyword)

    @classmethod
    def by_id(cls, photo_id: str) -> "GalleryOperation":
        return cls(kind=OperationKind.BY_ID, photo_id=photo_id)


@dataclass(frozen=True)
class GalleryViewState:
    """Snapshot of what the gallery currently shows."""

    photos: tuple[Photo, ...] = field(default_factory=tuple)
    display_mode: DisplayMode = DisplayMode.INITIAL
    loading: bool = False
    error: str | None = None
    empty_result: bool = False

    @property
    def status(self) -> FetchStatus:
        """Derive the state machine status from the stored fields."""
        if self.loading:
            return FetchStatus.LOADING
        if self.empty_result:
            return FetchStatus.SUCCESS_EMPTY
        if self.error is not None:
            return FetchStatus.ERROR
        if self.display_mode is DisplayMode.INITIAL:
            return FetchStatus.IDLE
        if self.photos:
            return FetchStatus.SUCCESS_WITH_RESULTS
        return FetchStatus.SUCCESS_EMPTY

    @property
    def render_branch(self) -> RenderBranch:
        """Return the single branch the view renders."""
        if self.loading:
            return RenderBranch.SPINNER
        if self.error is not None:
            return RenderBranch.ERROR
        if self.photos:
            return RenderBranch.RESULTS
        return RenderBranch.EMPTY
