"""Error taxonomy for gallery operations."""


class GalleryError(Exception):
    """Base error carrying a user-facing message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InputValidationError(GalleryError):
    """Raised when user input is rejected before any network call."""


class RemoteCallError(GalleryError):
    """Raised when a remote HTTP API fails or returns a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthRequiredError(GalleryError):
    """Raised when an action needs a signed-in user."""


class PersistenceError(GalleryError):
    """Raised when the document store fails to read or write."""


class UploadFailedError(GalleryError):
    """Raised when any stage of an image upload fails."""


class GenerationFailedError(GalleryError):
    """Raised when any stage of image generation fails."""
