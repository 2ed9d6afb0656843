"""Models for photos returned by the remote photo source."""

from pydantic import BaseModel, ConfigDict


class PhotoUrls(BaseModel):
    """Image URLs at the sizes offered by the photo source."""

    model_config = ConfigDict(extra="ignore")

    raw: str | None = None
    full: str | None = None
    regular: str | None = None
    small: str | None = None
    thumb: str | None = None


class PhotoLinks(BaseModel):
    """Links back to the source page."""

    model_config = ConfigDict(extra="ignore")

    html: str | None = None
    download: str | None = None


class PhotoAuthor(BaseModel):
    """Attributed author of a photo."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    username: str | None = None
    links: PhotoLinks = PhotoLinks()


class Photo(BaseModel):
    """Photo metadata as returned by the photo source."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    description: str | None = None
    alt_description: str | None = None
    urls: PhotoUrls = PhotoUrls()
    links: PhotoLinks = PhotoLinks()
    user: PhotoAuthor = PhotoAuthor()

    @property
    def display_description(self) -> str | None:
        """Return the description, falling back to the alt text."""
        return self.description or self.alt_description

    def is_well_formed(self) -> bool:
        """Return whether the photo has an id and a displayable image URL."""
        return bool(self.id) and bool(self.urls.regular)
