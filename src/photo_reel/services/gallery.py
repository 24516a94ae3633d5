"""Remote gallery store interface."""

from typing import Protocol

from photo_reel.domain.photos import GalleryEntry, PhotoRecord


class GalleryStore(Protocol):
    """Interface for the remote JSON store holding published photos."""

    async def fetch_all(self) -> list[GalleryEntry]:
        """Return every persisted entry in the order the store lists them."""

    async def create(self, record: PhotoRecord) -> GalleryEntry:
        """Persist a record and return the store's canonical copy."""
