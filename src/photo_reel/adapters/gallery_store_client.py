"""HTTPX client for the mockapi.io-style image store."""

import logging
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from photo_reel.domain.errors import PublishError, StoreUnavailableError
from photo_reel.domain.photos import GalleryEntry, PhotoRecord
from photo_reel.services.gallery import GalleryStore

logger = logging.getLogger(__name__)


@dataclass
class HttpxGalleryStoreClient(GalleryStore):
    """Gallery store backed by a REST collection at ``{base_url}/images``."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create_client(cls, base_url: str) -> "HttpxGalleryStoreClient":
        """Create a store client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    @property
    def images_url(self) -> str:
        return f"{self.base_url}/images"

    async def fetch_all(self) -> list[GalleryEntry]:
        """List all persisted images."""
        try:
            response = await self.http_client.get(self.images_url)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise StoreUnavailableError("Failed to load gallery images") from exc
        if not isinstance(payload, list):
            raise StoreUnavailableError("Gallery store returned a non-list body")
        entries: list[GalleryEntry] = []
        for index, item in enumerate(payload):
            try:
                entries.append(GalleryEntry.model_validate(item))
            except ValidationError:
                logger.warning("Skipping invalid gallery entry", extra={"index": index})
        return entries

    async def create(self, record: PhotoRecord) -> GalleryEntry:
        """POST a record and return the stored copy."""
        try:
            response = await self.http_client.post(
                self.images_url,
                json=record.to_payload(),
            )
            response.raise_for_status()
            entry = GalleryEntry.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as exc:
            raise PublishError("Failed to publish photo") from exc
        logger.info("Published photo", extra={"entry_id": entry.id})
        return entry

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
