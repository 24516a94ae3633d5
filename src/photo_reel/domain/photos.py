"""Domain models for captured and published photos."""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

BASE64_MARKER = ";base64,"


@dataclass(frozen=True)
class CapturedFrame:
    """An encoded still image held as a data URL."""

    data_url: str


@dataclass(frozen=True)
class PhotoRecord:
    """A titled photo ready to be sent to the store."""

    title: str
    raw_image: str
    captured_at: str

    def to_payload(self) -> dict[str, str]:
        """Return the store's JSON body for this record."""
        return {
            "title": self.title,
            "image": self.raw_image,
            "timestamp": self.captured_at,
        }


class GalleryEntry(BaseModel):
    """A photo record as persisted by the remote store."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str | None = None
    title: str
    image: str
    timestamp: str

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: object) -> object:
        if isinstance(value, int):
            return str(value)
        return value


@dataclass(frozen=True)
class PublishedPhoto:
    """A record confirmed by the store, together with its local frame."""

    frame: CapturedFrame
    record: PhotoRecord
    entry: GalleryEntry


@dataclass(frozen=True)
class Card:
    """A rendered gallery card."""

    image_src: str
    alt: str
    caption: str
    timestamp: str

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly representation."""
        return {
            "image_src": self.image_src,
            "alt": self.alt,
            "caption": self.caption,
            "timestamp": self.timestamp,
        }


FlowStatus = Literal["published", "cancelled", "failed"]


@dataclass(frozen=True)
class FlowResult:
    """Outcome of a single capture or upload flow."""

    status: FlowStatus
    card: Card | None = None
    notice: str | None = None
