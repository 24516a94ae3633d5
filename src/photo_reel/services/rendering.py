"""Gallery container and card renderer."""

from dataclasses import dataclass, field

from photo_reel.domain.photos import Card, GalleryEntry, PublishedPhoto
from photo_reel.services.encoding import to_data_url

FETCHED_IMAGE_MIME_TYPE = "image/png"


@dataclass
class Gallery:
    """Ordered collection of rendered cards."""

    cards: list[Card] = field(default_factory=list)

    def append(self, card: Card) -> None:
        self.cards.append(card)


@dataclass
class GalleryRenderer:
    """Append cards for freshly published or fetched photos."""

    gallery: Gallery
    fetched_mime_type: str = FETCHED_IMAGE_MIME_TYPE

    def render(self, item: PublishedPhoto | GalleryEntry) -> Card:
        """Build a card for the item and append it to the gallery."""
        if isinstance(item, PublishedPhoto):
            card = Card(
                image_src=item.frame.data_url,
                alt=item.record.title,
                caption=item.record.title,
                timestamp=item.record.captured_at,
            )
        else:
            card = Card(
                image_src=to_data_url(item.image, self.fetched_mime_type),
                alt=item.title,
                caption=item.title,
                timestamp=item.timestamp,
            )
        self.gallery.append(card)
        return card
