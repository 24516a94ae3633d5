"""Capture, publish and render pipeline."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from photo_reel.domain.errors import StoreUnavailableError
from photo_reel.domain.photos import (
    CapturedFrame,
    Card,
    FlowResult,
    PhotoRecord,
    PublishedPhoto,
)
from photo_reel.services.capture import CaptureService, ImageFile
from photo_reel.services.encoding import to_transport_payload
from photo_reel.services.gallery import GalleryStore
from photo_reel.services.rendering import GalleryRenderer

logger = logging.getLogger(__name__)

CAPTURE_FAILURE_NOTICE = (
    "Something went wrong while processing the photo. Please try again."
)
UPLOAD_FAILURE_NOTICE = (
    "Something went wrong while processing the uploaded photo. Please try again."
)
DEFAULT_TIMESTAMP_FORMAT = "%m/%d/%Y, %I:%M:%S %p"


class TitlePrompt(Protocol):
    """Interface for asking the user to title a photo."""

    async def ask(self) -> str | None:
        """Return the entered title, or ``None`` when cancelled."""


@dataclass
class PhotoPublisher:
    """Run the capture and upload flows and the startup gallery load.

    Each flow asks for a title first and stops without side effects when
    none is given. Any failure after that is logged once here and turned into
    a generic notice; nothing is rendered unless the store accepted the record.
    """

    capture_service: CaptureService
    store: GalleryStore
    renderer: GalleryRenderer
    clock: Callable[[], datetime] = datetime.now
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    debug_notices: bool = False
    _loaded: bool = field(default=False, init=False)

    async def capture_and_publish(self, prompt: TitlePrompt) -> FlowResult:
        """Prompt for a title, take a camera snapshot and publish it."""
        return await self._run_flow(
            prompt,
            self.capture_service.capture_from_camera,
            failure_notice=CAPTURE_FAILURE_NOTICE,
            log_message="Failed to capture and publish photo",
        )

    async def upload_and_publish(
        self, prompt: TitlePrompt, file: ImageFile
    ) -> FlowResult:
        """Prompt for a title, read the picked file and publish it."""
        return await self._run_flow(
            prompt,
            lambda: self.capture_service.read_from_file(file),
            failure_notice=UPLOAD_FAILURE_NOTICE,
            log_message="Failed to process uploaded photo",
            extra={"upload_filename": file.filename},
        )

    async def load_existing(self) -> list[Card]:
        """Render every entry already in the store, once."""
        if self._loaded:
            return []
        self._loaded = True
        try:
            entries = await self.store.fetch_all()
        except StoreUnavailableError:
            logger.exception("Failed to load existing images")
            return []
        return [self.renderer.render(entry) for entry in entries]

    async def _run_flow(
        self,
        prompt: TitlePrompt,
        acquire: Callable[[], Awaitable[CapturedFrame]],
        *,
        failure_notice: str,
        log_message: str,
        extra: dict[str, object] | None = None,
    ) -> FlowResult:
        try:
            title = _clean_title(await prompt.ask())
            if title is None:
                return FlowResult(status="cancelled")
            frame = await acquire()
            card = await self._publish(frame, title)
        except Exception as exc:
            logger.exception(log_message, extra=extra)
            return FlowResult(
                status="failed", notice=self._notice(exc, failure_notice)
            )
        return FlowResult(status="published", card=card)

    async def _publish(self, frame: CapturedFrame, title: str) -> Card:
        record = PhotoRecord(
            title=title,
            raw_image=to_transport_payload(frame),
            captured_at=self.clock().strftime(self.timestamp_format),
        )
        entry = await self.store.create(record)
        return self.renderer.render(
            PublishedPhoto(frame=frame, record=record, entry=entry)
        )

    def _notice(self, exc: Exception, fallback: str) -> str:
        """Return the user-facing notice, with debug info when enabled."""
        if self.debug_notices:
            detail = f"{type(exc).__name__}: {exc}".strip()
            if detail:
                return f"{fallback} (debug: {detail})"
        return fallback


def _clean_title(raw: str | None) -> str | None:
    """Return the trimmed title, or ``None`` when nothing was entered."""
    if raw is None:
        return None
    title = raw.strip()
    return title or None
