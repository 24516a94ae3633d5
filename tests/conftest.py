"""Shared test fixtures."""

import logging
import threading
from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import datetime

import numpy as np
import pytest

from photo_reel.config import Settings
from photo_reel.containers import AppContainer
from photo_reel.domain.errors import DeviceAccessError
from photo_reel.domain.photos import GalleryEntry, PhotoRecord
from photo_reel.services.capture import Camera, CaptureService, FrameEncoder
from photo_reel.services.gallery import GalleryStore
from photo_reel.services.publishing import PhotoPublisher, TitlePrompt
from photo_reel.services.rendering import Gallery, GalleryRenderer

WEBP_BYTES = b"RIFF\x1a\x00\x00\x00WEBPVP8 fake-frame"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"fake-png"
FIXED_NOW = datetime(2026, 10, 19, 18, 30, 5)


@dataclass
class FakeCameraStream:
    """Stream that yields a fixed frame."""

    frame: np.ndarray | None

    async def first_frame(self) -> np.ndarray:
        if self.frame is None:
            raise DeviceAccessError("Camera produced no usable frame")
        return self.frame


@dataclass
class FakeCamera(Camera):
    """Fake camera that tracks acquisition and release."""

    frame: np.ndarray | None = field(
        default_factory=lambda: np.zeros((48, 64, 3), dtype=np.uint8)
    )
    deny_access: bool = False
    opened: int = 0
    released: int = 0

    @asynccontextmanager
    async def open(self) -> AsyncIterator[FakeCameraStream]:
        if self.deny_access:
            raise DeviceAccessError("Permission denied")
        self.opened += 1
        try:
            yield FakeCameraStream(self.frame)
        finally:
            self.released += 1

    @property
    def is_open(self) -> bool:
        return self.opened != self.released


@dataclass
class FakeFrameEncoder(FrameEncoder):
    """Encoder that returns static WEBP-looking bytes."""

    encoded: list[tuple[tuple[int, ...], str, int]] = field(default_factory=list)
    error: Exception | None = None
    threads: list[int] = field(default_factory=list)

    def encode(self, frame: np.ndarray, mime_type: str, quality: int) -> bytes:
        self.threads.append(threading.get_ident())
        if self.error is not None:
            raise self.error
        self.encoded.append((frame.shape, mime_type, quality))
        return WEBP_BYTES


@dataclass
class InMemoryGalleryStore(GalleryStore):
    """In-memory gallery store for tests."""

    entries: list[GalleryEntry] = field(default_factory=list)
    created: list[PhotoRecord] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)
    fetch_error: Exception | None = None
    create_error: Exception | None = None

    async def fetch_all(self) -> list[GalleryEntry]:
        self.calls.append("fetch_all")
        if self.fetch_error is not None:
            raise self.fetch_error
        return list(self.entries)

    async def create(self, record: PhotoRecord) -> GalleryEntry:
        self.calls.append("create")
        if self.create_error is not None:
            raise self.create_error
        self.created.append(record)
        entry = GalleryEntry(
            id=str(len(self.entries) + 1),
            title=record.title,
            image=record.raw_image,
            timestamp=record.captured_at,
        )
        self.entries.append(entry)
        return entry


@dataclass
class StaticTitlePrompt(TitlePrompt):
    """Title prompt returning a fixed answer and counting how often it ran."""

    value: str | None
    asked: int = 0

    async def ask(self) -> str | None:
        self.asked += 1
        return self.value


@dataclass
class FakeImageFile:
    """Picked file with in-memory content."""

    content: bytes = PNG_BYTES
    filename: str | None = "photo.png"
    content_type: str | None = "image/png"
    error: OSError | None = None

    async def read(self) -> bytes:
        if self.error is not None:
            raise self.error
        return self.content


@pytest.fixture
def settings() -> Settings:
    return Settings(
        store_base_url="https://store.test/api/v1",
        environment="test",
    )


@pytest.fixture
def gallery() -> Gallery:
    return Gallery()


@pytest.fixture
def store() -> InMemoryGalleryStore:
    return InMemoryGalleryStore()


@pytest.fixture
def camera() -> FakeCamera:
    return FakeCamera()


@pytest.fixture
def encoder() -> FakeFrameEncoder:
    return FakeFrameEncoder()


@pytest.fixture
def capture_service(camera: FakeCamera, encoder: FakeFrameEncoder) -> CaptureService:
    return CaptureService(camera=camera, encoder=encoder)


@pytest.fixture
def publisher(
    capture_service: CaptureService,
    store: InMemoryGalleryStore,
    gallery: Gallery,
) -> PhotoPublisher:
    return PhotoPublisher(
        capture_service=capture_service,
        store=store,
        renderer=GalleryRenderer(gallery),
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def container(
    settings: Settings,
    gallery: Gallery,
    publisher: PhotoPublisher,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        gallery=gallery,
        publisher=publisher,
        close_resources=close_resources,
    )


@pytest.fixture
def reel_log(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Capture package records directly, whether or not the logger propagates."""
    logger = logging.getLogger("photo_reel")
    propagate = logger.propagate
    logger.propagate = False
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.INFO, logger="photo_reel")
    yield caplog
    logger.removeHandler(caplog.handler)
    logger.propagate = propagate
