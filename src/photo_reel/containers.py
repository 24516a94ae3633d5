"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from photo_reel.adapters.gallery_store_client import HttpxGalleryStoreClient
from photo_reel.adapters.opencv_camera import OpenCVCamera, OpenCVFrameEncoder
from photo_reel.config import Settings
from photo_reel.services.capture import CaptureService
from photo_reel.services.publishing import PhotoPublisher
from photo_reel.services.rendering import Gallery, GalleryRenderer


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    gallery: Gallery
    publisher: PhotoPublisher
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store_client = HttpxGalleryStoreClient.create_client(
        resolved_settings.store_base_url
    )
    capture_service = CaptureService(
        camera=OpenCVCamera(
            device_index=resolved_settings.camera_index,
            warmup_frames=resolved_settings.camera_warmup_frames,
        ),
        encoder=OpenCVFrameEncoder(),
        mime_type=resolved_settings.capture_mime_type,
        quality=resolved_settings.capture_quality,
    )
    gallery = Gallery()
    publisher = PhotoPublisher(
        capture_service=capture_service,
        store=store_client,
        renderer=GalleryRenderer(gallery),
        timestamp_format=resolved_settings.timestamp_format,
        debug_notices=resolved_settings.debug_notices,
    )

    async def close_resources() -> None:
        await store_client.close()

    return AppContainer(
        settings=resolved_settings,
        gallery=gallery,
        publisher=publisher,
        close_resources=close_resources,
    )
