"""Turn camera frames and picked files into data URL payloads."""

import asyncio
import logging
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Protocol

import numpy as np

from photo_reel.domain.errors import FileReadError
from photo_reel.domain.photos import CapturedFrame
from photo_reel.services.encoding import bytes_to_data_url, detect_mime_type

logger = logging.getLogger(__name__)


class CameraStream(Protocol):
    """A live video source acquired from a camera."""

    async def first_frame(self) -> np.ndarray:
        """Wait for the first frame with known dimensions and return it."""


class Camera(Protocol):
    """Interface for exclusive, temporary access to a video device."""

    def open(self) -> AbstractAsyncContextManager[CameraStream]:
        """Acquire the device; leaving the context releases it."""


class FrameEncoder(Protocol):
    """Interface for encoding raw frames as still images."""

    def encode(self, frame: np.ndarray, mime_type: str, quality: int) -> bytes:
        """Encode a frame and return the image bytes."""


class ImageFile(Protocol):
    """A user-chosen file, such as a FastAPI ``UploadFile``."""

    filename: str | None
    content_type: str | None

    async def read(self) -> bytes:
        """Return the file's full contents."""


@dataclass
class CaptureService:
    """Produce ``CapturedFrame`` payloads from the camera or a file."""

    camera: Camera
    encoder: FrameEncoder
    mime_type: str = "image/webp"
    quality: int = 92

    async def capture_from_camera(self) -> CapturedFrame:
        """Grab a single frame from the camera and encode it."""
        async with self.camera.open() as stream:
            frame = await stream.first_frame()
            surface = np.ascontiguousarray(frame)
            image_bytes = await asyncio.to_thread(
                self.encoder.encode, surface, self.mime_type, self.quality
            )
        height, width = surface.shape[:2]
        logger.info(
            "Captured camera frame",
            extra={"width": width, "height": height, "mime_type": self.mime_type},
        )
        return CapturedFrame(bytes_to_data_url(image_bytes, self.mime_type))

    async def read_from_file(self, file: ImageFile) -> CapturedFrame:
        """Read a picked file into a data URL."""
        try:
            content = await file.read()
        except OSError as exc:
            raise FileReadError(f"Could not read {file.filename or 'file'}") from exc
        if not content:
            raise FileReadError(f"{file.filename or 'File'} is empty")
        return CapturedFrame(
            bytes_to_data_url(content, _resolve_mime_type(file.content_type, content))
        )


def _resolve_mime_type(declared: str | None, content: bytes) -> str:
    """Prefer the declared image type, falling back to signature sniffing."""
    if declared and declared.startswith("image/"):
        return declared
    return detect_mime_type(content)
