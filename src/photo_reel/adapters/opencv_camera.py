"""OpenCV-backed camera and frame encoder."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import cv2
import numpy as np

from photo_reel.domain.errors import DeviceAccessError, FrameEncodeError
from photo_reel.services.capture import Camera, FrameEncoder

logger = logging.getLogger(__name__)

_EXTENSIONS = {
    "image/webp": ".webp",
    "image/jpeg": ".jpg",
    "image/png": ".png",
}


@dataclass
class OpenCVCameraStream:
    """A single opened ``cv2.VideoCapture``."""

    capture: cv2.VideoCapture
    warmup_frames: int

    async def first_frame(self) -> np.ndarray:
        """Read until the device yields a frame with non-zero dimensions."""
        for _ in range(max(self.warmup_frames, 1)):
            ok, frame = await asyncio.to_thread(self.capture.read)
            if ok and frame is not None and _has_dimensions(frame):
                return frame
        raise DeviceAccessError("Camera produced no usable frame")


@dataclass
class OpenCVCamera(Camera):
    """Camera that opens a local video device per capture."""

    device_index: int = 0
    warmup_frames: int = 30

    @asynccontextmanager
    async def open(self) -> AsyncIterator[OpenCVCameraStream]:
        """Open the device and always release it on exit."""
        capture = await asyncio.to_thread(cv2.VideoCapture, self.device_index)
        try:
            if not capture.isOpened():
                raise DeviceAccessError(
                    f"Camera index {self.device_index} unavailable"
                )
            yield OpenCVCameraStream(capture=capture, warmup_frames=self.warmup_frames)
        finally:
            await asyncio.to_thread(capture.release)
            logger.debug("Released camera", extra={"device_index": self.device_index})


@dataclass
class OpenCVFrameEncoder(FrameEncoder):
    """Encode BGR frames with ``cv2.imencode``."""

    def encode(self, frame: np.ndarray, mime_type: str, quality: int) -> bytes:
        """Encode a frame as the requested still image type."""
        extension = _EXTENSIONS.get(mime_type)
        if extension is None:
            raise FrameEncodeError(f"Unsupported capture type {mime_type}")
        params: list[int] = []
        if extension == ".webp":
            params = [cv2.IMWRITE_WEBP_QUALITY, quality]
        elif extension == ".jpg":
            params = [cv2.IMWRITE_JPEG_QUALITY, quality]
        try:
            success, encoded = cv2.imencode(extension, frame, params)
        except cv2.error as exc:
            raise FrameEncodeError("Failed to encode captured frame") from exc
        if not success:
            raise FrameEncodeError("Failed to encode captured frame")
        return encoded.tobytes()


def _has_dimensions(frame: np.ndarray) -> bool:
    return frame.ndim >= 2 and frame.shape[0] > 0 and frame.shape[1] > 0
