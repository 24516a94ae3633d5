"""Data URL helpers for moving images between capture, store and display."""

import base64

from photo_reel.domain.errors import MalformedPayloadError
from photo_reel.domain.photos import BASE64_MARKER, CapturedFrame


def to_transport_payload(frame: CapturedFrame) -> str:
    """Return the raw base64 content of a captured frame."""
    _, marker, payload = frame.data_url.partition(BASE64_MARKER)
    if not marker:
        raise MalformedPayloadError("Data URL has no base64 marker")
    return payload


def to_data_url(raw_base64: str, mime_type: str) -> str:
    """Prefix raw base64 content so it can be displayed."""
    return f"data:{mime_type}{BASE64_MARKER}{raw_base64}"


def bytes_to_data_url(image_bytes: bytes, mime_type: str | None = None) -> str:
    """Convert bytes to a base64 data URL."""
    resolved = mime_type or detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return to_data_url(encoded, resolved)


def detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    return "application/octet-stream"
