"""Error types raised by the photo reel pipeline."""


class PhotoReelError(Exception):
    """Base class for failures of a single user action."""


class DeviceAccessError(PhotoReelError):
    """Camera permission was denied or no usable video device exists."""


class FrameEncodeError(PhotoReelError):
    """A captured frame could not be encoded as a still image."""


class FileReadError(PhotoReelError):
    """A user-selected file could not be read."""


class MalformedPayloadError(PhotoReelError):
    """A data URL is missing its base64 marker."""


class StoreUnavailableError(PhotoReelError):
    """The remote gallery store could not be listed."""


class PublishError(PhotoReelError):
    """The remote gallery store rejected or failed a create."""
