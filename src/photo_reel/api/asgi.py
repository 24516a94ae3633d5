"""ASGI entrypoint for the photo reel app."""

from photo_reel.api.app import create_app
from photo_reel.containers import build_container

app = create_app(build_container())
