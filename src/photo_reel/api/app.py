"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, File, Form, Request, UploadFile, status
from fastapi.responses import HTMLResponse, JSONResponse

from photo_reel.adapters.form_title_prompt import FormTitlePrompt
from photo_reel.api.pages import render_gallery_page
from photo_reel.app_logging import configure_logging
from photo_reel.containers import AppContainer
from photo_reel.domain.photos import FlowResult

_STATUS_CODES = {
    "published": status.HTTP_201_CREATED,
    "cancelled": status.HTTP_200_OK,
    "failed": status.HTTP_502_BAD_GATEWAY,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        cards = await app.state.container.publisher.load_existing()
        logger.info("Loaded existing images", extra={"count": len(cards)})
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def photo_reel_page(request: Request) -> HTMLResponse:
        """Render the gallery page."""
        state_container: AppContainer = request.app.state.container
        return HTMLResponse(render_gallery_page(state_container.gallery.cards))

    @app.get("/photos")
    async def list_photos(request: Request) -> dict[str, object]:
        """Return the rendered cards in gallery order."""
        state_container: AppContainer = request.app.state.container
        return {"cards": [card.to_dict() for card in state_container.gallery.cards]}

    @app.post("/photos/capture")
    async def capture_photo(
        request: Request, title: str | None = Form(default=None)
    ) -> JSONResponse:
        """Capture a camera frame and publish it under the given title."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.publisher.capture_and_publish(
            FormTitlePrompt(title)
        )
        return _flow_response(result)

    @app.post("/photos/upload")
    async def upload_photo(
        request: Request,
        title: str | None = Form(default=None),
        file: UploadFile | None = File(default=None),
    ) -> JSONResponse:
        """Publish an uploaded image file under the given title."""
        if file is None or not file.filename:
            return JSONResponse({"status": "ignored"})
        state_container: AppContainer = request.app.state.container
        result = await state_container.publisher.upload_and_publish(
            FormTitlePrompt(title), file
        )
        return _flow_response(result)

    return app


def _flow_response(result: FlowResult) -> JSONResponse:
    """Map a flow outcome to a JSON response."""
    body: dict[str, object] = {"status": result.status}
    if result.card is not None:
        body["card"] = result.card.to_dict()
    if result.notice is not None:
        body["notice"] = result.notice
    return JSONResponse(body, status_code=_STATUS_CODES[result.status])
