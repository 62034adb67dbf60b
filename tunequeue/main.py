"""FastAPI application exposing the media reference endpoints."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tunequeue import __version__
from tunequeue.api.media import router as media_router
from tunequeue.config import AppConfig, load_config
from tunequeue.errors import ApiErrorException
from tunequeue.logging import configure_logging, get_logger
from tunequeue.logging_events import log_event

logger = get_logger(__name__)


async def _handle_api_error(request: Request, exc: ApiErrorException) -> JSONResponse:
    return exc.as_response(request_path=request.url.path, method=request.method)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the canonical exception handlers for the API."""

    app.add_exception_handler(ApiErrorException, _handle_api_error)  # type: ignore[arg-type]


def create_app(config: AppConfig | None = None) -> FastAPI:
    resolved = config or load_config()
    configure_logging(resolved.logging.level)

    app = FastAPI(
        title="tunequeue",
        version=__version__,
        openapi_url=f"{resolved.api.base_path}/openapi.json",
        docs_url=f"{resolved.api.base_path}/docs",
        redoc_url=None,
    )
    app.state.config_snapshot = resolved
    app.state.api_base_path = resolved.api.base_path
    setup_exception_handlers(app)
    app.include_router(media_router, prefix=resolved.api.base_path)
    log_event(logger, "app.configured", base_path=resolved.api.base_path)
    return app


__all__ = ["create_app", "setup_exception_handlers"]
