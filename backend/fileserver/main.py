"""Fileserver FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from starlette.staticfiles import StaticFiles

from fileserver import __version__
from fileserver.config import Settings, get_settings
from fileserver.services.downloads_service import DownloadsService

logger = logging.getLogger(__name__)


def _setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Application factory bound to one downloads directory."""
    from fileserver.api.routes import api_router

    settings = settings or get_settings()
    service = DownloadsService(settings.downloads_dir, chunk_size=settings.hash_chunk_size)

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        """Startup / shutdown lifecycle."""
        _setup_logging(settings)

        try:
            service.ensure_directory()
        except OSError as e:
            logger.critical("Failed to create downloads dir %s: %s", service.directory, e)
            raise

        logger.info(
            "%s v%s serving %s on %s:%s",
            settings.app_name, __version__, service.directory, settings.host, settings.port,
        )
        yield
        logger.info("%s shutting down", settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
        lifespan=_lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.downloads_service = service
    app.state.static_files = StaticFiles(directory=service.directory, check_dir=False)

    app.include_router(api_router)

    return app


app = create_app()


def run(**kwargs: Any) -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "fileserver.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.uvicorn_workers,
        log_level=settings.log_level.lower(),
        **kwargs,
    )


if __name__ == "__main__":
    run()
