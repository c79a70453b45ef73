"""FastAPI dependency injection — per-app services."""

from __future__ import annotations

from fastapi import Request
from starlette.staticfiles import StaticFiles

from fileserver.services.downloads_service import DownloadsService


def get_downloads_service(request: Request) -> DownloadsService:
    """Service bound to the directory this app was created for."""
    return request.app.state.downloads_service


def get_static_files(request: Request) -> StaticFiles:
    """Static file handler rooted at the downloads directory."""
    return request.app.state.static_files
