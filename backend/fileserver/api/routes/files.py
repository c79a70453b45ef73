"""Downloads directory routes — one catch-all endpoint.

Dispatch depends on method and query string, not on the path:

* ``DELETE /<name>``         remove ``<name>``
* ``GET /?json[&hash=algo]`` JSON listing, optionally hashed
* anything else              static file from the directory
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool
from starlette.staticfiles import StaticFiles

from fileserver.api.deps import get_downloads_service, get_static_files
from fileserver.services.downloads_service import (
    DeleteFailedError,
    DownloadsService,
    UnknownFileError,
)

logger = logging.getLogger(__name__)
router = APIRouter()

JSON_PARAM = "json"
HASH_PARAM = "hash"


@router.api_route(
    "/{file_path:path}",
    methods=["GET", "HEAD", "DELETE"],
    include_in_schema=False,
)
async def downloads(
    request: Request,
    file_path: str,
    service: DownloadsService = Depends(get_downloads_service),
    static: StaticFiles = Depends(get_static_files),
) -> Response:
    if request.method == "DELETE":
        return await _delete_file(service, file_path)

    query = request.query_params
    if JSON_PARAM in query:
        hashes = query.getlist(HASH_PARAM)
        return await _list_files(service, hashes[0] if hashes else "")

    return await static.get_response(static.get_path(request.scope), request.scope)


async def _list_files(service: DownloadsService, algorithm: str) -> Response:
    try:
        records = await run_in_threadpool(service.list_files, algorithm)
    except OSError as e:
        logger.error("Listing %s failed: %s", service.directory, e)
        return PlainTextResponse(str(e), status_code=500)
    return JSONResponse([r.to_json() for r in records])


async def _delete_file(service: DownloadsService, name: str) -> Response:
    name = name.lstrip("/")
    try:
        await run_in_threadpool(service.delete_file, name)
    except UnknownFileError as e:
        return PlainTextResponse(str(e), status_code=404)
    except DeleteFailedError as e:
        logger.error("%s", e)
        return PlainTextResponse(str(e), status_code=500)
    return Response(status_code=200)
