"""Single-page UI delivery and the non-API fallback route."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse, Response

from fridgeshare.config import Settings
from fridgeshare.errors import NotFoundError
from fridgeshare.server.deps import get_app_settings
from fridgeshare.server.templates import load as load_template

WEB_APP_PAGE = load_template("index.html")

router = APIRouter(include_in_schema=False)


def _resolve_dist_file(dist: Path, requested: str) -> Optional[Path]:
    """Return the file under ``dist`` matching ``requested``, refusing paths that escape it."""

    if not requested:
        return None
    root = dist.resolve()
    candidate = (root / requested).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        return None
    return candidate


@router.get("/{full_path:path}")
def spa_fallback(full_path: str, settings: Settings = Depends(get_app_settings)) -> Response:
    """Serve the frontend for every non-API path.

    A configured client build wins over the bundled page; when that build has
    no ``index.html`` a small JSON message is returned instead.
    """

    if full_path == "api" or full_path.startswith("api/"):
        raise NotFoundError("Not found")

    dist = settings.client_dist_path
    if dist is None:
        return HTMLResponse(WEB_APP_PAGE)

    asset = _resolve_dist_file(dist, full_path)
    if asset is not None:
        return FileResponse(asset)

    index = dist / "index.html"
    if index.is_file():
        return FileResponse(index)
    return JSONResponse({"message": "API is running"})
