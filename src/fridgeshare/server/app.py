"""ASGI application for FridgeShare."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Optional
from uuid import uuid4

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.exceptions import HTTPException as StarletteHTTPException

from fridgeshare import __version__, metrics
from fridgeshare.config import Settings, get_settings
from fridgeshare.db.repository import Database
from fridgeshare.errors import FridgeShareError
from fridgeshare.logging_utils import configure_logging
from fridgeshare.server import ui
from fridgeshare.server.routes import ROUTERS

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("fridgeshare.access")

MAX_BODY_PREVIEW = 2048


def _error(
    status_code: int, message: str, headers: Optional[dict[str, str]] = None
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _describe_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Flatten pydantic errors into one readable sentence for ``{"error": ...}``."""

    parts: list[str] = []
    for error in errors:
        location = ".".join(
            str(entry) for entry in error.get("loc", ()) if entry not in ("body", "query", "path")
        )
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else str(message))
    return "; ".join(parts) or "Invalid request"


def _record_request(
    request: Request, request_id: str, status_code: int, started: float, failed: bool = False
) -> None:
    """Emit the access log line and request metrics for one finished request."""

    method, path = request.method, request.url.path
    elapsed = perf_counter() - started
    context = {"request_id": request_id, "user_id": getattr(request.state, "user_id", None)}
    log = access_logger.exception if failed else access_logger.info
    log(
        "HTTP %s %s status=%s duration_ms=%.2f",
        method,
        path,
        status_code,
        elapsed * 1000,
        extra=context,
    )
    metrics.REQUEST_COUNT.labels(method=method, path=path, status=str(status_code)).inc()
    metrics.REQUEST_LATENCY.labels(method=method, path=path).observe(elapsed)


async def _body_preview(request: Request) -> Optional[str]:
    try:
        raw = await request.body()
    except Exception:  # pragma: no cover - logging only
        return "<unable to read body>"
    if not raw:
        return None
    text = raw.decode("utf-8", errors="replace")
    if len(text) > MAX_BODY_PREVIEW:
        text = text[:MAX_BODY_PREVIEW] + "...(truncated)"
    return text


def _install_error_handlers(application: FastAPI) -> None:
    """Render every failure as ``{"error": message}`` with the matching status."""

    @application.exception_handler(FridgeShareError)
    async def fridgeshare_error_handler(request: Request, exc: FridgeShareError):
        level = logging.ERROR if exc.status_code >= 500 else logging.DEBUG
        logger.log(
            level, "%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message
        )
        return _error(exc.status_code, exc.message)

    @application.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            "Rejected %s %s: %s | body=%s",
            request.method,
            request.url.path,
            exc.errors(),
            await _body_preview(request),
            extra={"request_id": getattr(request.state, "request_id", None)},
        )
        return _error(status.HTTP_400_BAD_REQUEST, _describe_validation_errors(list(exc.errors())))

    @application.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API, its database handle and the SPA fallback from ``settings``."""

    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_format, [settings.jwt_secret])

    application = FastAPI(title="FridgeShare API", version=__version__)
    application.state.settings = settings

    database = Database(settings.database_url)
    database.create_schema()
    application.state.database = database

    @application.on_event("shutdown")
    def dispose_database() -> None:
        database.dispose()

    allow_all = "*" in settings.cors_origins
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else list(settings.cors_origins),
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.log_requests:

        @application.middleware("http")
        async def trace_requests(request: Request, call_next):
            request_id = request.headers.get("X-Request-ID") or uuid4().hex
            request.state.request_id = request_id
            started = perf_counter()
            try:
                response: Response = await call_next(request)
            except Exception:
                _record_request(request, request_id, 500, started, failed=True)
                raise
            response.headers.setdefault("X-Request-ID", request_id)
            _record_request(request, request_id, response.status_code, started)
            return response

    _install_error_handlers(application)

    for router in ROUTERS:
        application.include_router(router)

    @application.get("/healthz", include_in_schema=False)
    def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @application.get("/metrics", include_in_schema=False)
    def metrics_endpoint() -> Response:
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Catch-all SPA route goes last so API routes match first.
    application.include_router(ui.router)
    logger.debug("FridgeShare app ready (database=%s)", database.engine.url.render_as_string())
    return application


__all__ = ["create_app"]
