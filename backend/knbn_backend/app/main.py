"""FastAPI application factory for the knbn web backend."""

from __future__ import annotations

import time
import logging
from fastapi import FastAPI
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from knbn_backend import __version__
from knbn_backend.app.api.router import api_router
from knbn_backend.app.core.config import get_settings, KnbnSettings
from knbn_backend.app.services.discovery import DiscoveryError

INDEX_HTML = """<!DOCTYPE html>
<html>
<head>
    <title>KnBn Board Viewer</title>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <link rel="stylesheet" href="/static/reset.css">
    <link rel="stylesheet" href="/static/style.css">
</head>
<body>
    <div id="root"></div>
    <script src="/static/react.production.min.js"></script>
    <script src="/static/react-dom.production.min.js"></script>
    <script src="/static/bundle.js"></script>
</body>
</html>
"""


def _configure_logging(settings: KnbnSettings) -> None:
    """Configure application logging destinations."""

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=handlers,
        force=True,
    )


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(settings: KnbnSettings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""

    settings = settings or get_settings()

    _configure_logging(settings)

    app = FastAPI(
        title="KnBn Web API",
        version=__version__,
    )

    request_logger = logging.getLogger("knbn_backend.http")

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.time()
        try:
            response = await call_next(request)
        except Exception:
            request_logger.exception("request_failed method=%s path=%s", request.method, request.url.path)
            raise
        finally:
            duration_ms = int((time.time() - start) * 1000)
            request_logger.info(
                "request method=%s path=%s status=%s duration_ms=%s",
                request.method,
                request.url.path,
                getattr(locals().get("response"), "status_code", "ERR"),
                duration_ms,
            )
        return response

    @app.exception_handler(DiscoveryError)
    async def handle_discovery_error(request: Request, exc: DiscoveryError) -> JSONResponse:
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        if errors:
            first = errors[0]
            field = ".".join(str(part) for part in first.get("loc", ()) if part != "query")
            message = f"Invalid parameter '{field}': {first.get('msg', 'invalid value')}"
        else:
            message = "Invalid request"
        return _error_response(400, message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logging.getLogger(__name__).exception("Unhandled error on %s", request.url.path)
        return _error_response(500, "Internal server error")

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    def index() -> str:
        """Serve the single-page client shell."""

        return INDEX_HTML

    if settings.static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")
    else:
        logging.info("Static client assets not found at %s; /static is disabled", settings.static_dir)

    app.include_router(api_router)

    return app
