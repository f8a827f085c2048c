"""FastAPI app factory: health endpoint + static content responder."""
from __future__ import annotations

import logging
import time
from collections.abc import Callable
from uuid import uuid4

from fastapi import FastAPI, Request, Response

from demo_server.api import router as api_router
from demo_server.config import Settings, get_settings
from demo_server.logging_conf import get_logger, setup_logging
from demo_server.service.static_files import SiteStaticFiles

logger = get_logger("app")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    # Configure logging before anything else.
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Static Demo Server",
        version=settings.app_version,
    )
    app.state.settings = settings

    @app.on_event("startup")
    async def _on_startup() -> None:
        logger.info(
            "startup",
            extra={
                "event": "startup",
                "host": settings.host,
                "port": settings.port,
                "static_root": str(settings.static_root),
            },
        )
        if not settings.static_root.is_dir():
            # Health keeps answering; only static lookups will 404.
            logger.warning(
                "static_root.missing",
                extra={"event": "static_root_missing", "static_root": str(settings.static_root)},
            )

    @app.on_event("shutdown")
    async def _on_shutdown() -> None:
        logger.info("shutdown", extra={"event": "shutdown"})

    @app.middleware("http")
    async def access_log(request: Request, call_next: Callable[[Request], Response]):
        """One JSON access line per request, keyed by X-Request-ID.

        The id is taken from the client or minted here, stored on
        `request.state` for the static app's own logs, and echoed back.
        Health probes log at DEBUG so orchestrator polling stays quiet.
        """
        request_id = request.headers.get("X-Request-ID", str(uuid4()))
        request.state.request_id = request_id
        path = request.url.path

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:  # Log and re-raise to let FastAPI handle 500
            logger.exception(
                "request.error",
                extra={
                    "event": "request_error",
                    "method": request.method,
                    "path": path,
                    "request_id": request_id,
                },
            )
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        response.headers["X-Request-ID"] = request_id
        logger.log(
            logging.DEBUG if path == "/health" else logging.INFO,
            "request.end",
            extra={
                "event": "request_end",
                "method": request.method,
                "path": path,
                "status_code": response.status_code,
                "content_type": response.headers.get("content-type"),
                "content_length": response.headers.get("content-length"),
                "elapsed_ms": round(elapsed_ms, 2),
                "request_id": request_id,
            },
        )
        return response

    # Routes match in order: /health first, then everything else is static.
    app.include_router(api_router)
    app.mount(
        "/",
        SiteStaticFiles(directory=settings.static_root, html=True, check_dir=False),
        name="static",
    )

    return app


# ASGI entrypoint for uvicorn: `uvicorn demo_server.main:app --port 8080`
app = create_app()
