from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.staticfiles import StaticFiles

from .api import register_routers
from .config import Settings, get_settings
from .core.logging import configure_logging
from .errors import NewsdeskError
from .identifiers import utc_timestamp

log = logging.getLogger("newsdesk")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Content management API for the news site: stories, posters, media, ads and users.",
        version=settings.VERSION,
    )
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    upload_dir = Path(settings.UPLOAD_DIR)
    app.mount("/uploads", StaticFiles(directory=upload_dir, check_dir=False), name="uploads")

    @app.on_event("startup")
    async def ensure_upload_dir() -> None:
        upload_dir.mkdir(parents=True, exist_ok=True)

    register_routers(app)

    @app.get("/health", tags=["Health"])
    def health() -> dict:
        return {
            "status": "OK",
            "timestamp": utc_timestamp(),
            "uptime": time.monotonic() - app.state.started_at,
        }

    @app.get("/api/test", tags=["Health"])
    def cors_check() -> dict[str, str]:
        return {"message": "CORS is working"}

    @app.exception_handler(NewsdeskError)
    async def newsdesk_error_handler(request: Request, exc: NewsdeskError):
        if exc.status_code >= 500:
            log.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.details)
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        log.error("Unhandled error: %s", exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "details": str(exc)},
        )

    return app


app = create_app()
