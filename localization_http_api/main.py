"""
Entry point for the Localization Service HTTP API.

This module creates the FastAPI application, wires up middleware and
error handlers, and mounts the routers under a common prefix.

Intended usage:
    uvicorn localization_http_api.main:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from localization import __version__
from localization.adapters.persistence.session import init_db
from localization.core.domain.exceptions import (
    DictionaryItemNotFoundError,
    DomainError,
    LanguageNotFoundError,
)
from localization.shared.config import settings
from localization.shared.container import container
from localization.shared.logging_config import configure_logging
from localization.shared.observability import setup_observability
from localization_http_api.routers import audit, dictionary, languages

logger = structlog.get_logger()


def _env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value else default


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    init_db(container.engine())
    logger.info(
        "api_started",
        version=__version__,
        api_prefix=settings.API_PREFIX,
        env=settings.APP_ENV.value,
    )
    yield
    logger.info("api_stopped")


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------


async def _not_found_handler(request: Request, exc: DomainError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": exc.message, "code": "not_found"},
    )


async def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.warning("domain_error", path=request.url.path, error=exc.message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message, "code": "domain_error"},
    )


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application instance.
    """
    configure_logging()

    docs_enabled = _env("LOCALIZATION_API_ENABLE_DOCS", "true").lower() == "true"

    app = FastAPI(
        title="Localization Service HTTP API",
        version=__version__,
        debug=settings.DEBUG,
        lifespan=lifespan,
        openapi_url="/openapi.json" if docs_enabled else None,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_observability(app)

    app.add_exception_handler(DictionaryItemNotFoundError, _not_found_handler)
    app.add_exception_handler(LanguageNotFoundError, _not_found_handler)
    app.add_exception_handler(DomainError, _domain_error_handler)

    @app.get("/health", tags=["system"])
    async def health() -> dict:
        return {
            "status": "ok",
            "version": __version__,
            "api_prefix": settings.API_PREFIX,
        }

    app.include_router(dictionary.router, prefix=settings.API_PREFIX)
    app.include_router(languages.router, prefix=settings.API_PREFIX)
    app.include_router(audit.router, prefix=settings.API_PREFIX)

    return app


# Default application instance
app = create_app()


# ---------------------------------------------------------------------------
# Local development entry point
# ---------------------------------------------------------------------------


if __name__ == "__main__":
    host = _env("LOCALIZATION_API_HOST", "0.0.0.0")
    port_str = _env("LOCALIZATION_API_PORT", "8000")

    try:
        port = int(port_str)
    except ValueError:
        raise SystemExit(
            f"Invalid LOCALIZATION_API_PORT value {port_str!r}; must be an integer."
        ) from None

    import uvicorn

    uvicorn.run(
        "localization_http_api.main:app",
        host=host,
        port=port,
        reload=_env("LOCALIZATION_API_RELOAD", "false").lower() == "true",
    )
