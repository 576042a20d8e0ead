"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from articles_service.config import get_settings
from articles_service.domain.exceptions import StoreError
from articles_service.infrastructure.dependencies import build_article_repository
from articles_service.infrastructure.logging.log_config import setup_logging, shutdown_logging
from articles_service.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and connect to the article store.

    A ConfigError from the store client propagates and aborts startup.
    """
    settings = get_settings()
    setup_logging()

    app.state.article_repository = build_article_repository(settings)
    logger.info(
        "Article store ready (table=%s, tag_index=%s, env=%s)",
        settings.articles_table,
        settings.articles_tag_index,
        settings.app_env,
    )

    yield

    logger.info("Shutting down %s", settings.app_title)
    shutdown_logging()


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Map backing-store failures to 502 Bad Gateway."""
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": str(exc)},
    )


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StoreError, store_error_handler)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "articles_service.main:app",
        host="0.0.0.0",
        port=8080,
        reload=not get_settings().is_production,
    )
