"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter

from articles_service.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the service status without touching the article store."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "table": settings.articles_table,
    }
