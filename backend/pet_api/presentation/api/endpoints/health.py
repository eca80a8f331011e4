"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter

from pet_api.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/")
@router.get("/health")
async def health_check() -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
    }
