"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pet_api.config import get_settings
from pet_api.application.services import PetStore
from pet_api.infrastructure.logging.log_config import setup_logging
from pet_api.presentation.api.error_handlers import register_error_handlers
from pet_api.presentation.api.request_logging import register_request_logging
from pet_api.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)

_ENDPOINTS = (
    ("GET", "/health", "Health check"),
    ("GET", "/pets", "List all pets"),
    ("POST", "/pets", "Create a new pet"),
    ("GET", "/pets/{id}", "Get a specific pet"),
    ("PUT", "/pets/{id}", "Update a pet"),
    ("DELETE", "/pets/{id}", "Delete a pet"),
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and announce the routes."""
    settings = get_settings()
    setup_logging()

    logger.info("%s %s starting (%s)", settings.app_title, settings.app_version, settings.app_env)
    for method, path, description in _ENDPOINTS:
        logger.info("   %-6s %-16s - %s", method, path, description)

    yield

    logger.info("Shutting down with %d pet(s) in memory", app.state.pet_store.count())


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    Each call gets its own empty PetStore on ``app.state``.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.pet_store = PetStore()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_request_logging(app)
    register_error_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "pet_api.main:app",
        host=settings.host,
        port=settings.port,
    )
