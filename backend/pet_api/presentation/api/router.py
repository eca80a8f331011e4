"""Top-level API router — aggregates all endpoint routers."""

from fastapi import APIRouter

from pet_api.presentation.api.endpoints.health import router as health_router
from pet_api.presentation.api.endpoints.pets import router as pets_router

router = APIRouter()
router.include_router(health_router)
router.include_router(pets_router)
