"""FastAPI dependency injection — hands the application's store to request handlers."""

from fastapi import Request

from pet_api.application.services import PetStore


def get_pet_store(request: Request) -> PetStore:
    """Provides the PetStore created for this application in ``create_app``."""
    return request.app.state.pet_store
