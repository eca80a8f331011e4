"""Pet CRUD endpoints.

Domain errors raised by the store are not caught here; the global handlers
in ``error_handlers`` turn them into ``{"error": ...}`` responses.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from pet_api.application.schemas import PetCreate, PetListResponse, PetResponse, PetUpdate
from pet_api.application.services import PetStore
from pet_api.domain.exceptions import EntityNotFoundError
from pet_api.infrastructure.dependencies import get_pet_store

router = APIRouter(prefix="/pets", tags=["Pets"])


@router.get("", response_model=PetListResponse, response_model_exclude_none=True)
async def list_pets(
    store: PetStore = Depends(get_pet_store),
) -> PetListResponse:
    """Retrieve every pet together with the total count."""
    pets = store.list()
    return PetListResponse(
        pets=[PetResponse.model_validate(p, from_attributes=True) for p in pets],
        count=len(pets),
    )


@router.get("/{pet_id}", response_model=PetResponse, response_model_exclude_none=True)
async def get_pet(
    pet_id: UUID,
    store: PetStore = Depends(get_pet_store),
) -> PetResponse:
    """Retrieve a single pet by ID."""
    pet = store.get(pet_id)
    if pet is None:
        raise EntityNotFoundError("Pet", pet_id)
    return PetResponse.model_validate(pet, from_attributes=True)


@router.post(
    "",
    response_model=PetResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_pet(
    data: PetCreate,
    store: PetStore = Depends(get_pet_store),
) -> PetResponse:
    """Create a new pet."""
    pet = store.create(data)
    return PetResponse.model_validate(pet, from_attributes=True)


@router.put("/{pet_id}", response_model=PetResponse, response_model_exclude_none=True)
async def update_pet(
    pet_id: UUID,
    data: PetUpdate,
    store: PetStore = Depends(get_pet_store),
) -> PetResponse:
    """Update the fields present in the request body."""
    pet = store.update(pet_id, data.to_changes())
    return PetResponse.model_validate(pet, from_attributes=True)


@router.delete("/{pet_id}", response_model=PetResponse, response_model_exclude_none=True)
async def delete_pet(
    pet_id: UUID,
    store: PetStore = Depends(get_pet_store),
) -> PetResponse:
    """Delete a pet by ID and return the removed record."""
    pet = store.delete(pet_id)
    return PetResponse.model_validate(pet, from_attributes=True)
