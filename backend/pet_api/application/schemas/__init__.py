from .pet import PetCreate, PetUpdate, PetResponse, PetListResponse

__all__ = [
    "PetCreate",
    "PetUpdate",
    "PetResponse",
    "PetListResponse",
]
