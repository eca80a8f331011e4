from .pet_store import PetStore

__all__ = [
    "PetStore",
]
