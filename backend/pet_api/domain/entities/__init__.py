from .pet import UNSET, Pet, PetChanges, Unset

__all__ = [
    "Pet",
    "PetChanges",
    "UNSET",
    "Unset",
]
