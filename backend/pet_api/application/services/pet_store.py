"""Thread-safe in-memory pet store — the authoritative collection of pet records."""

import dataclasses
import logging
from uuid import UUID, uuid4

from pet_api.application.schemas.pet import PetCreate
from pet_api.domain.entities import Pet, PetChanges
from pet_api.domain.exceptions import EntityNotFoundError, InvalidEmailError
from pet_api.domain.validation import (
    normalize_display_name,
    validate_age,
    validate_email,
    validate_name,
    validate_owner_name,
    validate_species,
)
from pet_api.infrastructure.concurrency import ReadWriteLock

logger = logging.getLogger(__name__)


class PetStore:
    """Owns every pet record and serializes mutations against concurrent readers.

    ``get``/``list``/``count`` share a read lock; ``create``/``update``/``delete``
    hold the write lock for their whole read-modify-write. Validation always
    runs before any mutation, so a rejected request leaves the store untouched.
    Every returned ``Pet`` is a copy.

    ``list()`` yields records in insertion order.
    """

    def __init__(self) -> None:
        self._pets: dict[UUID, Pet] = {}
        self._lock = ReadWriteLock()

    def create(self, data: PetCreate) -> Pet:
        validate_name(data.name)
        validate_species(data.species)
        validate_owner_name(data.owner_name)
        if not validate_email(data.owner_email):
            raise InvalidEmailError(data.owner_email)
        if data.age is not None:
            validate_age(data.age)

        # breed is never length-checked; whitespace-only is kept as ""
        pet = Pet(
            name=normalize_display_name(data.name),
            species=normalize_display_name(data.species),
            breed=normalize_display_name(data.breed) if data.breed is not None else None,
            age=data.age,
            owner_name=normalize_display_name(data.owner_name),
            owner_email=data.owner_email.strip(),
        )

        with self._lock.write():
            # uuid4 collisions are practically impossible, but never overwrite
            while pet.id in self._pets:
                pet = dataclasses.replace(pet, id=uuid4())
            self._pets[pet.id] = pet
            created = dataclasses.replace(pet)

        logger.info("Created pet %s (%s, %s)", created.id, created.name, created.species)
        return created

    def get(self, pet_id: UUID) -> Pet | None:
        with self._lock.read():
            pet = self._pets.get(pet_id)
            return dataclasses.replace(pet) if pet is not None else None

    def list(self) -> list[Pet]:
        with self._lock.read():
            return [dataclasses.replace(p) for p in self._pets.values()]

    def count(self) -> int:
        with self._lock.read():
            return len(self._pets)

    def update(self, pet_id: UUID, changes: PetChanges) -> Pet:
        """Validate and apply a partial update.

        Raises ValidationError before touching the record if any supplied
        field is invalid, and EntityNotFoundError if the id is unknown.
        """
        normalized = _validate_changes(changes)

        with self._lock.write():
            pet = self._pets.get(pet_id)
            if pet is None:
                raise EntityNotFoundError("Pet", pet_id)
            pet.update(normalized)
            updated = dataclasses.replace(pet)

        logger.info(
            "Updated pet %s (fields: %s)",
            pet_id,
            ", ".join(normalized.provided()) or "none",
        )
        return updated

    def delete(self, pet_id: UUID) -> Pet:
        with self._lock.write():
            pet = self._pets.pop(pet_id, None)
        if pet is None:
            raise EntityNotFoundError("Pet", pet_id)
        logger.info("Deleted pet %s", pet_id)
        return pet


def _validate_changes(changes: PetChanges) -> PetChanges:
    """Validate every supplied field and return a normalized copy."""
    provided = changes.provided()
    normalized: dict[str, object] = {}

    if "name" in provided:
        validate_name(changes.name)
        normalized["name"] = normalize_display_name(changes.name)
    if "species" in provided:
        validate_species(changes.species)
        normalized["species"] = normalize_display_name(changes.species)
    if "owner_name" in provided:
        validate_owner_name(changes.owner_name)
        normalized["owner_name"] = normalize_display_name(changes.owner_name)
    if "owner_email" in provided:
        if not validate_email(changes.owner_email):
            raise InvalidEmailError(changes.owner_email)
        normalized["owner_email"] = changes.owner_email.strip()
    if "age" in provided:
        if changes.age is not None:
            validate_age(changes.age)
        normalized["age"] = changes.age
    if "breed" in provided:
        # only an explicit None clears breed; blank text is stored as ""
        normalized["breed"] = (
            normalize_display_name(changes.breed) if changes.breed is not None else None
        )

    return PetChanges(**normalized)
