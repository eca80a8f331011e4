"""Pydantic DTOs (Data Transfer Objects) for the Pet feature.

Field constraints (lengths, age range, email shape) are enforced by the
domain validators inside the store, not here, so that every rejection
carries the same domain error message regardless of entry point.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, StrictInt

from pet_api.domain.entities import UNSET, PetChanges


class PetCreate(BaseModel):
    """Schema for creating a new pet."""

    name: str = Field(..., examples=["Buddy"])
    species: str = Field(..., examples=["Dog"])
    breed: str | None = Field(None, examples=["Golden Retriever"])
    age: StrictInt | None = Field(None, examples=[3])
    owner_name: str = Field(..., examples=["John Doe"])
    owner_email: str = Field(..., examples=["john@example.com"])


class PetUpdate(BaseModel):
    """Schema for updating an existing pet — all fields optional.

    An omitted field is left untouched. An explicit ``null`` clears
    ``breed``/``age``; for the required text fields it is treated as omitted.
    """

    name: str | None = None
    species: str | None = None
    breed: str | None = None
    age: StrictInt | None = None
    owner_name: str | None = None
    owner_email: str | None = None

    def to_changes(self) -> PetChanges:
        """Translate the request into a domain partial update."""
        sent = self.model_fields_set

        def required(field: str):
            value = getattr(self, field)
            return value if field in sent and value is not None else UNSET

        def clearable(field: str):
            return getattr(self, field) if field in sent else UNSET

        return PetChanges(
            name=required("name"),
            species=required("species"),
            breed=clearable("breed"),
            age=clearable("age"),
            owner_name=required("owner_name"),
            owner_email=required("owner_email"),
        )


class PetResponse(BaseModel):
    """Schema returned to the client. ``breed``/``age`` are omitted when absent."""

    id: UUID
    name: str
    species: str
    breed: str | None = None
    age: int | None = None
    owner_name: str
    owner_email: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PetListResponse(BaseModel):
    """Snapshot of every pet plus the number of pets in it."""

    pets: list[PetResponse]
    count: int
