"""Domain entity — pure Python business object for a pet and its owner contact."""

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class Unset(Enum):
    """Marker type for a partial-update field the caller did not send."""

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = Unset.UNSET


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class PetChanges:
    """Partial update for a pet.

    Every field defaults to ``UNSET`` (leave untouched). For ``breed`` and
    ``age`` an explicit ``None`` means "clear the value"; the required text
    fields cannot be cleared.
    """

    name: str | Unset = UNSET
    species: str | Unset = UNSET
    breed: str | None | Unset = UNSET
    age: int | None | Unset = UNSET
    owner_name: str | Unset = UNSET
    owner_email: str | Unset = UNSET

    def provided(self) -> dict[str, object]:
        """Return only the fields the caller actually set."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }


@dataclass
class Pet:
    """Core domain entity for a pet record.

    Instances handed out by the store are copies; mutating one never
    affects stored state.
    """

    name: str
    species: str
    owner_name: str
    owner_email: str
    breed: str | None = None
    age: int | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.created_at

    def update(self, changes: PetChanges) -> None:
        """Apply the provided fields and refresh the updated_at timestamp.

        The timestamp never moves backwards, even if the wall clock does.
        """
        for name, value in changes.provided().items():
            setattr(self, name, value)
        self.updated_at = max(_utcnow(), self.updated_at)
