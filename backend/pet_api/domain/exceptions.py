"""Domain-specific exceptions — framework-independent."""

from enum import Enum
from uuid import UUID


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: UUID | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with ID {entity_id} not found")


class ValidationErrorKind(str, Enum):
    """Why a field was rejected."""

    EMPTY = "empty"
    TOO_LONG = "too_long"
    OUT_OF_RANGE = "out_of_range"
    INVALID_EMAIL = "invalid_email"


class ValidationError(Exception):
    """Raised when a create/update request carries a field that breaks a constraint.

    Always raised before any mutation takes place, so the caller can rely on
    the store being untouched when this propagates.
    """

    def __init__(self, field: str, message: str, kind: ValidationErrorKind):
        self.field = field
        self.message = message
        self.kind = kind
        super().__init__(message)


class InvalidEmailError(ValidationError):
    """Raised when an owner email lacks the required ``@`` and ``.`` characters."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            "owner_email",
            f"Invalid email address: {value}",
            ValidationErrorKind.INVALID_EMAIL,
        )
