"""Field validators for pet records — pure functions, no state.

Each ``validate_*`` function returns ``None`` on success and raises
:class:`ValidationError` otherwise. Length and emptiness are always checked
on the trimmed value, which is also the value that ends up stored.
"""

from pet_api.domain.exceptions import ValidationError, ValidationErrorKind

MAX_NAME_LENGTH = 100
MAX_SPECIES_LENGTH = 50
MAX_OWNER_NAME_LENGTH = 100
MAX_AGE = 100


def normalize_display_name(value: str) -> str:
    """Strip leading/trailing whitespace. Case and inner spacing are kept."""
    return value.strip()


def validate_email(email: str) -> bool:
    """Return True when the address contains both ``@`` and ``.``.

    Deliberately permissive: no grammar check beyond the two substrings.
    """
    return "@" in email and "." in email


def _validate_text(value: str, *, field: str, label: str, max_length: int) -> None:
    trimmed = normalize_display_name(value)
    if not trimmed:
        raise ValidationError(field, f"{label} cannot be empty", ValidationErrorKind.EMPTY)
    if len(trimmed) > max_length:
        raise ValidationError(
            field,
            f"{label} must be {max_length} characters or less",
            ValidationErrorKind.TOO_LONG,
        )


def validate_name(name: str) -> None:
    _validate_text(name, field="name", label="Pet name", max_length=MAX_NAME_LENGTH)


def validate_species(species: str) -> None:
    _validate_text(species, field="species", label="Species", max_length=MAX_SPECIES_LENGTH)


def validate_owner_name(owner_name: str) -> None:
    _validate_text(
        owner_name, field="owner_name", label="Owner name", max_length=MAX_OWNER_NAME_LENGTH
    )


def validate_age(age: int) -> None:
    if age < 0:
        raise ValidationError("age", "Age cannot be negative", ValidationErrorKind.OUT_OF_RANGE)
    if age > MAX_AGE:
        raise ValidationError(
            "age", f"Age must be {MAX_AGE} or less", ValidationErrorKind.OUT_OF_RANGE
        )
