"""Unit tests for the pet field validators."""

import pytest

from pet_api.domain.exceptions import ValidationError, ValidationErrorKind
from pet_api.domain.validation import (
    normalize_display_name,
    validate_age,
    validate_email,
    validate_name,
    validate_owner_name,
    validate_species,
)


# ── Email ──


def test_validate_email_accepts_address_with_at_and_dot():
    assert validate_email("test@example.com") is True


@pytest.mark.parametrize("email", ["invalid-email", "no-at-sign.com", "user@localhost", ""])
def test_validate_email_rejects_missing_substrings(email: str):
    assert validate_email(email) is False


def test_validate_email_is_permissive_about_order():
    """Only the presence of both characters matters, not their position."""
    assert validate_email(".@") is True
    assert validate_email("a.b@c") is True


# ── Display names ──


def test_normalize_display_name_trims_outer_whitespace_only():
    assert normalize_display_name("  John Doe  ") == "John Doe"
    assert normalize_display_name("Alice") == "Alice"
    assert normalize_display_name("\tMary  Ann\n") == "Mary  Ann"
    assert normalize_display_name("bOb") == "bOb"


def test_validate_name_accepts_padded_value():
    validate_name("Buddy")
    validate_name("  Max  ")


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_validate_name_rejects_empty_after_trim(name: str):
    with pytest.raises(ValidationError) as exc_info:
        validate_name(name)
    assert exc_info.value.kind is ValidationErrorKind.EMPTY
    assert exc_info.value.field == "name"
    assert exc_info.value.message == "Pet name cannot be empty"


def test_validate_name_length_boundary():
    validate_name("A" * 100)
    validate_name("  " + "A" * 100 + "  ")
    with pytest.raises(ValidationError) as exc_info:
        validate_name("A" * 101)
    assert exc_info.value.kind is ValidationErrorKind.TOO_LONG
    assert "100 characters or less" in exc_info.value.message


def test_validate_species_length_boundary():
    validate_species("Dog")
    validate_species("A" * 50)
    with pytest.raises(ValidationError) as exc_info:
        validate_species("A" * 51)
    assert exc_info.value.field == "species"
    assert exc_info.value.kind is ValidationErrorKind.TOO_LONG


def test_validate_species_rejects_empty():
    with pytest.raises(ValidationError, match="Species cannot be empty"):
        validate_species("")


def test_validate_owner_name():
    validate_owner_name("John Doe")
    with pytest.raises(ValidationError, match="Owner name cannot be empty"):
        validate_owner_name("")
    with pytest.raises(ValidationError) as exc_info:
        validate_owner_name("A" * 101)
    assert exc_info.value.field == "owner_name"


# ── Age ──


@pytest.mark.parametrize("age", [0, 50, 100])
def test_validate_age_accepts_range(age: int):
    validate_age(age)


@pytest.mark.parametrize("age", [101, 255, -1])
def test_validate_age_rejects_out_of_range(age: int):
    with pytest.raises(ValidationError) as exc_info:
        validate_age(age)
    assert exc_info.value.kind is ValidationErrorKind.OUT_OF_RANGE
    assert exc_info.value.field == "age"
