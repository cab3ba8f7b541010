"""Validation rules for submitted profile form data."""

import re
from dataclasses import dataclass, field

from core.exceptions import ProfileValidationError
from domain.entities.profile import ProfileFormData

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# (field path, message) for fields that must be non-blank after trimming.
REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("name", "Name is required"),
    ("description", "Description is required"),
    ("address.street", "Street is required"),
    ("address.city", "City is required"),
    ("address.state", "State is required"),
    ("address.zip_code", "Zip code is required"),
)


@dataclass
class ValidationResult:
    """Outcome of validating a profile form."""

    field_errors: dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.field_errors

    def raise_for_errors(self) -> None:
        """Raise ProfileValidationError if any field failed."""
        if self.field_errors:
            raise ProfileValidationError(self.field_errors)


def _resolve(form: ProfileFormData, path: str) -> object:
    value: object = form
    for part in path.split("."):
        value = getattr(value, part)
    return value


def validate_profile_form(form: ProfileFormData) -> ValidationResult:
    """Check every rule and collect all failures, keyed by dotted field path."""
    assert isinstance(form, ProfileFormData), "validate_profile_form() expects ProfileFormData"

    errors: dict[str, str] = {}

    for path, message in REQUIRED_FIELDS:
        value = _resolve(form, path)
        if not isinstance(value, str) or not value.strip():
            errors[path] = message

    if not EMAIL_PATTERN.fullmatch(form.contact.email):
        errors["contact.email"] = "Valid email is required"

    # Exact (0, 0) is the "not entered" sentinel; no range check otherwise.
    # Keyed like the form's coordinates picker, not by its address path.
    if form.address.coordinates.is_unset:
        errors["coordinates"] = "Valid coordinates are required"

    if any(not isinstance(i, str) or not i.strip() for i in form.interests):
        errors["interests"] = "Interests cannot be blank"

    return ValidationResult(field_errors=errors)
