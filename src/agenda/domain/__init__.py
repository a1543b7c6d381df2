"""Domain layer: the Contact entity and field validation. No dependencies on outer layers."""

from agenda.domain.entities import Contact
from agenda.domain.validation import (
    first_invalid_field,
    validate_email,
    validate_name,
    validate_phone,
)

__all__ = [
    "Contact",
    "first_invalid_field",
    "validate_email",
    "validate_name",
    "validate_phone",
]
