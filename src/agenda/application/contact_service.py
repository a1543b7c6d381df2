"""Contact creation, listing, lookup, update and deletion over a ContactRepository."""

import logging

from agenda.application.dto import (
    ContactCreated,
    ContactData,
    ContactDeleted,
    ContactUpdated,
    Invalid,
    NotFound,
    StorageFailure,
)
from agenda.application.errors import (
    ContactNotFoundError,
    StorageError,
)
from agenda.application.ports import ContactRepository
from agenda.domain import Contact, first_invalid_field

logger = logging.getLogger(__name__)

_FIELD_REASONS = {
    "name": "Name is required.",
    "phone": "Phone must have at least 8 characters: digits, spaces, ( ) - +.",
    "email": "Email must look like name@domain.",
}


def _check_fields(data: ContactData) -> Invalid | None:
    field = first_invalid_field(data.name, data.phone, data.email)
    if field is None:
        return None
    logger.info("Contact rejected: invalid %s", field)
    return Invalid(reason=_FIELD_REASONS[field], field=field)


def _check_id(contact_id: int) -> Invalid | None:
    if contact_id <= 0:
        return Invalid(reason="Contact id must be greater than zero.", field="id")
    return None


def _storage_failure(exc: StorageError) -> StorageFailure:
    cause = exc.__cause__ if exc.__cause__ is not None else exc
    return StorageFailure(cause=type(cause).__name__, error=cause)


class ContactService:
    """Validates raw field values, then runs one store operation. Store errors become result values."""

    def __init__(self, repository: ContactRepository) -> None:
        self._repo = repository

    def create_contact(self, data: ContactData) -> ContactCreated | Invalid | StorageFailure:
        """Validate and store a new contact."""
        data = data.stripped()
        invalid = _check_fields(data)
        if invalid is not None:
            return invalid

        contact = Contact(name=data.name, phone=data.phone, email=data.email)
        try:
            stored = self._repo.add(contact)
        except StorageError as exc:
            return _storage_failure(exc)
        return ContactCreated(contact=stored)

    def list_contacts(self) -> list[Contact] | StorageFailure:
        """Return all contacts ordered by name."""
        try:
            return self._repo.list_all()
        except StorageError as exc:
            return _storage_failure(exc)

    def get_contact(self, contact_id: int) -> Contact | NotFound | Invalid | StorageFailure:
        """Return a contact by id."""
        invalid = _check_id(contact_id)
        if invalid is not None:
            return invalid
        try:
            contact = self._repo.get_by_id(contact_id)
        except StorageError as exc:
            return _storage_failure(exc)
        if contact is None:
            return NotFound(contact_id=contact_id)
        return contact

    def update_contact(
        self, contact_id: int, data: ContactData
    ) -> ContactUpdated | Invalid | NotFound | StorageFailure:
        """Validate and replace the stored fields of an existing contact."""
        invalid = _check_id(contact_id)
        if invalid is not None:
            return invalid
        data = data.stripped()
        invalid = _check_fields(data)
        if invalid is not None:
            return invalid

        contact = Contact(id=contact_id, name=data.name, phone=data.phone, email=data.email)
        try:
            stored = self._repo.update(contact)
        except ContactNotFoundError:
            return NotFound(contact_id=contact_id)
        except StorageError as exc:
            return _storage_failure(exc)
        return ContactUpdated(contact=stored)

    def delete_contact(self, contact_id: int) -> ContactDeleted | Invalid | NotFound | StorageFailure:
        """Remove a contact permanently."""
        invalid = _check_id(contact_id)
        if invalid is not None:
            return invalid
        try:
            self._repo.delete(contact_id)
        except ContactNotFoundError:
            return NotFound(contact_id=contact_id)
        except StorageError as exc:
            return _storage_failure(exc)
        return ContactDeleted(contact_id=contact_id)
