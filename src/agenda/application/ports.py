"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from agenda.domain import Contact


class ContactRepository(Protocol):
    """Transactional CRUD gateway for contacts.

    Every mutating call is one all-or-nothing transaction. Implementations raise
    InvalidContactError, ContactNotFoundError or StorageError (see errors.py).
    """

    def add(self, contact: Contact | None) -> Contact:
        """Store a new contact and return it with its assigned id."""
        ...

    def get_by_id(self, contact_id: int) -> Contact | None:
        """Return the contact with the given id, or None."""
        ...

    def list_all(self) -> list[Contact]:
        """Return all contacts ordered by name ascending."""
        ...

    def update(self, contact: Contact | None) -> Contact:
        """Replace the stored row with the contact's field values."""
        ...

    def delete(self, contact_id: int) -> None:
        """Remove the contact permanently."""
        ...
