"""In-memory implementation of ContactRepository (no DB)."""

import itertools
from dataclasses import replace

from agenda.application.errors import ContactNotFoundError, InvalidContactError
from agenda.domain import Contact


def _require_positive_id(contact_id: int) -> None:
    if contact_id <= 0:
        raise InvalidContactError("Contact id must be greater than zero")


class InMemoryContactRepository:
    """Stores contacts in a dict keyed by id. Ids start at 1 and are never reused."""

    def __init__(self) -> None:
        self._by_id: dict[int, Contact] = {}
        self._ids = itertools.count(1)

    def add(self, contact: Contact | None) -> Contact:
        if contact is None:
            raise InvalidContactError("Contact must not be None")
        stored = replace(contact, id=next(self._ids))
        self._by_id[stored.id] = stored
        return stored

    def get_by_id(self, contact_id: int) -> Contact | None:
        _require_positive_id(contact_id)
        return self._by_id.get(contact_id)

    def list_all(self) -> list[Contact]:
        return sorted(self._by_id.values(), key=lambda c: (c.name, c.id))

    def update(self, contact: Contact | None) -> Contact:
        if contact is None:
            raise InvalidContactError("Contact must not be None")
        _require_positive_id(contact.id)
        if contact.id not in self._by_id:
            raise ContactNotFoundError(contact.id)
        self._by_id[contact.id] = contact
        return contact

    def delete(self, contact_id: int) -> None:
        _require_positive_id(contact_id)
        if self._by_id.pop(contact_id, None) is None:
            raise ContactNotFoundError(contact_id)
