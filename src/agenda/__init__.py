"""
Agenda core: clean-architecture layout.

- domain: Contact entity and field validation. No outer dependencies.
- application: use cases (ContactService), ports (ContactRepository), store errors, DTOs.
- infrastructure: adapters (InMemoryContactRepository, SqlContactRepository) and settings.
"""

from agenda.application import (
    ContactCreated,
    ContactData,
    ContactDeleted,
    ContactNotFoundError,
    ContactRepository,
    ContactService,
    ContactStoreError,
    ContactUpdated,
    ErrorKind,
    Invalid,
    InvalidContactError,
    NotFound,
    StorageError,
    StorageFailure,
)
from agenda.domain import Contact
from agenda.infrastructure import InMemoryContactRepository, SqlContactRepository

__all__ = [
    "Contact",
    "ContactCreated",
    "ContactData",
    "ContactDeleted",
    "ContactNotFoundError",
    "ContactRepository",
    "ContactService",
    "ContactStoreError",
    "ContactUpdated",
    "ErrorKind",
    "InMemoryContactRepository",
    "Invalid",
    "InvalidContactError",
    "NotFound",
    "SqlContactRepository",
    "StorageError",
    "StorageFailure",
]
