"""Application layer: use cases, ports, store errors and DTOs. Depends only on domain."""

from agenda.application.contact_service import ContactService
from agenda.application.dto import (
    ContactCreated,
    ContactData,
    ContactDeleted,
    ContactUpdated,
    ErrorKind,
    Invalid,
    NotFound,
    StorageFailure,
)
from agenda.application.errors import (
    ContactNotFoundError,
    ContactStoreError,
    InvalidContactError,
    StorageError,
)
from agenda.application.ports import ContactRepository

__all__ = [
    "ContactCreated",
    "ContactData",
    "ContactDeleted",
    "ContactNotFoundError",
    "ContactRepository",
    "ContactService",
    "ContactStoreError",
    "ContactUpdated",
    "ErrorKind",
    "Invalid",
    "InvalidContactError",
    "NotFound",
    "StorageError",
    "StorageFailure",
]
