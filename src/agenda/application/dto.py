"""Input DTO and result types for the contact use cases."""

import enum
from dataclasses import dataclass, field
from typing import ClassVar

from agenda.domain import Contact


class ErrorKind(enum.Enum):
    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    STORAGE_FAILURE = "storage_failure"


@dataclass(frozen=True)
class ContactData:
    """Raw field values as typed by the user. Core has no UI dependency."""

    name: str | None = None
    phone: str | None = None
    email: str | None = None

    def stripped(self) -> "ContactData":
        return ContactData(
            name=(self.name or "").strip(),
            phone=(self.phone or "").strip(),
            email=(self.email or "").strip(),
        )


# --- success results ---


@dataclass(frozen=True)
class ContactCreated:
    """Contact was stored; carries the storage-assigned id."""

    contact: Contact


@dataclass(frozen=True)
class ContactUpdated:
    contact: Contact


@dataclass(frozen=True)
class ContactDeleted:
    contact_id: int


# --- failure results ---


@dataclass(frozen=True)
class Invalid:
    """Rejected before storage: a field failed validation or the id is not positive."""

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_ARGUMENT

    reason: str
    field: str | None = None


@dataclass(frozen=True)
class NotFound:
    """No stored contact for the given id. Caller should refresh its view."""

    kind: ClassVar[ErrorKind] = ErrorKind.NOT_FOUND

    contact_id: int


@dataclass(frozen=True)
class StorageFailure:
    """Storage was unavailable; nothing was partially applied."""

    kind: ClassVar[ErrorKind] = ErrorKind.STORAGE_FAILURE

    cause: str
    error: BaseException | None = field(default=None, compare=False, repr=False)
