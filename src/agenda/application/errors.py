"""Errors raised by ContactRepository implementations."""


class ContactStoreError(Exception):
    """Base class for contact store failures."""


class InvalidContactError(ContactStoreError):
    """Missing contact or non-positive id. Raised before any storage access."""


class ContactNotFoundError(ContactStoreError):
    """No stored contact has the given id."""

    def __init__(self, contact_id: int) -> None:
        super().__init__(f"Contact with id {contact_id} not found")
        self.contact_id = contact_id


class StorageError(ContactStoreError):
    """Underlying persistence error. The original exception is chained as __cause__."""
