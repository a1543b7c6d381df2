"""SQLAlchemy implementation of ContactRepository.

One engine and session factory per repository, created at startup and disposed
with close(). Every call opens and closes its own session; mutating calls run
inside exactly one transaction that commits on success and rolls back on error.
"""

import logging

import sqlalchemy as sa
from sqlalchemy import exc
from sqlalchemy.orm import sessionmaker

from agenda.application.errors import (
    ContactNotFoundError,
    InvalidContactError,
    StorageError,
)
from agenda.domain import Contact
from agenda.infrastructure.persistence.models import Base, ContactRow

logger = logging.getLogger(__name__)


# Largest value a 64-bit INTEGER primary key can hold.
MAX_ID = 2**63 - 1


def _require_positive_id(contact_id: int) -> None:
    if contact_id <= 0:
        raise InvalidContactError("Contact id must be greater than zero")


class SqlContactRepository:
    """Stores contacts in a relational table (contacts)."""

    def __init__(self, engine: sa.Engine) -> None:
        self._engine = engine
        self._session_factory = sessionmaker(engine, expire_on_commit=False)

    @classmethod
    def from_url(cls, url: str, *, echo: bool = False) -> "SqlContactRepository":
        """Create the engine for url and the contacts table if it is missing."""
        engine = sa.create_engine(url, echo=echo)
        try:
            Base.metadata.create_all(engine)
        except exc.SQLAlchemyError as e:
            engine.dispose()
            logger.exception("Could not initialize contact storage at %s", engine.url)
            raise StorageError("Could not initialize contact storage") from e
        logger.debug("Contact storage ready at %s", engine.url)
        return cls(engine)

    @property
    def engine(self) -> sa.Engine:
        return self._engine

    def close(self) -> None:
        self._engine.dispose()

    def add(self, contact: Contact | None) -> Contact:
        if contact is None:
            raise InvalidContactError("Contact must not be None")

        try:
            with self._session_factory() as session, session.begin():
                row = ContactRow(name=contact.name, phone=contact.phone, email=contact.email)
                session.add(row)
                session.flush()
                stored = _row_to_contact(row)
        except exc.SQLAlchemyError as e:
            logger.exception("Error saving contact: %s", contact.name)
            raise StorageError("Error saving contact") from e

        logger.info("Contact saved: id=%s name=%s", stored.id, stored.name)
        return stored

    def get_by_id(self, contact_id: int) -> Contact | None:
        _require_positive_id(contact_id)
        if contact_id > MAX_ID:
            return None
        try:
            with self._session_factory() as session:
                row = session.get(ContactRow, contact_id)
                return _row_to_contact(row) if row is not None else None
        except exc.SQLAlchemyError as e:
            logger.exception("Error fetching contact with id %s", contact_id)
            raise StorageError("Error fetching contact") from e

    def list_all(self) -> list[Contact]:
        query = sa.select(ContactRow).order_by(ContactRow.name, ContactRow.id)
        try:
            with self._session_factory() as session:
                contacts = [_row_to_contact(row) for row in session.scalars(query)]
        except exc.SQLAlchemyError as e:
            logger.exception("Error listing contacts")
            raise StorageError("Error listing contacts") from e

        logger.info("Listed %d contacts", len(contacts))
        return contacts

    def update(self, contact: Contact | None) -> Contact:
        if contact is None:
            raise InvalidContactError("Contact must not be None")
        _require_positive_id(contact.id)
        if contact.id > MAX_ID:
            logger.warning("Contact not found for update. id=%s", contact.id)
            raise ContactNotFoundError(contact.id)

        try:
            with self._session_factory() as session, session.begin():
                row = session.get(ContactRow, contact.id)
                if row is None:
                    logger.warning("Contact not found for update. id=%s", contact.id)
                    raise ContactNotFoundError(contact.id)
                row.name = contact.name
                row.phone = contact.phone
                row.email = contact.email
                session.flush()
                stored = _row_to_contact(row)
        except exc.SQLAlchemyError as e:
            logger.exception("Error updating contact: %s", contact.name)
            raise StorageError("Error updating contact") from e

        logger.info("Contact updated: id=%s name=%s", stored.id, stored.name)
        return stored

    def delete(self, contact_id: int) -> None:
        _require_positive_id(contact_id)
        if contact_id > MAX_ID:
            logger.warning("Contact not found for deletion. id=%s", contact_id)
            raise ContactNotFoundError(contact_id)

        try:
            with self._session_factory() as session, session.begin():
                row = session.get(ContactRow, contact_id)
                if row is None:
                    logger.warning("Contact not found for deletion. id=%s", contact_id)
                    raise ContactNotFoundError(contact_id)
                session.delete(row)
        except exc.SQLAlchemyError as e:
            logger.exception("Error deleting contact with id %s", contact_id)
            raise StorageError("Error deleting contact") from e

        logger.info("Contact deleted. id=%s", contact_id)


def _row_to_contact(row: ContactRow) -> Contact:
    return Contact(id=row.id, name=row.name, phone=row.phone, email=row.email)
