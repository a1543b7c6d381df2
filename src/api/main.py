"""
FastAPI backend: REST API over the contact service.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, Response
from pydantic import BaseModel

from agenda.application import (
    ContactCreated,
    ContactData,
    ContactDeleted,
    ContactService,
    ContactUpdated,
    ErrorKind,
    Invalid,
    NotFound,
    StorageFailure,
)
from agenda.domain import Contact
from agenda.infrastructure import SqlContactRepository, configure_logging, load_settings

logger = logging.getLogger(__name__)

_STATUS_BY_KIND = {
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORAGE_FAILURE: 503,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = load_settings()
    configure_logging(settings)
    app.state.repository = SqlContactRepository.from_url(
        settings.database_url, echo=settings.sql_echo
    )
    logger.info("Contact storage opened")
    try:
        yield
    finally:
        app.state.repository.close()
        logger.info("Contact storage closed")


app = FastAPI(title="Agenda API", lifespan=lifespan)


def get_service(request: Request) -> ContactService:
    return ContactService(request.app.state.repository)


def _raise_failure(result: Invalid | NotFound | StorageFailure):
    if isinstance(result, StorageFailure):
        logger.error("Storage failure (%s)", result.cause)
        detail = "Storage unavailable"
    elif isinstance(result, NotFound):
        detail = f"Contact {result.contact_id} not found"
    else:
        detail = result.reason
    raise HTTPException(status_code=_STATUS_BY_KIND[result.kind], detail=detail)


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: contacts ---


class ContactBody(BaseModel):
    name: str = ""
    phone: str = ""
    email: str = ""

    def to_data(self) -> ContactData:
        return ContactData(name=self.name, phone=self.phone, email=self.email)


class ContactItem(BaseModel):
    id: int
    name: str
    phone: str
    email: str

    @classmethod
    def from_contact(cls, contact: Contact) -> "ContactItem":
        return cls(id=contact.id, name=contact.name, phone=contact.phone, email=contact.email)


@app.get("/contacts")
def list_contacts(request: Request) -> list[ContactItem]:
    result = get_service(request).list_contacts()
    if isinstance(result, StorageFailure):
        _raise_failure(result)
    return [ContactItem.from_contact(c) for c in result]


@app.get("/contacts/{contact_id}")
def get_contact(contact_id: int, request: Request) -> ContactItem:
    result = get_service(request).get_contact(contact_id)
    if not isinstance(result, Contact):
        _raise_failure(result)
    return ContactItem.from_contact(result)


@app.post("/contacts", status_code=201)
def create_contact(body: ContactBody, request: Request) -> ContactItem:
    result = get_service(request).create_contact(body.to_data())
    if not isinstance(result, ContactCreated):
        _raise_failure(result)
    logger.info("New contact added: %s", result.contact.name)
    return ContactItem.from_contact(result.contact)


@app.put("/contacts/{contact_id}")
def update_contact(contact_id: int, body: ContactBody, request: Request) -> ContactItem:
    result = get_service(request).update_contact(contact_id, body.to_data())
    if not isinstance(result, ContactUpdated):
        _raise_failure(result)
    return ContactItem.from_contact(result.contact)


@app.delete("/contacts/{contact_id}", status_code=204)
def delete_contact(contact_id: int, request: Request) -> Response:
    result = get_service(request).delete_contact(contact_id)
    if not isinstance(result, ContactDeleted):
        _raise_failure(result)
    return Response(status_code=204)
