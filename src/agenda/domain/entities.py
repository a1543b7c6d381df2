"""Domain entity: Contact."""

from dataclasses import dataclass

# Id of a contact that has not been stored yet.
UNSAVED_ID = 0


@dataclass(frozen=True)
class Contact:
    """
    A person in the agenda: name, phone and email.
    The id is assigned by storage on creation; callers leave it at UNSAVED_ID.
    """

    name: str
    phone: str
    email: str
    id: int = UNSAVED_ID

    @property
    def is_persisted(self) -> bool:
        return self.id > 0
