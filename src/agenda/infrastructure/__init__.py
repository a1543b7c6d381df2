"""Infrastructure layer: concrete implementations of application ports."""

from agenda.infrastructure.config import Settings, configure_logging, load_settings
from agenda.infrastructure.memory_repository import InMemoryContactRepository
from agenda.infrastructure.persistence.sql_repository import SqlContactRepository

__all__ = [
    "InMemoryContactRepository",
    "Settings",
    "SqlContactRepository",
    "configure_logging",
    "load_settings",
]
