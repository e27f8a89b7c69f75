"""
Contactbook core: clean-architecture layout.

- domain: entities (Contact). No outer dependencies.
- application: use cases (ContactService), ports (ContactRepository), DTOs.
- infrastructure: adapters (InMemoryContactRepository, JsonFileContactRepository).
"""

from contactbook.application import (
    NOT_FOUND_MESSAGE,
    ContactNotFound,
    ContactRepository,
    ContactService,
    StorageWriteError,
    WriteFailed,
)
from contactbook.domain import Contact
from contactbook.infrastructure import InMemoryContactRepository, JsonFileContactRepository

__all__ = [
    "NOT_FOUND_MESSAGE",
    "Contact",
    "ContactNotFound",
    "ContactRepository",
    "ContactService",
    "InMemoryContactRepository",
    "JsonFileContactRepository",
    "StorageWriteError",
    "WriteFailed",
]
