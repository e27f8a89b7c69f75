"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.json_repository import JsonFileContactRepository, load_contacts
from contactbook.infrastructure.memory_repository import InMemoryContactRepository

__all__ = [
    "InMemoryContactRepository",
    "JsonFileContactRepository",
    "load_contacts",
]
