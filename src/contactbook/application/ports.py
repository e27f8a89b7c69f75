"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from contactbook.domain import Contact


class StorageWriteError(Exception):
    """Raised by a repository when rewriting the persisted collection fails.

    The in-memory collection has already been changed when this is raised.
    """


class ContactRepository(Protocol):
    """Ordered contact collection, mirrored to storage after every change."""

    def list_all(self) -> list[Contact]:
        """Return all contacts in insertion order."""
        ...

    def get_by_id(self, contact_id: str) -> Contact | None:
        """Return the first contact with the given id, or None."""
        ...

    def append(self, contact: Contact) -> None:
        """Append a contact and persist. Raises StorageWriteError."""
        ...

    def replace(self, contact_id: str, contact: Contact) -> bool:
        """Replace the first contact with the id and persist. False if not found."""
        ...

    def remove(self, contact_id: str) -> Contact | None:
        """Remove the first contact with the id and persist. None if not found."""
        ...
