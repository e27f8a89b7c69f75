"""Contact list, lookup, create, update and delete."""

import logging
import threading
from contextlib import nullcontext
from typing import Any

from contactbook.application.dto import ContactNotFound, WriteFailed
from contactbook.application.ports import ContactRepository, StorageWriteError
from contactbook.domain import Contact

logger = logging.getLogger(__name__)


class ContactService:
    """CRUD over the contact collection. Ids come from the caller and are not checked for collisions.

    Without serialize_writes, concurrent mutations are not guarded and the last
    rewrite to finish wins. With it, each read-modify-write-persist sequence
    runs under one lock.
    """

    def __init__(
        self,
        repository: ContactRepository,
        *,
        serialize_writes: bool = False,
    ) -> None:
        self._repo = repository
        self._write_lock = threading.Lock() if serialize_writes else None

    def _writing(self):
        return self._write_lock if self._write_lock is not None else nullcontext()

    def list_contacts(self) -> list[Contact]:
        """Return all contacts in insertion order, unfiltered."""
        return self._repo.list_all()

    def get_contact(self, contact_id: str) -> Contact | ContactNotFound:
        contact = self._repo.get_by_id(contact_id)
        if contact is None:
            return ContactNotFound(contact_id=contact_id)
        return contact

    def create_contact(self, data: dict[str, Any]) -> Contact | WriteFailed:
        """Append the contact as supplied (caller-assigned id) and persist."""
        contact = Contact.from_dict(data)
        logger.info("Creating contact %s", contact.to_dict())
        with self._writing():
            try:
                self._repo.append(contact)
            except StorageWriteError as e:
                logger.exception("Failed to persist new contact %s", contact.id)
                return WriteFailed(operation="create", reason=str(e))
        return contact

    def update_contact(
        self, contact_id: str, patch: dict[str, Any]
    ) -> Contact | ContactNotFound | WriteFailed:
        """Replace supplied fields on the contact; omitted fields keep their values."""
        with self._writing():
            existing = self._repo.get_by_id(contact_id)
            if existing is None:
                return ContactNotFound(contact_id=contact_id)
            updated = existing.merged(patch)
            try:
                self._repo.replace(contact_id, updated)
            except StorageWriteError as e:
                logger.exception("Failed to persist update of contact %s", contact_id)
                return WriteFailed(operation="update", reason=str(e))
        return updated

    def delete_contact(self, contact_id: str) -> Contact | ContactNotFound | WriteFailed:
        logger.info("Deleting contact %s", contact_id)
        with self._writing():
            try:
                removed = self._repo.remove(contact_id)
            except StorageWriteError as e:
                logger.exception("Failed to persist deletion of contact %s", contact_id)
                return WriteFailed(operation="delete", reason=str(e))
        if removed is None:
            return ContactNotFound(contact_id=contact_id)
        return removed
