"""In-memory implementation of ContactRepository (no persistence)."""

from contactbook.domain import Contact


class InMemoryContactRepository:
    """Stores contacts in a list. Order preserved by insertion; duplicate ids are kept."""

    def __init__(self, contacts: list[Contact] | None = None) -> None:
        self._contacts: list[Contact] = list(contacts or [])

    def _persist(self) -> None:
        """Called after every change. Nothing to write for the in-memory store."""

    def _index_of(self, contact_id: str) -> int | None:
        for i, contact in enumerate(self._contacts):
            if contact.id == contact_id:
                return i
        return None

    def list_all(self) -> list[Contact]:
        return list(self._contacts)

    def get_by_id(self, contact_id: str) -> Contact | None:
        index = self._index_of(contact_id)
        return None if index is None else self._contacts[index]

    def append(self, contact: Contact) -> None:
        self._contacts.append(contact)
        self._persist()

    def replace(self, contact_id: str, contact: Contact) -> bool:
        index = self._index_of(contact_id)
        if index is None:
            return False
        self._contacts[index] = contact
        self._persist()
        return True

    def remove(self, contact_id: str) -> Contact | None:
        index = self._index_of(contact_id)
        if index is None:
            return None
        removed = self._contacts.pop(index)
        self._persist()
        return removed
