"""Client-side view state: fetched contacts, search term and sort order.

Search and sort never hit the server. Failed requests are logged and otherwise
ignored; local state is not rolled back, so it can drift from the server until
the next load().
"""

import logging
import uuid

import httpx

from client.contacts_api import ContactsApi
from contactbook.domain import Contact

logger = logging.getLogger(__name__)

ASCENDING = "asc"
DESCENDING = "desc"


def _name_key(contact: Contact) -> str:
    return str(contact.name or "").casefold()


class ContactBook:
    def __init__(self, api: ContactsApi) -> None:
        self._api = api
        self.contacts: list[Contact] = []
        self.search_term = ""
        self.sort_order: str | None = None

    async def load(self) -> None:
        """Replace local state with the full collection from the server."""
        try:
            self.contacts = await self._api.list_contacts()
        except httpx.HTTPError as e:
            logger.warning("Could not fetch contacts: %s", e)

    def set_search(self, term: str) -> None:
        self.search_term = term or ""

    def toggle_sort(self) -> str:
        """Unsorted and descending go to ascending; ascending goes to descending."""
        self.sort_order = DESCENDING if self.sort_order == ASCENDING else ASCENDING
        return self.sort_order

    @property
    def sort_indicator(self) -> str:
        if self.sort_order == ASCENDING:
            return "▲"
        if self.sort_order == DESCENDING:
            return "▼"
        return ""

    def filtered(self) -> list[Contact]:
        return [c for c in self.contacts if c.matches_name(self.search_term)]

    def visible(self) -> list[Contact]:
        """Filtered view, then sorted by case-folded name. Both sorts are stable."""
        contacts = self.filtered()
        if self.sort_order is None:
            return contacts
        return sorted(contacts, key=_name_key, reverse=self.sort_order == DESCENDING)

    async def add(self, name: str, phone_number: str, email: str) -> Contact | None:
        contact = Contact(
            id=str(uuid.uuid4()), name=name, phone_number=phone_number, email=email
        )
        try:
            created = await self._api.create_contact(contact)
        except httpx.HTTPError as e:
            logger.warning("Could not add contact %s: %s", contact.id, e)
            return None
        self.contacts.append(created)
        return created

    async def load_for_edit(self, contact_id: str) -> Contact | None:
        """Fetch one contact from the server for editing (local state is not consulted)."""
        try:
            return await self._api.get_contact(contact_id)
        except httpx.HTTPError as e:
            logger.warning("Could not load contact %s: %s", contact_id, e)
            return None

    async def update(self, contact: Contact) -> Contact | None:
        try:
            updated = await self._api.update_contact(contact)
        except httpx.HTTPError as e:
            logger.warning("Could not update contact %s: %s", contact.id, e)
            return None
        self.contacts = [updated if c.id == contact.id else c for c in self.contacts]
        return updated

    async def delete(self, contact_id: str) -> bool:
        try:
            await self._api.delete_contact(contact_id)
        except httpx.HTTPError as e:
            logger.warning("Could not delete contact %s: %s", contact_id, e)
            return False
        self.contacts = [c for c in self.contacts if c.id != contact_id]
        return True
