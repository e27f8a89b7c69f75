"""Async HTTP client for the contacts REST API."""

from typing import Any
from urllib.parse import quote

import httpx

from contactbook.domain import Contact

CONTACTS_PATH = "/api/contacts"


def _contact_path(contact_id: Any) -> str:
    return f"{CONTACTS_PATH}/{quote(str(contact_id), safe='')}"


def _to_contact(data: Any, request: httpx.Request) -> Contact:
    if not isinstance(data, dict):
        raise httpx.DecodingError(
            f"Expected a contact object, got {type(data).__name__}", request=request
        )
    return Contact.from_dict(data)


class ContactsApi:
    """Thin wrapper over httpx.AsyncClient.

    Error statuses raise httpx.HTTPStatusError; bodies that are not the expected
    JSON shape raise httpx.DecodingError.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url, timeout=timeout, transport=transport
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ContactsApi":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> tuple[Any, httpx.Request]:
        response = await self._client.request(method, path, **kwargs)
        response.raise_for_status()
        try:
            return response.json(), response.request
        except ValueError as e:
            raise httpx.DecodingError(
                f"Invalid JSON from {method} {path}: {e}", request=response.request
            ) from e

    async def _contact(self, method: str, path: str, **kwargs) -> Contact:
        data, request = await self._request(method, path, **kwargs)
        return _to_contact(data, request)

    async def list_contacts(self) -> list[Contact]:
        data, request = await self._request("GET", CONTACTS_PATH)
        if not isinstance(data, list):
            raise httpx.DecodingError(
                f"Expected a contact array, got {type(data).__name__}", request=request
            )
        return [_to_contact(item, request) for item in data]

    async def get_contact(self, contact_id: str) -> Contact:
        return await self._contact("GET", _contact_path(contact_id))

    async def create_contact(self, contact: Contact) -> Contact:
        return await self._contact("POST", CONTACTS_PATH, json=contact.to_dict())

    async def update_contact(self, contact: Contact) -> Contact:
        return await self._contact("PUT", _contact_path(contact.id), json=contact.to_dict())

    async def delete_contact(self, contact_id: str) -> Contact:
        return await self._contact("DELETE", _contact_path(contact_id))
