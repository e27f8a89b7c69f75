"""Client view-state tests. Runs ContactBook against the real app through ASGI."""

import asyncio
import io
import logging

import httpx
import pytest
from rich.console import Console

from api.main import create_app
from client.contacts_api import ContactsApi
from client.render import print_contacts
from client.state import ContactBook
from contactbook.application import ContactService
from contactbook.domain import Contact
from contactbook.infrastructure import InMemoryContactRepository

SEED = [
    Contact(id="1", name="bob", phone_number="1", email="b@x.com"),
    Contact(id="2", name="Alice", phone_number="2", email="a@x.com"),
    Contact(id="3", name="Bob", phone_number="3", email="b2@x.com"),
    Contact(id="4", name="carol", phone_number="4", email="c@x.com"),
]


def _book(contacts=None) -> tuple[ContactBook, ContactService]:
    service = ContactService(InMemoryContactRepository(contacts or []))
    transport = httpx.ASGITransport(app=create_app(service))
    api = ContactsApi("http://testserver", transport=transport)
    return ContactBook(api), service


def _failing_book(handler) -> ContactBook:
    api = ContactsApi("http://testserver", transport=httpx.MockTransport(handler))
    return ContactBook(api)


def test_load_fetches_full_collection():
    book, _ = _book(SEED)
    asyncio.run(book.load())
    assert [c.id for c in book.contacts] == ["1", "2", "3", "4"]


def test_search_is_case_insensitive_and_keeps_order():
    book, _ = _book(SEED)
    asyncio.run(book.load())
    book.set_search("BO")
    assert [c.id for c in book.visible()] == ["1", "3"]
    book.set_search("")
    assert len(book.visible()) == 4
    book.set_search("zzz")
    assert book.visible() == []


def test_sort_toggles_and_is_stable():
    book, _ = _book(SEED)
    asyncio.run(book.load())
    assert book.sort_indicator == ""

    assert book.toggle_sort() == "asc"
    assert [c.id for c in book.visible()] == ["2", "1", "3", "4"]
    assert book.sort_indicator == "▲"

    assert book.toggle_sort() == "desc"
    assert [c.id for c in book.visible()] == ["4", "1", "3", "2"]
    assert book.sort_indicator == "▼"

    book.toggle_sort()
    book.toggle_sort()
    # Equal case-folded names ("bob", "Bob") keep their fetched order either way.
    assert [c.id for c in book.visible()] == ["4", "1", "3", "2"]


def test_sort_applies_to_filtered_view():
    book, _ = _book(SEED)
    asyncio.run(book.load())
    book.set_search("o")
    book.toggle_sort()
    book.toggle_sort()
    assert [c.name for c in book.visible()] == ["carol", "bob", "Bob"]


def test_add_assigns_id_locally_and_appends():
    book, service = _book()
    created = asyncio.run(book.add("Ada", "555", "a@x.com"))
    assert created is not None
    assert created.id
    assert [c.to_dict() for c in book.contacts] == [created.to_dict()]
    assert service.get_contact(created.id).name == "Ada"


def test_edit_loads_from_server_and_replaces_local_record():
    book, service = _book(SEED)
    asyncio.run(book.load())
    service.update_contact("2", {"email": "changed-on-server@x.com"})

    contact = asyncio.run(book.load_for_edit("2"))
    assert contact.email == "changed-on-server@x.com"

    updated = asyncio.run(book.update(contact.merged({"phoneNumber": "999"})))
    assert updated.phone_number == "999"
    local = [c for c in book.contacts if c.id == "2"][0]
    assert local.to_dict() == {
        "id": "2",
        "name": "Alice",
        "phoneNumber": "999",
        "email": "changed-on-server@x.com",
    }


def test_delete_removes_locally():
    book, service = _book(SEED)
    asyncio.run(book.load())
    assert asyncio.run(book.delete("3")) is True
    assert [c.id for c in book.contacts] == ["1", "2", "4"]
    assert [c.id for c in service.list_contacts()] == ["1", "2", "4"]


def test_delete_unknown_is_logged_and_state_unchanged(caplog):
    book, _ = _book(SEED)
    asyncio.run(book.load())
    with caplog.at_level(logging.WARNING, logger="client.state"):
        assert asyncio.run(book.delete("999")) is False
    assert len(book.contacts) == 4
    assert "999" in caplog.text


def test_edit_unknown_returns_none():
    book, _ = _book(SEED)
    assert asyncio.run(book.load_for_edit("999")) is None


def _connect_error(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


def _html_page(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, text="<html>proxy</html>")


def _empty_body(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, content=b"")


def _json_null(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, content=b"null")


def _json_numbers(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json=[1])


@pytest.mark.parametrize(
    "handler", [_connect_error, _html_page, _empty_body, _json_null, _json_numbers]
)
@pytest.mark.parametrize(
    "call",
    [
        lambda b: b.load(),
        lambda b: b.add("Ada", "555", "a@x.com"),
        lambda b: b.load_for_edit("1"),
        lambda b: b.update(Contact(id="1", name="X")),
        lambda b: b.delete("1"),
    ],
)
def test_failed_requests_are_logged_and_swallowed(handler, call, caplog):
    book = _failing_book(handler)
    book.contacts = [Contact(id="1", name="Keep")]
    with caplog.at_level(logging.WARNING, logger="client.state"):
        asyncio.run(call(book))
    assert [c.name for c in book.contacts] == ["Keep"]
    assert any(r.name == "client.state" for r in caplog.records)


def test_ids_are_quoted_in_paths():
    book, service = _book(
        [Contact(id="a?b", name="Query"), Contact(id="a/b", name="Slash"), Contact(id="a", name="Plain")]
    )
    assert asyncio.run(book.load_for_edit("a?b")).name == "Query"
    assert asyncio.run(book.load_for_edit("a/b")).name == "Slash"
    asyncio.run(book.load())
    assert asyncio.run(book.delete("a/b")) is True
    assert [c.id for c in service.list_contacts()] == ["a?b", "a"]


def test_contact_table_rendering():
    console = Console(file=io.StringIO(), width=120, color_system=None)
    print_contacts(console, SEED[:2], "▲")
    out = console.file.getvalue()
    assert "Name ▲" in out
    assert "Phone Number" in out
    assert out.index("bob") < out.index("Alice")
    assert "a@x.com" in out

    empty = Console(file=io.StringIO(), width=120, color_system=None)
    print_contacts(empty, [])
    assert "No contacts." in empty.file.getvalue()
