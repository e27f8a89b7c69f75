"""
Terminal client for the contacts API.
Run: python -m client (from repo root, with CONTACTS_API_URL in .env or env vars).
"""

import asyncio
import logging

from contactbook.config import Settings, load_env

load_env()

from rich.console import Console
from rich.prompt import Prompt

from client.contacts_api import ContactsApi
from client.render import print_contacts
from client.state import ContactBook

console = Console()

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.WARNING,
)
logger = logging.getLogger(__name__)

HELP = (
    "Commands: list | search <text> | sort | add | edit <id> | delete <id> | "
    "refresh | help | quit"
)


async def _ask(prompt: str, default: str | None = None) -> str:
    if default:
        answer = await asyncio.to_thread(Prompt.ask, prompt, default=default)
    else:
        answer = await asyncio.to_thread(Prompt.ask, prompt)
    return (answer or "").strip()


async def _ask_field(label: str, current: str = "") -> str:
    """Prompt for a form field; empty input keeps the current value."""
    value = await _ask(f"  {label}", current or None)
    return value or current


def show(book: ContactBook) -> None:
    print_contacts(console, book.visible(), book.sort_indicator)


async def handle_command(book: ContactBook, line: str) -> bool:
    """Run one command line. Returns False when the user asked to quit."""
    command, _, arg = line.strip().partition(" ")
    command = command.lower()
    arg = arg.strip()
    if command in ("quit", "exit", "q"):
        return False
    if command in ("", "list"):
        show(book)
    elif command == "search":
        book.set_search(arg)
        show(book)
    elif command == "sort":
        book.toggle_sort()
        show(book)
    elif command == "refresh":
        await book.load()
        show(book)
    elif command == "add":
        name = await _ask_field("Name")
        phone = await _ask_field("Phone Number")
        email = await _ask_field("Email")
        await book.add(name, phone, email)
        show(book)
    elif command == "edit" and arg:
        contact = await book.load_for_edit(arg)
        if contact is not None:
            patch = {
                "name": await _ask_field("Name", str(contact.name or "")),
                "phoneNumber": await _ask_field("Phone Number", str(contact.phone_number or "")),
                "email": await _ask_field("Email", str(contact.email or "")),
            }
            await book.update(contact.merged(patch))
        show(book)
    elif command == "delete" and arg:
        await book.delete(arg)
        show(book)
    else:
        console.print(HELP, markup=False)
    return True


async def run(settings: Settings) -> None:
    async with ContactsApi(settings.api_url, timeout=settings.api_timeout) as api:
        book = ContactBook(api)
        await book.load()
        console.print("[bold cyan]Contact Management App[/]")
        console.print(HELP, markup=False)
        show(book)
        while True:
            try:
                line = await _ask("[bold]>[/]")
            except EOFError:
                break
            if not await handle_command(book, line):
                break


def main() -> None:
    settings = Settings.from_env()
    logging.getLogger().setLevel(getattr(logging, settings.log_level, logging.WARNING))
    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
