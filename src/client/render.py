"""Rich rendering of the contact table."""

from rich import box
from rich.console import Console
from rich.table import Table

from contactbook.domain import Contact


def build_table(contacts: list[Contact], sort_indicator: str = "") -> Table:
    """One row per contact; the sort arrow follows the Name header."""
    name_header = f"Name {sort_indicator}" if sort_indicator else "Name"
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column(name_header, style="bold cyan")
    table.add_column("Phone Number")
    table.add_column("Email", style="green")
    table.add_column("Id", style="dim")
    for contact in contacts:
        table.add_row(
            str(contact.name or ""),
            str(contact.phone_number or ""),
            str(contact.email or ""),
            str(contact.id or ""),
        )
    return table


def print_contacts(console: Console, contacts: list[Contact], sort_indicator: str = "") -> None:
    if not contacts:
        console.print("[dim]No contacts.[/]")
        return
    console.print(build_table(contacts, sort_indicator))
