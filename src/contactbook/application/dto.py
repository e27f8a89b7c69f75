"""Result objects returned by ContactService."""

from dataclasses import dataclass

NOT_FOUND_MESSAGE = "Contact not found"


@dataclass(frozen=True)
class ContactNotFound:
    contact_id: str
    message: str = NOT_FOUND_MESSAGE


@dataclass(frozen=True)
class WriteFailed:
    """The collection was changed in memory but the store rejected the rewrite."""

    operation: str  # "create", "update" or "delete"
    reason: str = ""

    @property
    def message(self) -> str:
        return f"Failed to {self.operation} contact"
