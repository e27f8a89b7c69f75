"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from contactbook.application.contact_service import ContactService
from contactbook.application.dto import NOT_FOUND_MESSAGE, ContactNotFound, WriteFailed
from contactbook.application.ports import ContactRepository, StorageWriteError

__all__ = [
    "NOT_FOUND_MESSAGE",
    "ContactNotFound",
    "ContactRepository",
    "ContactService",
    "StorageWriteError",
    "WriteFailed",
]
