"""JSON-file implementation of ContactRepository.

The whole collection lives in memory and the file is overwritten with it after
every change. There is no journal: if the rewrite fails, memory keeps the change
and the file keeps the previous collection.
"""

import json
import logging
from pathlib import Path

from contactbook.application.ports import StorageWriteError
from contactbook.domain import Contact
from contactbook.infrastructure.memory_repository import InMemoryContactRepository

logger = logging.getLogger(__name__)


def load_contacts(path: Path) -> list[Contact]:
    """Read the contact array from path. A missing file is an empty collection."""
    if not path.exists():
        logger.info("Contacts file %s not found, starting with an empty list", path)
        return []
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"Contacts file {path} must contain a JSON array.")
    for n, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"Contacts file {path}: item {n} is not a JSON object.")
    return [Contact.from_dict(item) for item in data]


class JsonFileContactRepository(InMemoryContactRepository):
    """Contacts loaded from a JSON file once, then rewritten in full on each change."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(load_contacts(self.path))
        logger.info("Loaded %d contacts from %s", len(self._contacts), self.path)

    def _persist(self) -> None:
        payload = json.dumps(
            [c.to_dict() for c in self._contacts],
            ensure_ascii=False,
            separators=(",", ":"),
        )
        try:
            self.path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise StorageWriteError(f"Could not write {self.path}: {e}") from e
