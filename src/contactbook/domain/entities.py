"""Domain entities: Contact."""

from dataclasses import dataclass, field
from typing import Any

# Wire/storage key for each attribute. Storage keeps the camelCase shape clients send.
_WIRE_KEYS = {
    "id": "id",
    "name": "name",
    "phone_number": "phoneNumber",
    "email": "email",
}


class _Unset:
    """Marks a field that was never supplied. Falsy so display code can use `or ""`."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True)
class Contact:
    """
    A person in the contact list.
    Fields are free text and never validated; unknown fields ride along in extra.
    UNSET means the field was never supplied and is left out of the stored record.
    None is a supplied JSON null and is stored as such.
    """

    id: Any = UNSET
    name: Any = UNSET
    phone_number: Any = UNSET
    email: Any = UNSET
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contact":
        """Build a Contact from its wire shape ({id, name, phoneNumber, email, ...})."""
        known = {attr: data[key] for attr, key in _WIRE_KEYS.items() if key in data}
        extra = {k: v for k, v in data.items() if k not in _WIRE_KEYS.values()}
        return cls(**known, extra=extra)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for attr, key in _WIRE_KEYS.items():
            value = getattr(self, attr)
            if value is not UNSET:
                out[key] = value
        out.update(self.extra)
        return out

    def merged(self, patch: dict[str, Any]) -> "Contact":
        """Shallow-merge supplied fields over this record. The id is never reassigned."""
        fields = {**self.to_dict(), **patch, "id": self.id}
        return Contact.from_dict(fields)

    def matches_name(self, term: str) -> bool:
        """Case-insensitive substring match on name."""
        return (term or "").lower() in str(self.name or "").lower()
