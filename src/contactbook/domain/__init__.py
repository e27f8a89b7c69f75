"""Domain layer: entities. No dependencies on outer layers."""

from contactbook.domain.entities import UNSET, Contact

__all__ = ["UNSET", "Contact"]
