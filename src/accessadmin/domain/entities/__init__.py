"""Domain entities."""

from accessadmin.domain.entities.access_entry import AccessEntry

__all__ = [
    "AccessEntry",
]
