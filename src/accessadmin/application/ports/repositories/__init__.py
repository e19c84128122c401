"""Repository ports."""

from accessadmin.application.ports.repositories.access_entry_repository import (
    AccessEntryRepository,
)

__all__ = [
    "AccessEntryRepository",
]
