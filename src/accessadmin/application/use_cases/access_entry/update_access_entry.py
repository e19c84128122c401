"""Update access entry use case."""

from dataclasses import replace

from accessadmin.application.dto.access_entry_payload import AccessEntryPayload
from accessadmin.application.ports.repositories import AccessEntryRepository
from accessadmin.application.use_cases.access_entry.validation import (
    derive_resource_type,
    validate_payload,
)
from accessadmin.domain.entities import AccessEntry
from accessadmin.domain.exceptions import NotFound


class UpdateAccessEntryUseCase:
    """Replace identity, permission and resource of an existing entry."""

    def __init__(self, repository: AccessEntryRepository) -> None:
        self._repository = repository

    async def execute(self, entry_id: str, payload: AccessEntryPayload) -> AccessEntry:
        """Update entry. Raises NotFound if the id no longer exists."""
        validate_payload(payload)
        existing = await self._repository.get_by_id(entry_id)
        if not existing:
            raise NotFound("AccessEntry", entry_id)

        updated = replace(
            existing,
            identity=payload.identity,
            permission=payload.permission,
            resource=payload.resource,
            resource_type=derive_resource_type(payload.resource),
        )
        await self._repository.update(updated)
        return updated
