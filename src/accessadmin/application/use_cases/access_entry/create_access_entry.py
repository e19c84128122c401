"""Create access entry use case."""

from uuid import uuid4

from accessadmin.application.dto.access_entry_payload import AccessEntryPayload
from accessadmin.application.ports.repositories import AccessEntryRepository
from accessadmin.application.use_cases.access_entry.validation import (
    derive_resource_type,
    validate_payload,
)
from accessadmin.domain.entities import AccessEntry


class CreateAccessEntryUseCase:
    """Create a new access entry. Duplicates are separate entries."""

    def __init__(self, repository: AccessEntryRepository) -> None:
        self._repository = repository

    async def execute(self, payload: AccessEntryPayload) -> AccessEntry:
        validate_payload(payload)
        entry = AccessEntry(
            id=str(uuid4()),
            identity=payload.identity,
            permission=payload.permission,
            resource=payload.resource,
            resource_type=derive_resource_type(payload.resource),
        )
        return await self._repository.create(entry)
