"""Delete access entry use case."""

from accessadmin.application.ports.repositories import AccessEntryRepository
from accessadmin.domain.exceptions import NotFound


class DeleteAccessEntryUseCase:
    """Remove an access entry."""

    def __init__(self, repository: AccessEntryRepository) -> None:
        self._repository = repository

    async def execute(self, entry_id: str) -> None:
        entry = await self._repository.get_by_id(entry_id)
        if not entry:
            raise NotFound("AccessEntry", entry_id)
        await self._repository.delete(entry_id)
