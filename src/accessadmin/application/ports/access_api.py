"""Access entry API port - the server-backed collection."""

from typing import Protocol

from accessadmin.application.dto.access_entry_payload import AccessEntryPayload
from accessadmin.domain.entities import AccessEntry


class AccessApi(Protocol):
    """Port for the remote access entry collection."""

    async def list_entries(self, subject: str | None = None) -> list[AccessEntry]: ...

    async def create_entry(self, payload: AccessEntryPayload) -> AccessEntry: ...

    async def update_entry(self, entry_id: str, payload: AccessEntryPayload) -> AccessEntry: ...

    async def delete_entry(self, entry_id: str) -> None: ...
