"""Access entry repository port."""

from typing import Protocol

from accessadmin.domain.entities import AccessEntry


class AccessEntryRepository(Protocol):
    """Port for access entry persistence on the server side."""

    async def get_by_id(self, entry_id: str) -> AccessEntry | None: ...

    async def list(self, identity: str | None = None) -> list[AccessEntry]: ...

    async def create(self, entry: AccessEntry) -> AccessEntry: ...

    async def update(self, entry: AccessEntry) -> None: ...

    async def delete(self, entry_id: str) -> None: ...
