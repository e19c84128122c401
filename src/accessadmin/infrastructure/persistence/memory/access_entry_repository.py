"""In-memory access entry repository."""

from accessadmin.domain.entities import AccessEntry


class InMemoryAccessEntryRepository:
    """Access entries kept in insertion order, for development and tests."""

    def __init__(self, entries: list[AccessEntry] | None = None) -> None:
        self._by_id: dict[str, AccessEntry] = {}
        for entry in entries or []:
            self._by_id[entry.id] = entry

    async def get_by_id(self, entry_id: str) -> AccessEntry | None:
        return self._by_id.get(entry_id)

    async def list(self, identity: str | None = None) -> list[AccessEntry]:
        if identity is None:
            return list(self._by_id.values())
        return [e for e in self._by_id.values() if e.identity == identity]

    async def create(self, entry: AccessEntry) -> AccessEntry:
        self._by_id[entry.id] = entry
        return entry

    async def update(self, entry: AccessEntry) -> None:
        self._by_id[entry.id] = entry

    async def delete(self, entry_id: str) -> None:
        self._by_id.pop(entry_id, None)
