"""Pytest fixtures for accessadmin tests."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest

from accessadmin.application.controller import AccessControlController
from accessadmin.application.dto.access_entry_payload import AccessEntryPayload
from accessadmin.application.store.entry_store import EntryStoreClient
from accessadmin.domain.entities import AccessEntry
from accessadmin.domain.exceptions import ApiError, NotFound
from accessadmin.infrastructure.persistence.memory.access_entry_repository import (
    InMemoryAccessEntryRepository,
)
from accessadmin.interfaces.api.app import create_app


# --- Fake API ---


class FakeAccessApi:
    """In-memory AccessApi that records calls and can fail or block on demand."""

    def __init__(self, entries: list[AccessEntry] | None = None) -> None:
        self._entries: dict[str, AccessEntry] = {e.id: e for e in entries or []}
        self._next_id = 100
        self.calls: list[tuple] = []
        self.fail: set[str] = set()
        self.gates: dict[str, asyncio.Event] = {}

    def block(self, operation: str) -> asyncio.Event:
        """Hold `operation` until the returned event is set."""
        gate = asyncio.Event()
        self.gates[operation] = gate
        return gate

    async def _enter(self, operation: str) -> None:
        gate = self.gates.get(operation)
        if gate is not None:
            await gate.wait()
        if operation in self.fail:
            raise ApiError(f"{operation} failed", status_code=500)

    async def list_entries(self, subject: str | None = None) -> list[AccessEntry]:
        self.calls.append(("list", subject))
        await self._enter("list")
        return [e for e in self._entries.values() if subject is None or e.identity == subject]

    async def create_entry(self, payload: AccessEntryPayload) -> AccessEntry:
        self.calls.append(("create", payload))
        await self._enter("create")
        self._next_id += 1
        entry = AccessEntry(
            id=str(self._next_id),
            identity=payload.identity,
            permission=payload.permission,
            resource=payload.resource,
            resource_type="generic",
        )
        self._entries[entry.id] = entry
        return entry

    async def update_entry(self, entry_id: str, payload: AccessEntryPayload) -> AccessEntry:
        self.calls.append(("update", entry_id, payload))
        await self._enter("update")
        existing = self._entries.get(entry_id)
        if existing is None:
            raise NotFound("AccessEntry", entry_id)
        entry = AccessEntry(
            id=entry_id,
            identity=payload.identity,
            permission=payload.permission,
            resource=payload.resource,
            resource_type=existing.resource_type,
        )
        self._entries[entry_id] = entry
        return entry

    async def delete_entry(self, entry_id: str) -> None:
        self.calls.append(("delete", entry_id))
        await self._enter("delete")
        if entry_id not in self._entries:
            raise NotFound("AccessEntry", entry_id)
        del self._entries[entry_id]

    def seed(self, entry: AccessEntry) -> None:
        """Add an entry behind the client's back."""
        self._entries[entry.id] = entry

    def calls_of(self, operation: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == operation]


# --- Fixtures ---


@pytest.fixture
def alice_entry() -> AccessEntry:
    return AccessEntry(
        id="1",
        identity="alice",
        permission="read",
        resource="doc1",
        resource_type="file",
    )


@pytest.fixture
def bob_entry() -> AccessEntry:
    return AccessEntry(
        id="2",
        identity="bob",
        permission="write",
        resource="repo:core",
        resource_type="repo",
    )


@pytest.fixture
def fake_api(alice_entry, bob_entry) -> FakeAccessApi:
    """Fake API seeded with alice and bob entries."""
    return FakeAccessApi([alice_entry, bob_entry])


@pytest.fixture
def store(fake_api) -> EntryStoreClient:
    return EntryStoreClient(fake_api)


@pytest.fixture
def controller(store) -> AccessControlController:
    return AccessControlController(store)


@pytest.fixture
def mock_access_api():
    """AsyncMock for AccessApi - empty collection by default."""
    mock = AsyncMock()
    mock.list_entries.return_value = []
    return mock


@pytest.fixture
def repository(alice_entry) -> InMemoryAccessEntryRepository:
    return InMemoryAccessEntryRepository([alice_entry])


@pytest.fixture
def app(repository):
    """Falcon ASGI app backed by the in-memory repository."""
    return create_app(repository, cors_origins=["http://admin.local"])


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient

    return TestClient(app)


@pytest.fixture
def empty_api() -> FakeAccessApi:
    """Fake API with no entries."""
    return FakeAccessApi()
