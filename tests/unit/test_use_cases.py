"""Unit tests for the server-side access entry use cases."""

import pytest

from accessadmin.application.dto.access_entry_payload import AccessEntryPayload
from accessadmin.application.use_cases.access_entry.create_access_entry import (
    CreateAccessEntryUseCase,
)
from accessadmin.application.use_cases.access_entry.delete_access_entry import (
    DeleteAccessEntryUseCase,
)
from accessadmin.application.use_cases.access_entry.update_access_entry import (
    UpdateAccessEntryUseCase,
)
from accessadmin.application.use_cases.access_entry.validation import derive_resource_type
from accessadmin.domain.exceptions import NotFound, ValidationError


@pytest.mark.asyncio
async def test_create_assigns_id_and_resource_type(repository) -> None:
    use_case = CreateAccessEntryUseCase(repository)

    entry = await use_case.execute(
        AccessEntryPayload(identity="bob", permission="read", resource="bucket:logs")
    )

    assert entry.id
    assert entry.resource_type == "bucket"
    assert await repository.get_by_id(entry.id) == entry


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["identity", "permission", "resource"])
async def test_create_rejects_blank_field(repository, field) -> None:
    values = {"identity": "bob", "permission": "read", "resource": "doc"}
    values[field] = "  "

    with pytest.raises(ValidationError) as exc_info:
        await CreateAccessEntryUseCase(repository).execute(AccessEntryPayload(**values))

    assert exc_info.value.field == field
    assert len(await repository.list()) == 1


@pytest.mark.asyncio
async def test_update_replaces_fields(repository) -> None:
    use_case = UpdateAccessEntryUseCase(repository)

    entry = await use_case.execute(
        "1", AccessEntryPayload(identity="alice", permission="admin", resource="doc1")
    )

    assert entry.id == "1"
    assert entry.permission == "admin"
    assert (await repository.get_by_id("1")).permission == "admin"


@pytest.mark.asyncio
async def test_update_missing_raises_not_found(repository) -> None:
    with pytest.raises(NotFound, match="AccessEntry"):
        await UpdateAccessEntryUseCase(repository).execute(
            "404", AccessEntryPayload(identity="a", permission="b", resource="c")
        )


@pytest.mark.asyncio
async def test_delete_removes_entry(repository) -> None:
    await DeleteAccessEntryUseCase(repository).execute("1")

    assert await repository.list() == []
    with pytest.raises(NotFound):
        await DeleteAccessEntryUseCase(repository).execute("1")


@pytest.mark.asyncio
async def test_repository_filters_by_identity(repository) -> None:
    assert [e.id for e in await repository.list("alice")] == ["1"]
    assert await repository.list("bob") == []


def test_derive_resource_type() -> None:
    assert derive_resource_type("file:report.pdf") == "file"
    assert derive_resource_type("doc1") == "generic"
    assert derive_resource_type(":nameless") == "generic"
    assert derive_resource_type("kind:") == "generic"
