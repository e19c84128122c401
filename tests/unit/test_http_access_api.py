"""Tests for HttpAccessApi against the falcon app and mocked transports."""

import json

import httpx
import pytest

from accessadmin.application.controller import AccessControlController
from accessadmin.application.dto.access_entry_payload import AccessEntryPayload
from accessadmin.application.store.entry_store import EntryStoreClient
from accessadmin.domain.exceptions import ApiError, NotFound
from accessadmin.infrastructure.http.access_api_client import HttpAccessApi

PAYLOAD = AccessEntryPayload(identity="carol", permission="read", resource="file:doc3")


@pytest.fixture
def asgi_api(app) -> HttpAccessApi:
    """HttpAccessApi talking to the in-process falcon app."""
    client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")
    return HttpAccessApi(base_url="http://test", client=client)


def _mock_api(handler) -> HttpAccessApi:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test")
    return HttpAccessApi(base_url="http://test", token="secret", client=client)


# --- Against the reference server ---


@pytest.mark.asyncio
async def test_list_entries(asgi_api, alice_entry) -> None:
    assert await asgi_api.list_entries() == [alice_entry]
    assert await asgi_api.list_entries("alice") == [alice_entry]
    assert await asgi_api.list_entries("bob") == []


@pytest.mark.asyncio
async def test_create_update_delete(asgi_api) -> None:
    created = await asgi_api.create_entry(PAYLOAD)
    assert created.identity == "carol"
    assert created.resource_type == "file"

    updated = await asgi_api.update_entry(
        created.id, AccessEntryPayload(identity="carol", permission="write", resource="doc3")
    )
    assert updated.id == created.id
    assert updated.permission == "write"
    assert updated.resource_type == "generic"

    await asgi_api.delete_entry(created.id)
    assert [e.id for e in await asgi_api.list_entries()] == ["1"]


@pytest.mark.asyncio
async def test_update_and_delete_missing_raise_not_found(asgi_api) -> None:
    with pytest.raises(NotFound):
        await asgi_api.update_entry("missing", PAYLOAD)
    with pytest.raises(NotFound):
        await asgi_api.delete_entry("missing")


@pytest.mark.asyncio
async def test_blank_fields_rejected_by_server(asgi_api) -> None:
    with pytest.raises(ApiError) as exc_info:
        await asgi_api.create_entry(AccessEntryPayload(identity="", permission="", resource=""))

    assert exc_info.value.status_code == 400
    assert "identity" in str(exc_info.value)


@pytest.mark.asyncio
async def test_controller_end_to_end(asgi_api, alice_entry) -> None:
    controller = AccessControlController(EntryStoreClient(asgi_api))
    await controller.refresh()

    controller.begin_edit(alice_entry)
    controller.edit_field("permission", "admin")
    await controller.submit()

    entries = controller.snapshot().query.entries
    assert [(e.id, e.permission) for e in entries] == [("1", "admin")]
    assert controller.session.editing_entry is None


# --- Mocked transport ---


@pytest.mark.asyncio
async def test_sends_payload_without_resource_type_and_bearer_token() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        body = json.loads(request.content)
        return httpx.Response(201, json={"id": "7", **body, "resourceType": "file"})

    api = _mock_api(handler)
    entry = await api.create_entry(PAYLOAD)

    assert entry.id == "7"
    assert json.loads(seen[0].content) == {
        "identity": "carol",
        "permission": "read",
        "resource": "file:doc3",
    }
    assert seen[0].headers["Authorization"] == "Bearer secret"
    assert seen[0].url.path == "/v1/access-entries"


@pytest.mark.asyncio
async def test_list_sends_identity_param() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"items": []})

    api = _mock_api(handler)
    await api.list_entries("alice")
    await api.list_entries()

    assert seen[0].url.params["identity"] == "alice"
    assert "identity" not in seen[1].url.params


@pytest.mark.asyncio
async def test_server_error_raises_api_error() -> None:
    api = _mock_api(lambda request: httpx.Response(500, json={"title": "boom"}))

    with pytest.raises(ApiError) as exc_info:
        await api.list_entries()

    assert exc_info.value.status_code == 500
    assert "boom" in str(exc_info.value)


@pytest.mark.asyncio
async def test_transport_error_raises_api_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    api = _mock_api(handler)

    with pytest.raises(ApiError):
        await api.delete_entry("1")


@pytest.mark.asyncio
async def test_malformed_entry_raises_api_error() -> None:
    api = _mock_api(lambda request: httpx.Response(200, json={"items": [{"id": "1"}]}))

    with pytest.raises(ApiError, match="Malformed"):
        await api.list_entries()


@pytest.mark.asyncio
async def test_fetch_error_surfaces_on_store_query() -> None:
    api = _mock_api(lambda request: httpx.Response(503, text="unavailable"))
    store = EntryStoreClient(api)

    query = await store.list("alice")

    assert query.is_error
    assert query.error is not None and query.error.subject == "alice"


@pytest.mark.asyncio
async def test_context_manager_closes_owned_client() -> None:
    api = HttpAccessApi(base_url="http://localhost:1/")
    async with api:
        pass
    assert api._client.is_closed


@pytest.mark.asyncio
async def test_entry_ids_are_escaped_in_paths() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(204)

    api = _mock_api(handler)
    await api.delete_entry("a/b?c")

    assert seen[0].url.raw_path == b"/v1/access-entries/a%2Fb%3Fc"
    assert seen[0].method == "DELETE"


@pytest.mark.asyncio
async def test_injected_client_headers_are_left_alone() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"items": []})

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test")
    api = HttpAccessApi(base_url="http://test", token="secret", client=client)

    await api.list_entries()

    assert "Authorization" not in client.headers
    assert seen[0].headers["Authorization"] == "Bearer secret"
