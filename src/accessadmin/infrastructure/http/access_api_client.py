"""HTTP adapter for the access entry API."""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from accessadmin.application.dto.access_entry_dto import entry_from_dict
from accessadmin.application.dto.access_entry_payload import AccessEntryPayload
from accessadmin.domain.entities import AccessEntry
from accessadmin.domain.exceptions import ApiError, NotFound

logger = logging.getLogger(__name__)

ENTRIES_PATH = "/v1/access-entries"


class HttpAccessApi:
    """AccessApi over HTTP JSON.

    404 responses raise NotFound; any other failure (non-2xx status, transport
    error, malformed body) raises ApiError.
    """

    def __init__(
        self,
        base_url: str,
        token: str = "",
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._headers = {"Accept": "application/json"}
        if token:
            self._headers["Authorization"] = f"Bearer {token}"
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpAccessApi":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def list_entries(self, subject: str | None = None) -> list[AccessEntry]:
        params = {"identity": subject} if subject is not None else None
        body = await self._request("GET", ENTRIES_PATH, params=params)
        items = body.get("items", []) if isinstance(body, dict) else body
        return [self._entry(item) for item in items or []]

    async def create_entry(self, payload: AccessEntryPayload) -> AccessEntry:
        body = await self._request("POST", ENTRIES_PATH, json=payload.to_dict())
        return self._entry(body)

    async def update_entry(self, entry_id: str, payload: AccessEntryPayload) -> AccessEntry:
        body = await self._request(
            "PATCH", _entry_path(entry_id), json=payload.to_dict(), entry_id=entry_id
        )
        return self._entry(body)

    async def delete_entry(self, entry_id: str) -> None:
        await self._request("DELETE", _entry_path(entry_id), entry_id=entry_id)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        entry_id: str | None = None,
        **kwargs: Any,
    ) -> Any:
        try:
            response = await self._client.request(method, path, headers=self._headers, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise ApiError(f"{method} {path} failed: {e}") from e

        if response.status_code == 404 and entry_id is not None:
            raise NotFound("AccessEntry", entry_id)
        if response.is_error:
            raise ApiError(
                f"{method} {path} returned {response.status_code}: {_error_text(response)}",
                status_code=response.status_code,
            )
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"{method} {path} returned invalid JSON", response.status_code) from e

    @staticmethod
    def _entry(data: Any) -> AccessEntry:
        try:
            return entry_from_dict(data)
        except (KeyError, TypeError) as e:
            raise ApiError(f"Malformed access entry in response: {e}") from e


def _entry_path(entry_id: str) -> str:
    return f"{ENTRIES_PATH}/{quote(entry_id, safe='')}"


def _error_text(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(body, dict):
        return str(body.get("error") or body.get("title") or body)
    return str(body)
