"""Access entries API resources."""

import logging

import falcon.asgi

from accessadmin.application.dto.access_entry_dto import entry_to_dict, payload_from_dict
from accessadmin.application.ports.repositories import AccessEntryRepository
from accessadmin.application.use_cases.access_entry.create_access_entry import (
    CreateAccessEntryUseCase,
)
from accessadmin.application.use_cases.access_entry.delete_access_entry import (
    DeleteAccessEntryUseCase,
)
from accessadmin.application.use_cases.access_entry.update_access_entry import (
    UpdateAccessEntryUseCase,
)
from accessadmin.domain.exceptions import NotFound, ValidationError

logger = logging.getLogger(__name__)


async def _read_payload(req: falcon.asgi.Request, resp: falcon.asgi.Response):
    """Parse request body into a payload, or fill resp with a 400 and return None."""
    try:
        body = await req.get_media()
    except falcon.HTTPBadRequest:
        resp.status = falcon.HTTP_400
        resp.media = {"error": "Invalid JSON body"}
        return None
    if not isinstance(body, dict):
        resp.status = falcon.HTTP_400
        resp.media = {"error": "Expected JSON object"}
        return None
    try:
        return payload_from_dict(body)
    except KeyError as e:
        resp.status = falcon.HTTP_400
        resp.media = {"error": f"Missing required field: {e}"}
        return None
    except ValidationError as e:
        resp.status = falcon.HTTP_400
        resp.media = {"error": str(e), "field": e.field}
        return None


class AccessEntriesResource:
    """GET/POST /v1/access-entries - list (optionally by identity) and create."""

    def __init__(
        self,
        repository: AccessEntryRepository,
        create_entry: CreateAccessEntryUseCase,
    ) -> None:
        self._repository = repository
        self._create = create_entry

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List entries, filtered by ?identity= when given."""
        identity = req.get_param("identity")
        entries = await self._repository.list(identity)
        resp.media = {"items": [entry_to_dict(e) for e in entries]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create entry from identity, permission and resource."""
        payload = await _read_payload(req, resp)
        if payload is None:
            return

        try:
            entry = await self._create.execute(payload)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e), "field": e.field}
            return

        logger.info("Access entry %s created for %r", entry.id, entry.identity)
        resp.media = entry_to_dict(entry)
        resp.status = falcon.HTTP_201


class AccessEntryResource:
    """GET/PATCH/DELETE /v1/access-entries/{entry_id}."""

    def __init__(
        self,
        repository: AccessEntryRepository,
        update_entry: UpdateAccessEntryUseCase,
        delete_entry: DeleteAccessEntryUseCase,
    ) -> None:
        self._repository = repository
        self._update = update_entry
        self._delete = delete_entry

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        entry_id: str,
    ) -> None:
        entry = await self._repository.get_by_id(entry_id)
        if not entry:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Access entry not found"}
            return
        resp.media = entry_to_dict(entry)
        resp.status = falcon.HTTP_200

    async def on_patch(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        entry_id: str,
    ) -> None:
        """Update identity, permission and resource of an entry."""
        payload = await _read_payload(req, resp)
        if payload is None:
            return

        try:
            entry = await self._update.execute(entry_id, payload)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e), "field": e.field}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        logger.info("Access entry %s updated", entry_id)
        resp.media = entry_to_dict(entry)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        entry_id: str,
    ) -> None:
        try:
            await self._delete.execute(entry_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Access entry not found"}
            return

        logger.info("Access entry %s deleted", entry_id)
        resp.status = falcon.HTTP_204
