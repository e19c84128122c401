"""Liveness and readiness of the access entry API."""

import logging

import falcon.asgi

from accessadmin import __version__
from accessadmin.application.ports.repositories import AccessEntryRepository

logger = logging.getLogger(__name__)


class HealthResource:
    """GET /v1/health and /v1/health/ready."""

    def __init__(self, repository: AccessEntryRepository) -> None:
        self._repository = repository

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {"status": "ok", "service": "accessadmin", "version": __version__}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Ready once the entry repository answers a full listing."""
        try:
            entries = await self._repository.list()
        except Exception:
            logger.exception("Access entry repository not ready")
            resp.media = {"status": "unavailable"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready", "entries": len(entries)}
        resp.status = falcon.HTTP_200
