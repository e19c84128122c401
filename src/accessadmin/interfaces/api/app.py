"""Falcon ASGI application for the access entry API."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

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
from accessadmin.interfaces.api.middleware.cors import CORSMiddleware
from accessadmin.interfaces.api.resources.access_entries import (
    AccessEntriesResource,
    AccessEntryResource,
)
from accessadmin.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log unhandled exceptions and answer 500."""
    logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    repository: AccessEntryRepository,
    cors_origins: list[str] | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    entries_resource = AccessEntriesResource(
        repository, CreateAccessEntryUseCase(repository)
    )
    entry_resource = AccessEntryResource(
        repository,
        UpdateAccessEntryUseCase(repository),
        DeleteAccessEntryUseCase(repository),
    )
    health_resource = HealthResource(repository)

    app = falcon.asgi.App(middleware=[CORSMiddleware(cors_origins or [])])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/access-entries", entries_resource)
    app.add_route("/v1/access-entries/{entry_id}", entry_resource)
    return app
