"""Application entry points and composition roots."""

from falcon.asgi import App

from accessadmin.application.controller import AccessControlController
from accessadmin.application.session.selection_link import SelectionLink
from accessadmin.application.store.entry_store import EntryStoreClient
from accessadmin.config import Settings, get_settings
from accessadmin.infrastructure.http.access_api_client import HttpAccessApi
from accessadmin.infrastructure.persistence.memory.access_entry_repository import (
    InMemoryAccessEntryRepository,
)
from accessadmin.interfaces.api.app import create_app
from accessadmin.logging_config import configure_logging


def create_controller(
    settings: Settings | None = None,
    api: HttpAccessApi | None = None,
    subject: str | None = None,
) -> AccessControlController:
    """Composition root for the admin client: HTTP API -> store -> controller."""
    settings = settings or get_settings()
    api = api or HttpAccessApi(
        base_url=settings.api_base_url,
        token=settings.api_token,
        timeout=settings.request_timeout,
    )
    store = EntryStoreClient(api)
    return AccessControlController(store, SelectionLink(subject))


def create_accessadmin_app(
    settings: Settings | None = None,
    repository: InMemoryAccessEntryRepository | None = None,
) -> App:
    """Composition root for the reference access entry API."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    return create_app(
        repository or InMemoryAccessEntryRepository(),
        cors_origins=settings.cors_origin_list,
    )


def run_server(settings: Settings | None = None) -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = settings or get_settings()
    app = create_accessadmin_app(settings)
    uvicorn.run(
        app,
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )
