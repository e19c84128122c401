"""Entry store client - cached reads and tracked mutations over the access API.

Reads are cached per subject filter. Every successful mutation invalidates
the whole cache and re-fetches the active query; there is no optimistic
patching of the list. Each mutation kind keeps its own status so callers can
tell a failed create from a failed update, and deletes are tracked per entry
id so only the row being deleted reports as pending.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from accessadmin.application.dto.access_entry_payload import AccessEntryPayload
from accessadmin.application.ports import AccessApi
from accessadmin.domain.entities import AccessEntry
from accessadmin.domain.exceptions import AccessAdminError, FetchFailed, MutationFailed
from accessadmin.domain.value_objects import OperationStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListQuery:
    """Snapshot of the active list query."""

    subject: str | None
    status: OperationStatus = OperationStatus.PENDING
    entries: tuple[AccessEntry, ...] = ()
    error: FetchFailed | None = None
    enabled: bool = True

    @property
    def is_loading(self) -> bool:
        return self.status == OperationStatus.PENDING

    @property
    def is_error(self) -> bool:
        return self.status == OperationStatus.ERROR

    @property
    def data(self) -> tuple[AccessEntry, ...] | None:
        return self.entries if self.status == OperationStatus.SUCCESS else None


@dataclass(frozen=True)
class MutationState:
    """Status of the latest attempt of one mutation kind."""

    status: OperationStatus = OperationStatus.IDLE
    error: Exception | None = None

    @property
    def is_pending(self) -> bool:
        return self.status == OperationStatus.PENDING

    @property
    def is_error(self) -> bool:
        return self.status == OperationStatus.ERROR

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS


_IDLE = MutationState()
_PENDING = MutationState(OperationStatus.PENDING)
_SUCCESS = MutationState(OperationStatus.SUCCESS)


def _interrupted(exc: BaseException) -> MutationState:
    """State left behind by an attempt that ended in an unexpected exception."""
    if isinstance(exc, Exception):
        return MutationState(OperationStatus.ERROR, exc)
    # Cancelled or interrupted.
    return _IDLE


class EntryStoreClient:
    """Client-side view of the server-backed access entry collection."""

    def __init__(
        self,
        api: AccessApi,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._api = api
        self.on_change = on_change
        self._cache: dict[str | None, tuple[AccessEntry, ...]] = {}
        self._query = ListQuery(subject=None)
        self._create = _IDLE
        self._update = _IDLE
        self._delete = _IDLE
        self._deleting: set[str] = set()

    @property
    def query(self) -> ListQuery:
        return self._query

    @property
    def create_state(self) -> MutationState:
        return self._create

    @property
    def update_state(self) -> MutationState:
        return self._update

    @property
    def delete_state(self) -> MutationState:
        return self._delete

    @property
    def deleting_ids(self) -> frozenset[str]:
        return frozenset(self._deleting)

    def is_delete_pending(self, entry_id: str) -> bool:
        return entry_id in self._deleting

    # --- Reads ---

    async def list(self, subject: str | None = None, *, enabled: bool = True) -> ListQuery:
        """Make `subject` the active query and resolve it.

        A cached list is shown at once and then re-fetched. A disabled query
        issues no request and stays pending until it is listed again with
        `enabled=True`.
        """
        if not enabled:
            self._set_query(ListQuery(subject=subject, enabled=False))
            return self._query

        if subject in self._cache:
            cached = ListQuery(
                subject=subject,
                status=OperationStatus.SUCCESS,
                entries=self._cache[subject],
            )
            if self._query != cached:
                self._set_query(cached)
            return await self._fetch(subject)

        # Same subject with data already shown keeps it while re-fetching.
        if self._query.subject != subject or self._query.status != OperationStatus.SUCCESS:
            loading = ListQuery(subject=subject)
            if self._query != loading:
                self._set_query(loading)
        return await self._fetch(subject)

    async def refetch(self) -> ListQuery:
        """Re-fetch the active query, bypassing the cache."""
        if not self._query.enabled:
            return self._query
        return await self._fetch(self._query.subject)

    async def invalidate(self) -> ListQuery:
        """Drop every cached list and re-fetch the active one."""
        self._cache.clear()
        return await self.refetch()

    async def _fetch(self, subject: str | None) -> ListQuery:
        try:
            entries = tuple(await self._api.list_entries(subject))
        except AccessAdminError as exc:
            error = FetchFailed(subject, exc)
            logger.warning("%s: %s", error, exc)
            if self._query.subject == subject:
                self._set_query(
                    ListQuery(subject=subject, status=OperationStatus.ERROR, error=error)
                )
            return self._query

        self._cache[subject] = entries
        # A response for a filter that is no longer active only fills the cache.
        if self._query.subject == subject:
            self._set_query(
                ListQuery(subject=subject, status=OperationStatus.SUCCESS, entries=entries)
            )
        logger.debug("Fetched %d access entries (subject=%r)", len(entries), subject)
        return self._query

    # --- Mutations ---

    async def create(self, payload: AccessEntryPayload) -> AccessEntry:
        """Create an entry. Raises MutationFailed after recording the error."""
        self._set_create(_PENDING)
        try:
            entry = await self._api.create_entry(payload)
        except AccessAdminError as exc:
            self._set_create(MutationState(OperationStatus.ERROR, exc))
            logger.warning("Create access entry for %r failed: %s", payload.identity, exc)
            raise MutationFailed("create", cause=exc) from exc
        except BaseException as exc:
            self._set_create(_interrupted(exc))
            raise

        self._set_create(_SUCCESS)
        logger.info("Created access entry %s for %r", entry.id, entry.identity)
        await self.invalidate()
        return entry

    async def update(self, entry_id: str, payload: AccessEntryPayload) -> AccessEntry:
        """Update an entry. A vanished id fails like any other update."""
        self._set_update(_PENDING)
        try:
            entry = await self._api.update_entry(entry_id, payload)
        except AccessAdminError as exc:
            self._set_update(MutationState(OperationStatus.ERROR, exc))
            logger.warning("Update of access entry %s failed: %s", entry_id, exc)
            raise MutationFailed("update", entry_id, exc) from exc
        except BaseException as exc:
            self._set_update(_interrupted(exc))
            raise

        self._set_update(_SUCCESS)
        logger.info("Updated access entry %s", entry_id)
        await self.invalidate()
        return entry

    async def delete(self, entry_id: str) -> None:
        """Delete an entry. Only `entry_id` reports pending while in flight."""
        self._deleting.add(entry_id)
        self._set_delete(_PENDING)
        try:
            await self._api.delete_entry(entry_id)
        except AccessAdminError as exc:
            self._deleting.discard(entry_id)
            self._set_delete(MutationState(OperationStatus.ERROR, exc))
            logger.warning("Delete of access entry %s failed: %s", entry_id, exc)
            raise MutationFailed("delete", entry_id, exc) from exc
        except BaseException as exc:
            self._deleting.discard(entry_id)
            self._set_delete(_interrupted(exc))
            raise

        self._deleting.discard(entry_id)
        self._set_delete(_SUCCESS)
        logger.info("Deleted access entry %s", entry_id)
        await self.invalidate()

    # --- State updates ---

    def _set_query(self, query: ListQuery) -> None:
        self._query = query
        self._changed()

    def _set_create(self, state: MutationState) -> None:
        self._create = state
        self._changed()

    def _set_update(self, state: MutationState) -> None:
        self._update = state
        self._changed()

    def _set_delete(self, state: MutationState) -> None:
        self._delete = state
        self._changed()

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()
