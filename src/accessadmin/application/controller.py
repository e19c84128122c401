"""Access control controller - composition root of the admin workflow.

Owns the edit session and the selected subject, delegates reads and writes
to the entry store client, and hands presenters an immutable
`AccessControlState` snapshot. Presenters never mutate state; they call the
intent methods below.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from accessadmin.application.session.edit_session import (
    BeginEdit,
    EditField,
    EditSession,
    Intent,
    Reset,
    reduce,
)
from accessadmin.application.session.selection_link import SelectionLink
from accessadmin.application.store.entry_store import EntryStoreClient, ListQuery, MutationState
from accessadmin.domain.entities import AccessEntry
from accessadmin.domain.exceptions import MutationFailed
from accessadmin.domain.value_objects import DraftField

logger = logging.getLogger(__name__)

StateListener = Callable[["AccessControlState"], None]


@dataclass(frozen=True)
class AccessControlState:
    """Everything the list and form presenters render from."""

    query: ListQuery
    session: EditSession
    selected_subject: str | None
    create: MutationState
    update: MutationState
    delete: MutationState
    deleting_ids: frozenset[str]

    def is_delete_pending(self, entry_id: str) -> bool:
        return entry_id in self.deleting_ids

    @property
    def submit_state(self) -> MutationState:
        """Mutation the form submit currently maps to."""
        return self.create if self.session.editing_entry is None else self.update


class AccessControlController:
    """Coordinates edit session, selection and entry store."""

    def __init__(
        self,
        store: EntryStoreClient,
        selection: SelectionLink | None = None,
        list_enabled: bool = True,
    ) -> None:
        self._store = store
        self._selection = selection or SelectionLink()
        self._list_enabled = list_enabled
        self._session = EditSession()
        self._listeners: list[StateListener] = []
        self._selection.subscribe(lambda _subject: self._notify())
        self._store.on_change = self._notify

    @property
    def store(self) -> EntryStoreClient:
        return self._store

    @property
    def selection(self) -> SelectionLink:
        return self._selection

    @property
    def session(self) -> EditSession:
        return self._session

    def snapshot(self) -> AccessControlState:
        """Current immutable state."""
        return AccessControlState(
            query=self._store.query,
            session=self._session,
            selected_subject=self._selection.selected_subject,
            create=self._store.create_state,
            update=self._store.update_state,
            delete=self._store.delete_state,
            deleting_ids=self._store.deleting_ids,
        )

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call `listener` with a fresh snapshot after every change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Reads / selection ---

    async def refresh(self) -> ListQuery:
        """Issue the list query for the selected subject."""
        return await self._store.list(
            self._selection.selected_subject, enabled=self._list_enabled
        )

    async def select_subject(self, subject: str | None) -> ListQuery:
        """Change the subject filter and re-issue the list query."""
        if self._selection.select(subject):
            return await self.refresh()
        return self._store.query

    async def clear_subject(self) -> ListQuery:
        return await self.select_subject(None)

    # --- Edit session ---

    def dispatch(self, intent: Intent) -> EditSession:
        self._session = reduce(self._session, intent)
        self._notify()
        return self._session

    def begin_edit(self, entry: AccessEntry) -> EditSession:
        return self.dispatch(BeginEdit(entry))

    def edit_field(self, field: DraftField | str, value: str) -> EditSession:
        return self.dispatch(EditField(DraftField(field), value))

    def reset(self) -> EditSession:
        return self.dispatch(Reset())

    cancel = reset

    # --- Mutations ---

    async def submit(self) -> AccessEntry | None:
        """Create or update from the draft.

        On success the session is reset. On failure the session and draft are
        left as they were and the store's create/update error flag is set.
        """
        editing = self._session.editing_entry
        payload = self._session.draft.to_payload()
        try:
            if editing is None:
                entry = await self._store.create(payload)
            else:
                entry = await self._store.update(editing.id, payload)
        except MutationFailed as exc:
            logger.warning("Submit failed, draft kept: %s", exc)
            self._notify()
            return None

        self.reset()
        return entry

    async def delete(self, entry_id: str) -> bool:
        """Delete an entry. No confirmation step."""
        try:
            await self._store.delete(entry_id)
        except MutationFailed as exc:
            logger.warning("Delete failed: %s", exc)
            self._notify()
            return False
        return True

    def _notify(self) -> None:
        if not self._listeners:
            return
        state = self.snapshot()
        for listener in list(self._listeners):
            listener(state)
