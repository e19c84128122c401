"""Entry list presenter."""

from dataclasses import dataclass

from accessadmin.application.controller import AccessControlController, AccessControlState
from accessadmin.domain.entities import AccessEntry
from accessadmin.domain.value_objects import ListDisplayState
from accessadmin.interfaces.presenters.labels import Translate, catalogue_translator


@dataclass(frozen=True)
class EntryRow:
    entry: AccessEntry
    delete_pending: bool
    is_editing: bool
    is_selected_subject: bool


@dataclass(frozen=True)
class EntryListView:
    state: ListDisplayState
    rows: tuple[EntryRow, ...]
    message: str | None
    selected_subject: str | None
    title: str
    edit_label: str
    delete_label: str


def list_display_state(state: AccessControlState) -> ListDisplayState:
    """Loading takes priority over error, error over empty/populated."""
    query = state.query
    if query.is_loading:
        return ListDisplayState.LOADING
    if query.is_error:
        return ListDisplayState.ERROR
    if not query.entries:
        return ListDisplayState.EMPTY
    return ListDisplayState.POPULATED


def render_entry_list(state: AccessControlState, translate: Translate) -> EntryListView:
    display = list_display_state(state)
    message = {
        ListDisplayState.LOADING: translate("common.loading"),
        ListDisplayState.ERROR: translate("common.error"),
        ListDisplayState.EMPTY: translate("accesscontrol.list_404"),
    }.get(display)

    rows: tuple[EntryRow, ...] = ()
    if display == ListDisplayState.POPULATED:
        editing_id = state.session.editing_id
        rows = tuple(
            EntryRow(
                entry=entry,
                delete_pending=state.is_delete_pending(entry.id),
                is_editing=entry.id == editing_id,
                is_selected_subject=entry.identity == state.selected_subject,
            )
            for entry in state.query.entries
        )

    return EntryListView(
        state=display,
        rows=rows,
        message=message,
        selected_subject=state.selected_subject,
        title=translate("accesscontrol.list_title"),
        edit_label=translate("accesscontrol.edit"),
        delete_label=translate("accesscontrol.delete"),
    )


class EntryListPresenter:
    """Renders the filtered collection and forwards row intents to the controller."""

    def __init__(
        self,
        controller: AccessControlController,
        translate: Translate | None = None,
    ) -> None:
        self._controller = controller
        self._translate = translate or catalogue_translator()

    def render(self) -> EntryListView:
        return render_entry_list(self._controller.snapshot(), self._translate)

    def edit(self, entry_id: str) -> None:
        """Begin editing the row with `entry_id`."""
        self._controller.begin_edit(self._find(entry_id))

    async def delete(self, entry_id: str) -> bool:
        return await self._controller.delete(entry_id)

    async def filter_by(self, identity: str) -> None:
        """Use a row's identity as the active subject filter."""
        await self._controller.select_subject(identity)

    async def clear_filter(self) -> None:
        await self._controller.clear_subject()

    def _find(self, entry_id: str) -> AccessEntry:
        for entry in self._controller.snapshot().query.entries:
            if entry.id == entry_id:
                return entry
        raise KeyError(entry_id)
