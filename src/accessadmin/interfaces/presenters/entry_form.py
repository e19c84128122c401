"""Entry form presenter."""

from dataclasses import dataclass

from accessadmin.application.controller import AccessControlController, AccessControlState
from accessadmin.application.session.edit_session import Draft
from accessadmin.domain.entities import AccessEntry
from accessadmin.domain.value_objects import DraftField, SessionMode
from accessadmin.interfaces.presenters.labels import Translate, catalogue_translator


@dataclass(frozen=True)
class FormField:
    name: DraftField
    label: str
    value: str


@dataclass(frozen=True)
class EntryFormView:
    mode: SessionMode
    title: str
    submit_label: str
    cancel_label: str
    fields: tuple[FormField, ...]
    is_pending: bool
    create_error: bool
    update_error: bool
    error_message: str | None

    @property
    def has_error(self) -> bool:
        return self.create_error or self.update_error


def render_entry_form(state: AccessControlState, translate: Translate) -> EntryFormView:
    session = state.session
    draft: Draft = session.draft
    editing = session.mode == SessionMode.EDITING

    fields = tuple(
        FormField(
            name=name,
            label=translate(f"accesscontrol.{name.value}"),
            value=getattr(draft, name.value),
        )
        for name in DraftField
    )

    error_message = None
    if state.update.is_error:
        error_message = translate("accesscontrol.update_error")
    elif state.create.is_error:
        error_message = translate("accesscontrol.create_error")

    return EntryFormView(
        mode=session.mode,
        title=translate(
            "accesscontrol.form_title_edit" if editing else "accesscontrol.form_title_create"
        ),
        submit_label=translate(
            "accesscontrol.update_button" if editing else "accesscontrol.create_button"
        ),
        cancel_label=translate("common.cancel"),
        fields=fields,
        is_pending=state.submit_state.is_pending,
        create_error=state.create.is_error,
        update_error=state.update.is_error,
        error_message=error_message,
    )


class EntryFormPresenter:
    """Renders the draft and forwards form intents to the controller."""

    def __init__(
        self,
        controller: AccessControlController,
        translate: Translate | None = None,
    ) -> None:
        self._controller = controller
        self._translate = translate or catalogue_translator()

    def render(self) -> EntryFormView:
        return render_entry_form(self._controller.snapshot(), self._translate)

    def set_field(self, field: DraftField | str, value: str) -> None:
        self._controller.edit_field(field, value)

    async def submit(self) -> AccessEntry | None:
        return await self._controller.submit()

    def cancel(self) -> None:
        self._controller.cancel()
