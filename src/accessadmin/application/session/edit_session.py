"""Edit session - draft fields and the entry being edited.

The session is an immutable value. Every change goes through `reduce`,
which maps (session, intent) to a new session:

- `BeginEdit(entry)` copies the entry into the draft and enters editing mode,
  whatever the previous state was.
- `EditField(field, value)` changes one draft field, never the mode.
- `Reset()` returns to creating mode with an empty draft. Idempotent.

Submitting is asynchronous and lives in the controller; it only ever
dispatches `Reset` on success.
"""

from dataclasses import dataclass, field, replace

from accessadmin.application.dto.access_entry_payload import AccessEntryPayload
from accessadmin.domain.entities import AccessEntry
from accessadmin.domain.value_objects import DraftField, SessionMode


@dataclass(frozen=True)
class Draft:
    """In-progress form values, independent from any stored entry."""

    identity: str = ""
    permission: str = ""
    resource: str = ""
    resource_type: str = ""

    def to_payload(self) -> AccessEntryPayload:
        """Payload for create/update. `resource_type` stays local."""
        return AccessEntryPayload(
            identity=self.identity,
            permission=self.permission,
            resource=self.resource,
        )

    def is_empty(self) -> bool:
        return self == Draft()


@dataclass(frozen=True)
class EditSession:
    """Currently edited entry (None means create mode) and its draft."""

    editing_entry: AccessEntry | None = None
    draft: Draft = field(default_factory=Draft)

    @property
    def mode(self) -> SessionMode:
        return SessionMode.CREATING if self.editing_entry is None else SessionMode.EDITING

    @property
    def editing_id(self) -> str | None:
        return self.editing_entry.id if self.editing_entry is not None else None


@dataclass(frozen=True)
class BeginEdit:
    entry: AccessEntry


@dataclass(frozen=True)
class EditField:
    field: DraftField
    value: str


@dataclass(frozen=True)
class Reset:
    pass


Intent = BeginEdit | EditField | Reset


def draft_from(entry: AccessEntry) -> Draft:
    """Draft holding exactly the entry's four editable fields."""
    return Draft(
        identity=entry.identity,
        permission=entry.permission,
        resource=entry.resource,
        resource_type=entry.resource_type,
    )


def reduce(session: EditSession, intent: Intent) -> EditSession:
    """Apply one intent to the session."""
    if isinstance(intent, BeginEdit):
        return EditSession(editing_entry=intent.entry, draft=draft_from(intent.entry))
    if isinstance(intent, EditField):
        draft = replace(session.draft, **{DraftField(intent.field).value: intent.value})
        return replace(session, draft=draft)
    if isinstance(intent, Reset):
        return EditSession()
    raise TypeError(f"Unknown edit session intent: {intent!r}")
