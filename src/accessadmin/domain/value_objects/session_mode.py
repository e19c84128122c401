"""Edit session modes."""

from enum import StrEnum


class SessionMode(StrEnum):
    """Whether the form creates a new entry or edits an existing one."""

    CREATING = "creating"
    EDITING = "editing"
