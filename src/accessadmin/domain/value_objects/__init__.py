"""Domain value objects."""

from accessadmin.domain.value_objects.draft_field import DraftField
from accessadmin.domain.value_objects.list_display_state import ListDisplayState
from accessadmin.domain.value_objects.operation_status import OperationStatus
from accessadmin.domain.value_objects.session_mode import SessionMode

__all__ = [
    "DraftField",
    "ListDisplayState",
    "OperationStatus",
    "SessionMode",
]
