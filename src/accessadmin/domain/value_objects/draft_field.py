"""Editable draft fields."""

from enum import StrEnum


class DraftField(StrEnum):
    """Fields of the access entry form."""

    IDENTITY = "identity"
    PERMISSION = "permission"
    RESOURCE = "resource"
    RESOURCE_TYPE = "resource_type"
