"""Display states of the access entry list."""

from enum import StrEnum


class ListDisplayState(StrEnum):
    """Mutually exclusive list states. Loading wins over error, error over the rest."""

    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    POPULATED = "populated"
