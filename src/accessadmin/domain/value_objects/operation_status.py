"""Status of asynchronous queries and mutations."""

from enum import StrEnum


class OperationStatus(StrEnum):
    """Lifecycle of one query or mutation attempt."""

    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"
