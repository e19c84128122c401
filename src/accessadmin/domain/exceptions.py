"""Domain exceptions."""


class AccessAdminError(Exception):
    """Base exception for accessadmin."""

    pass


class NotFound(AccessAdminError):
    """Requested access entry was not found."""

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(f"{resource} not found: {identifier}")
        self.resource = resource
        self.identifier = identifier


class ValidationError(AccessAdminError):
    """Validation failed for input data."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Validation failed for {field}: {reason}")
        self.field = field
        self.reason = reason


class ApiError(AccessAdminError):
    """Access entry API request failed (transport or unexpected status)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FetchFailed(AccessAdminError):
    """Listing access entries failed."""

    def __init__(self, subject: str | None, cause: Exception | None = None) -> None:
        target = f"subject {subject!r}" if subject is not None else "all subjects"
        super().__init__(f"Failed to fetch access entries for {target}")
        self.subject = subject
        self.cause = cause


class MutationFailed(AccessAdminError):
    """Create, update or delete of an access entry failed."""

    def __init__(
        self,
        operation: str,
        entry_id: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        message = f"Access entry {operation} failed"
        if entry_id is not None:
            message += f": {entry_id}"
        if cause is not None:
            message += f" ({cause})"
        super().__init__(message)
        self.operation = operation
        self.entry_id = entry_id
        self.cause = cause
