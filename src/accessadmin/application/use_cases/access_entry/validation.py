"""Server-side validation of access entry payloads."""

from accessadmin.application.dto.access_entry_payload import AccessEntryPayload
from accessadmin.domain.exceptions import ValidationError

DEFAULT_RESOURCE_TYPE = "generic"


def validate_payload(payload: AccessEntryPayload) -> None:
    """Reject blank identity, permission or resource."""
    for name in ("identity", "permission", "resource"):
        if not getattr(payload, name).strip():
            raise ValidationError(name, "must not be empty")


def derive_resource_type(resource: str) -> str:
    """Resource type is the `kind` of a `kind:name` resource, else generic."""
    kind, sep, name = resource.partition(":")
    if sep and kind.strip() and name:
        return kind.strip()
    return DEFAULT_RESOURCE_TYPE
