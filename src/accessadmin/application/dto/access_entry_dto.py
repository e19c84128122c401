"""JSON wire format of access entries.

Wire names follow the admin API: `id`, `identity`, `permission`,
`resource`, `resourceType`.
"""

from typing import Any

from accessadmin.application.dto.access_entry_payload import AccessEntryPayload
from accessadmin.domain.entities import AccessEntry
from accessadmin.domain.exceptions import ValidationError

PAYLOAD_FIELDS = ("identity", "permission", "resource")


def entry_to_dict(entry: AccessEntry) -> dict[str, str]:
    return {
        "id": entry.id,
        "identity": entry.identity,
        "permission": entry.permission,
        "resource": entry.resource,
        "resourceType": entry.resource_type,
    }


def entry_from_dict(data: dict[str, Any]) -> AccessEntry:
    """Build an entry from API JSON. Raises KeyError on a missing required key."""
    return AccessEntry(
        id=str(data["id"]),
        identity=data["identity"],
        permission=data["permission"],
        resource=data["resource"],
        resource_type=data.get("resourceType") or "",
    )


def payload_from_dict(data: dict[str, Any]) -> AccessEntryPayload:
    """Build a payload from request JSON. Unknown keys, resourceType included, are ignored.

    Raises KeyError on a missing field and ValidationError on a non-string one.
    """
    values = {}
    for name in PAYLOAD_FIELDS:
        value = data[name]
        if not isinstance(value, str):
            raise ValidationError(name, "must be a string")
        values[name] = value
    return AccessEntryPayload(**values)
