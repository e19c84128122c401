"""Access entry entity - identity granted a permission on a resource."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AccessEntry:
    """Server-owned access entry. `id` is assigned by the server and never changes."""

    id: str
    identity: str
    permission: str
    resource: str
    resource_type: str = ""
