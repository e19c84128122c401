"""Access entry payload DTO sent on create and update."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class AccessEntryPayload:
    """Writable fields of an access entry. `resource_type` is not part of it."""

    identity: str
    permission: str
    resource: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
