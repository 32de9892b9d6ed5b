from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ResourceHandle:
    """
    Opaque reference to a remote resource created by a submit call.

    Attributes:
        id: Identifier the control plane assigned (e.g. "cattle-system/backup-1")
        kind: Resource type used to re-fetch status (e.g. "resources.cattle.io.backup")
    """

    id: str
    kind: str

    def __str__(self) -> str:
        return f"{self.kind} {self.id}"
