from dataclasses import dataclass

from .resource_kind import ResourceKind


class ResourceNotFoundError(LookupError):
    def __init__(self, kind: ResourceKind, identifier: str) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind.value} {identifier} not found")


class ResourceLookupError(Exception):
    def __init__(
        self,
        kind: ResourceKind,
        identifier: str,
        cause: BaseException,
    ) -> None:
        self.kind = kind
        self.identifier = identifier
        self.cause = cause
        super().__init__(f"{kind.value} {identifier}: {cause}")


@dataclass(slots=True)
class CheckOutcome:
    kind: ResourceKind
    identifier: str
    error: Exception | None = None

    @property
    def passed(self) -> bool:
        return self.error is None
