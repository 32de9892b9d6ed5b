from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from .resource_kind import ResourceKind

Lookup = Callable[[str], Awaitable[Any]]


@dataclass(slots=True, frozen=True)
class ResourceCheck:
    """
    A single existence check for a previously created resource.

    Attributes:
        kind: Kind of resource being checked
        identifier: Name or ID passed to lookup and used in failure messages
        lookup: Async callable resolving the identifier. Raising, or
            returning None or an empty value, counts as a failure.
    """

    kind: ResourceKind
    identifier: str
    lookup: Lookup

    @property
    def label(self) -> str:
        return f"{self.kind.value} {self.identifier}"
