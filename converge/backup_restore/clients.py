"""
Opaque collaborators consumed by the backup/restore workflows.

Only the calls the convergence engine needs are described here. Any
client that provides them (a Steve/management API wrapper, a test fake)
can be passed in.
"""

from collections.abc import AsyncIterable, Mapping
from typing import Any, Protocol

SteveObject = Any


class SteveClient(Protocol):
    async def create(self, steve_type: str, obj: Mapping[str, Any]) -> SteveObject:
        ...

    async def by_id(self, steve_type: str, object_id: str) -> SteveObject:
        ...


class CatalogClient(Protocol):
    def watch_apps(
        self,
        namespace: str,
        field_selector: str,
        timeout_seconds: int,
    ) -> AsyncIterable[Any]:
        ...


class ManagementClient(Protocol):
    async def get_user_id_by_name(self, name: str) -> str:
        ...

    async def project_by_id(self, project_id: str) -> Any:
        ...

    async def role_template_by_id(self, role_template_id: str) -> Any:
        ...


def object_field(obj: SteveObject, name: str) -> Any:
    if isinstance(obj, Mapping):
        if name == "id" and "id" not in obj:
            return object_id_from_metadata(obj)

        return obj.get(name)

    return getattr(obj, name, None)


def object_id_from_metadata(obj: Mapping[str, Any]) -> str | None:
    metadata = obj.get("metadata") or {}
    name = metadata.get("name")
    if name is None:
        return None

    namespace = metadata.get("namespace")
    return f"{namespace}/{name}" if namespace else name
