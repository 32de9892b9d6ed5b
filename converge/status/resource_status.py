import msgspec

from .condition import Condition


class ResourceStatus(msgspec.Struct, kw_only=True, rename="camel"):
    conditions: list[Condition] = msgspec.field(default_factory=list)


class BackupStatus(ResourceStatus, kw_only=True, rename="camel"):
    filename: str | None = None
    storage_location: str | None = None
    backup_type: str | None = None
    last_snapshot_ts: str | None = None
    next_snapshot_at: str | None = None
    observed_generation: int | None = None
    summary: str | None = None


class RestoreStatus(ResourceStatus, kw_only=True, rename="camel"):
    restore_completion_ts: str | None = None
    backup_source: str | None = None
    observed_generation: int | None = None
    summary: str | None = None
