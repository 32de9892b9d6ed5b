from enum import Enum

import msgspec


class AppState(Enum):
    DEPLOYED = "deployed"
    FAILED = "failed"
    PENDING_INSTALL = "pending-install"
    PENDING_UPGRADE = "pending-upgrade"
    PENDING_ROLLBACK = "pending-rollback"
    UNINSTALLING = "uninstalling"
    UNKNOWN = "unknown"


class AppSummary(msgspec.Struct, kw_only=True):
    state: str | None = None
    error: bool = False
    transitioning: bool = False


class AppStatus(msgspec.Struct, kw_only=True, rename="camel"):
    summary: AppSummary = msgspec.field(default_factory=AppSummary)
    observed_generation: int | None = None


class ObjectMeta(msgspec.Struct, kw_only=True):
    name: str
    namespace: str | None = None


class App(msgspec.Struct, kw_only=True):
    metadata: ObjectMeta
    status: AppStatus = msgspec.field(default_factory=AppStatus)
