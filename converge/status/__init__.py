from .app import App, AppState, AppStatus, AppSummary, ObjectMeta
from .condition import Condition, ConditionStatus
from .extractor import StatusDocument, extract_conditions, extract_status
from .resource_handle import ResourceHandle
from .resource_status import BackupStatus, ResourceStatus, RestoreStatus

__all__ = [
    "App",
    "AppState",
    "AppStatus",
    "AppSummary",
    "BackupStatus",
    "Condition",
    "ConditionStatus",
    "ObjectMeta",
    "ResourceHandle",
    "ResourceStatus",
    "RestoreStatus",
    "StatusDocument",
    "extract_conditions",
    "extract_status",
]
