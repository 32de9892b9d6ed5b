from .backup import (
    BackupOptions,
    build_backup,
    create_backup_and_verify_completed,
    verify_backup_completed,
)
from .clients import CatalogClient, ManagementClient, SteveClient
from .constants import (
    BACKUP_STEVE_TYPE,
    RANCHER_BACKUP_RESTORE_CRD_NAME,
    RANCHER_BACKUP_RESTORE_NAME,
    RANCHER_BACKUP_RESTORE_NAMESPACE,
    RESTORE_STEVE_TYPE,
)
from .convergence_config import ConvergenceConfig, create_convergence_config_from_env
from .install import wait_for_app_deployed
from .resources import CreatedResource, verify_rancher_resources
from .restore import (
    build_restore,
    create_restore_and_verify_completed,
    verify_restore_completed,
)

__all__ = [
    "BACKUP_STEVE_TYPE",
    "BackupOptions",
    "CatalogClient",
    "ConvergenceConfig",
    "CreatedResource",
    "ManagementClient",
    "RANCHER_BACKUP_RESTORE_CRD_NAME",
    "RANCHER_BACKUP_RESTORE_NAME",
    "RANCHER_BACKUP_RESTORE_NAMESPACE",
    "RESTORE_STEVE_TYPE",
    "SteveClient",
    "build_backup",
    "build_restore",
    "create_backup_and_verify_completed",
    "create_convergence_config_from_env",
    "create_restore_and_verify_completed",
    "verify_backup_completed",
    "verify_rancher_resources",
    "verify_restore_completed",
    "wait_for_app_deployed",
]
