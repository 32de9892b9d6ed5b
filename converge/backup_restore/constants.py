RANCHER_BACKUP_RESTORE_NAMESPACE = "cattle-resources-system"
RANCHER_BACKUP_RESTORE_NAME = "rancher-backup"
RANCHER_BACKUP_RESTORE_CRD_NAME = "rancher-backup-crd"

BACKUP_STEVE_TYPE = "resources.cattle.io.backup"
RESTORE_STEVE_TYPE = "resources.cattle.io.restore"

METADATA_NAME_SELECTOR = "metadata.name="
