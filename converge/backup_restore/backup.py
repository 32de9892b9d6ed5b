from dataclasses import dataclass
from typing import Any

from converge.errors import ConvergeError
from converge.logging import LoggerStream
from converge.poll import PollConfig, PollConverger
from converge.status import BackupStatus, ResourceHandle

from .clients import SteveClient, object_field
from .constants import BACKUP_STEVE_TYPE
from .convergence_config import ConvergenceConfig


@dataclass(slots=True)
class BackupOptions:
    name: str
    resource_set_name: str
    retention_count: int = 0
    encryption_config_secret_name: str | None = None


def build_backup(options: BackupOptions) -> dict[str, Any]:
    spec: dict[str, Any] = {
        "resourceSetName": options.resource_set_name,
        "retentionCount": options.retention_count,
    }

    if options.encryption_config_secret_name:
        spec["encryptionConfigSecretName"] = options.encryption_config_secret_name

    return {
        "type": BACKUP_STEVE_TYPE,
        "metadata": {
            "name": options.name,
        },
        "spec": spec,
    }


async def verify_backup_completed(
    client: SteveClient,
    handle: ResourceHandle,
    config: PollConfig | None = None,
    logger: LoggerStream | None = None,
) -> str | None:
    """
    Poll the backup until its Ready condition is True and return the
    produced backup filename.

    Raises:
        FetchError: On the first failing fetch (default policy)
        OperationFailed: If the backup reports Ready=False
        ConvergenceTimeout: If the backup does not complete in time
    """
    if config is None:
        config = ConvergenceConfig().backup

    async def fetch():
        backup = await client.by_id(handle.kind, handle.id)
        return object_field(backup, "status")

    converger = PollConverger(config, logger=logger)
    result = await converger.run(
        fetch,
        resource=f"backup {handle.id}",
        status_type=BackupStatus,
        success_field="filename",
    )

    return result.raise_for_outcome(
        timeout_message="timeout waiting for backup to complete"
    )


async def create_backup_and_verify_completed(
    client: SteveClient,
    options: BackupOptions,
    config: PollConfig | None = None,
    logger: LoggerStream | None = None,
) -> tuple[ResourceHandle, str | None]:
    created = await client.create(BACKUP_STEVE_TYPE, build_backup(options))

    backup_id = object_field(created, "id")
    if not backup_id:
        raise ConvergeError(f"backup {options.name} was created without an id")

    handle = ResourceHandle(id=backup_id, kind=BACKUP_STEVE_TYPE)
    filename = await verify_backup_completed(
        client,
        handle,
        config=config,
        logger=logger,
    )

    return handle, filename
