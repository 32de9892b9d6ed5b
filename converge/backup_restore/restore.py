from typing import Any

from converge.errors import ConvergeError
from converge.logging import LoggerStream
from converge.poll import PollConfig, PollConverger
from converge.status import ResourceHandle, RestoreStatus

from .clients import SteveClient, object_field
from .constants import RESTORE_STEVE_TYPE
from .convergence_config import ConvergenceConfig


def build_restore(
    backup_filename: str,
    prune: bool = True,
    encryption_config_secret_name: str | None = None,
) -> dict[str, Any]:
    spec: dict[str, Any] = {
        "backupFilename": backup_filename,
        "prune": prune,
    }

    if encryption_config_secret_name:
        spec["encryptionConfigSecretName"] = encryption_config_secret_name

    return {
        "type": RESTORE_STEVE_TYPE,
        "metadata": {
            "generateName": "restore-",
        },
        "spec": spec,
    }


async def verify_restore_completed(
    client: SteveClient,
    handle: ResourceHandle,
    config: PollConfig | None = None,
    logger: LoggerStream | None = None,
) -> None:
    """
    Poll the restore until its Ready condition is True. Fetch errors are
    retried on the next tick by default, since the control plane is often
    unreachable while a restore rewrites it.

    Raises:
        OperationFailed: If the restore reports Ready=False
        ConvergenceTimeout: If the restore does not complete in time
        DecodeError: If the restore status cannot be decoded
    """
    if config is None:
        config = ConvergenceConfig().restore

    async def fetch():
        restore = await client.by_id(handle.kind, handle.id)
        return object_field(restore, "status")

    converger = PollConverger(config, logger=logger)
    result = await converger.run(
        fetch,
        resource=f"restore {handle.id}",
        status_type=RestoreStatus,
    )

    result.raise_for_outcome(
        timeout_message="timeout waiting for restore to complete"
    )


async def create_restore_and_verify_completed(
    client: SteveClient,
    backup_filename: str,
    prune: bool = True,
    encryption_config_secret_name: str | None = None,
    config: PollConfig | None = None,
    logger: LoggerStream | None = None,
) -> ResourceHandle:
    created = await client.create(
        RESTORE_STEVE_TYPE,
        build_restore(
            backup_filename,
            prune=prune,
            encryption_config_secret_name=encryption_config_secret_name,
        ),
    )

    restore_id = object_field(created, "id")
    if not restore_id:
        raise ConvergeError(f"restore of {backup_filename} was created without an id")

    handle = ResourceHandle(id=restore_id, kind=RESTORE_STEVE_TYPE)
    await verify_restore_completed(
        client,
        handle,
        config=config,
        logger=logger,
    )

    return handle
