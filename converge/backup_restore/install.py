from converge.classify import app_state_decision
from converge.logging import LoggerStream
from converge.results import ConvergenceResult
from converge.status import App
from converge.watch import WatchConverger

from .clients import CatalogClient
from .constants import (
    METADATA_NAME_SELECTOR,
    RANCHER_BACKUP_RESTORE_NAME,
    RANCHER_BACKUP_RESTORE_NAMESPACE,
)


async def wait_for_app_deployed(
    catalog: CatalogClient,
    name: str = RANCHER_BACKUP_RESTORE_NAME,
    namespace: str = RANCHER_BACKUP_RESTORE_NAMESPACE,
    timeout: float = 300.0,
    logger: LoggerStream | None = None,
) -> ConvergenceResult:
    """
    Watch the App named ``name`` until it is deployed.

    Raises:
        OperationFailed: If the App reports the failed state
        ConvergenceTimeout: If the watch closes or the deadline passes first
        TypeMismatchError: If the stream yields something other than an App
    """
    events = catalog.watch_apps(
        namespace,
        field_selector=f"{METADATA_NAME_SELECTOR}{name}",
        timeout_seconds=int(timeout),
    )

    converger = WatchConverger(timeout=timeout, logger=logger)
    result = await converger.run(
        events,
        app_state_decision,
        App,
        resource=f"app {namespace}/{name}",
    )

    minutes = timeout / 60
    result.raise_for_outcome(
        timeout_message=(
            f"timeout: {name} chart was not installed within {minutes:g} minutes"
        )
    )

    return result
