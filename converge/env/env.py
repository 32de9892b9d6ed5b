from __future__ import annotations

from typing import Callable, Dict, Literal, Union

from pydantic import BaseModel, StrictStr

PrimaryType = Union[str, int, float, bytes, bool]


class Env(BaseModel):
    CONVERGE_POLL_INTERVAL: StrictStr = "2s"
    CONVERGE_BACKUP_TIMEOUT: StrictStr = "3m"
    CONVERGE_RESTORE_TIMEOUT: StrictStr = "20m"
    CONVERGE_INSTALL_TIMEOUT: StrictStr = "5m"
    CONVERGE_BACKUP_FETCH_ERROR_POLICY: Literal["fatal", "tolerate"] = "fatal"
    CONVERGE_RESTORE_FETCH_ERROR_POLICY: Literal["fatal", "tolerate"] = "tolerate"

    # Logging
    CONVERGE_LOG_LEVEL: Literal[
        "trace", "debug", "info", "warn", "error", "critical", "fatal"
    ] = "info"
    CONVERGE_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"
    CONVERGE_LOGS_DIRECTORY: StrictStr | None = None

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "CONVERGE_POLL_INTERVAL": str,
            "CONVERGE_BACKUP_TIMEOUT": str,
            "CONVERGE_RESTORE_TIMEOUT": str,
            "CONVERGE_INSTALL_TIMEOUT": str,
            "CONVERGE_BACKUP_FETCH_ERROR_POLICY": str,
            "CONVERGE_RESTORE_FETCH_ERROR_POLICY": str,
            "CONVERGE_LOG_LEVEL": str,
            "CONVERGE_LOG_OUTPUT": str,
            "CONVERGE_LOGS_DIRECTORY": str,
        }

