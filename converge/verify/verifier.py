"""
Batch existence checks for resources created before an operation.

Every check runs independently and concurrently; a failing lookup never
stops the others. Failures are collected on the VerificationReport and
collapsed into one AggregateVerificationError on demand.
"""

import asyncio
from collections.abc import Iterable

from converge.logging import Entry, LoggerStream, VerifyError, VerifyInfo

from .check_outcome import CheckOutcome, ResourceLookupError, ResourceNotFoundError
from .resource_check import ResourceCheck
from .verification_report import VerificationReport


def _is_missing(value: object) -> bool:
    if value is None:
        return True

    return isinstance(value, (str, bytes)) and len(value) == 0


class ResourceVerifier:
    def __init__(self, logger: LoggerStream | None = None) -> None:
        self._logger = logger

    async def verify(self, checks: Iterable[ResourceCheck]) -> VerificationReport:
        checks = list(checks)

        for kind in dict.fromkeys(check.kind for check in checks):
            await self._log(
                VerifyInfo(
                    message=f"Verifying {kind.value} resources...",
                    kind=kind.value,
                    identifier="*",
                )
            )

        outcomes = await asyncio.gather(
            *[self._run_check(check) for check in checks]
        )

        return VerificationReport(outcomes=list(outcomes))

    async def _run_check(self, check: ResourceCheck) -> CheckOutcome:
        outcome = CheckOutcome(
            kind=check.kind,
            identifier=check.identifier,
        )

        try:
            found = await check.lookup(check.identifier)

        except Exception as err:
            lookup_error = ResourceLookupError(check.kind, check.identifier, err)
            lookup_error.__cause__ = err
            outcome.error = lookup_error

        else:
            if _is_missing(found):
                outcome.error = ResourceNotFoundError(check.kind, check.identifier)

        if outcome.error is not None:
            await self._log(
                VerifyError(
                    message=f"Verification failed for {check.label}",
                    kind=check.kind.value,
                    identifier=check.identifier,
                    error=str(outcome.error),
                )
            )

        return outcome

    async def _log(self, entry: Entry):
        if self._logger is None:
            return

        await self._logger.log(entry)


async def verify_all(
    checks: Iterable[ResourceCheck],
    logger: LoggerStream | None = None,
) -> VerificationReport:
    return await ResourceVerifier(logger=logger).verify(checks)
