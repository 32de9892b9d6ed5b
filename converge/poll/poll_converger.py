"""
Fixed-interval polling of a remote resource until it reaches a terminal
state or the deadline passes.

Each tick fetches the raw status document, decodes it strictly and
classifies it. Succeeded and Failed end the loop immediately. What
happens when the fetch itself raises is decided by the caller through
FetchErrorPolicy:

    converger = PollConverger(
        PollConfig(interval=2.0, timeout=180.0, fetch_error_policy=FetchErrorPolicy.FATAL)
    )

    result = await converger.run(
        lambda: steve.by_id("resources.cattle.io.backup", backup_id),
        resource="backup backup-1",
        status_type=BackupStatus,
        success_field="filename",
    )
"""

from __future__ import annotations

import asyncio
import functools
import time
from typing import Awaitable, Callable

from converge.classify import OutcomeKind, TerminalOutcome, classify_status
from converge.errors import ConvergeError, FetchError, OperationFailed
from converge.logging import Entry, LoggerStream, PollError, PollInfo, PollTrace
from converge.results import ConvergenceOutcome, ConvergenceResult
from converge.status import ResourceStatus, StatusDocument, extract_status

from .fetch_error_policy import FetchErrorPolicy
from .poll_config import PollConfig

Fetch = Callable[[], Awaitable[StatusDocument]]
StatusClassifier = Callable[[ResourceStatus], TerminalOutcome]

# Absorbs float drift when summing intervals up to the deadline.
_TICK_SLACK = 1e-6


class PollConverger:
    def __init__(
        self,
        config: PollConfig | None = None,
        logger: LoggerStream | None = None,
    ) -> None:
        self._config = config or PollConfig()
        self._logger = logger

    @property
    def config(self) -> PollConfig:
        return self._config

    async def run(
        self,
        fetch: Fetch,
        resource: str = "resource",
        status_type: type[ResourceStatus] = ResourceStatus,
        success_field: str | None = None,
        classifier: StatusClassifier | None = None,
    ) -> ConvergenceResult:
        """
        Poll ``fetch`` until the decoded status is terminal or the deadline
        passes.

        Args:
            fetch: Async callable returning the raw status document
            resource: Name used in results, errors and log entries
            status_type: Status struct the document is decoded onto
            success_field: Status field carried as the success payload
            classifier: Overrides the Ready-condition classifier

        Returns:
            ConvergenceResult with outcome SUCCEEDED, FAILED or TIMED_OUT

        Raises:
            FetchError: On the first failing fetch under FetchErrorPolicy.FATAL
            DecodeError: If a fetched document cannot be decoded
        """
        if classifier is None:
            classifier = functools.partial(
                classify_status,
                success_field=success_field,
            )

        interval = self._config.interval
        start = time.monotonic()
        deadline = start + self._config.timeout

        attempts = 0
        last_error: BaseException | None = None

        next_tick = start + interval

        while True:
            # Ticks missed while a slow fetch ran are dropped.
            while next_tick <= time.monotonic():
                next_tick += interval

            if next_tick > deadline + _TICK_SLACK:
                await self._sleep_until(deadline)
                return await self._timed_out(resource, start, attempts, last_error)

            await self._sleep_until(next_tick)
            attempts += 1

            # A tick landing on the deadline still gets one interval to fetch.
            fetch_deadline = max(deadline, next_tick + interval)
            fetch_timeout = asyncio.timeout(max(fetch_deadline - time.monotonic(), 0))

            try:
                async with fetch_timeout:
                    raw = await fetch()

            except ConvergeError:
                raise

            except Exception as err:
                if fetch_timeout.expired():
                    await self._sleep_until(deadline)
                    return await self._timed_out(resource, start, attempts, last_error)

                await self._log(
                    PollError(
                        message=f"Fetch failed for {resource}",
                        resource=resource,
                        attempt=attempts,
                        elapsed=time.monotonic() - start,
                        error=str(err),
                    )
                )

                if self._config.fetch_error_policy == FetchErrorPolicy.FATAL:
                    raise FetchError(resource, err) from err

                last_error = err
                continue

            status = extract_status(raw, status_type)
            outcome = classifier(status)

            await self._log(
                PollTrace(
                    message=f"Polled {resource}: {outcome.kind.value}",
                    resource=resource,
                    attempt=attempts,
                    elapsed=time.monotonic() - start,
                )
            )

            match outcome.kind:
                case OutcomeKind.SUCCEEDED:
                    await self._log(
                        PollInfo(
                            message=f"{resource} is completed!",
                            resource=resource,
                            attempt=attempts,
                            elapsed=time.monotonic() - start,
                        )
                    )

                    return ConvergenceResult(
                        outcome=ConvergenceOutcome.SUCCEEDED,
                        elapsed=time.monotonic() - start,
                        resource=resource,
                        payload=outcome.payload,
                        last_error=last_error,
                        attempts=attempts,
                    )

                case OutcomeKind.FAILED:
                    await self._log(
                        PollError(
                            message=f"{resource} failed",
                            resource=resource,
                            attempt=attempts,
                            elapsed=time.monotonic() - start,
                            error=outcome.reason,
                        )
                    )

                    return ConvergenceResult(
                        outcome=ConvergenceOutcome.FAILED,
                        elapsed=time.monotonic() - start,
                        resource=resource,
                        reason=outcome.reason,
                        last_error=OperationFailed(outcome.reason),
                        attempts=attempts,
                    )

                case _:
                    continue

    async def _sleep_until(self, deadline: float):
        while (remaining := deadline - time.monotonic()) > 0:
            await asyncio.sleep(remaining)

    async def _timed_out(
        self,
        resource: str,
        start: float,
        attempts: int,
        last_error: BaseException | None,
    ) -> ConvergenceResult:
        elapsed = time.monotonic() - start

        await self._log(
            PollError(
                message=f"Timed out waiting for {resource}",
                resource=resource,
                attempt=attempts,
                elapsed=elapsed,
                error=str(last_error) if last_error else "timeout",
            )
        )

        return ConvergenceResult(
            outcome=ConvergenceOutcome.TIMED_OUT,
            elapsed=elapsed,
            resource=resource,
            last_error=last_error,
            attempts=attempts,
        )

    async def _log(self, entry: Entry):
        if self._logger is None:
            return

        await self._logger.log(entry)


async def poll_until(
    fetch: Fetch,
    resource: str = "resource",
    classifier: StatusClassifier | None = None,
    status_type: type[ResourceStatus] = ResourceStatus,
    success_field: str | None = None,
    interval: float = 2.0,
    timeout: float = 180.0,
    fetch_error_policy: FetchErrorPolicy = FetchErrorPolicy.FATAL,
    logger: LoggerStream | None = None,
) -> ConvergenceResult:
    converger = PollConverger(
        PollConfig(
            interval=interval,
            timeout=timeout,
            fetch_error_policy=fetch_error_policy,
        ),
        logger=logger,
    )

    return await converger.run(
        fetch,
        resource=resource,
        status_type=status_type,
        success_field=success_field,
        classifier=classifier,
    )
