"""
Event-stream observation of a remote resource.

The converger is handed an already-open stream of watch events. Every
event's object is cast to the expected resource type before the caller's
predicate sees it. An event that does not cast ends the watch with
TypeMismatchError. The first Succeed or Fail decision ends the watch and
the stream is closed; nothing after it is consumed.
"""

from __future__ import annotations

import asyncio
import inspect
import time
from collections.abc import AsyncIterable, AsyncIterator, Mapping
from typing import Awaitable, Callable, TypeVar

import msgspec

from converge.classify import Decision, DecisionKind
from converge.errors import OperationFailed, TypeMismatchError
from converge.logging import Entry, LoggerStream, WatchInfo, WatchTrace
from converge.results import ConvergenceOutcome, ConvergenceResult

from .watch_event import WatchEvent

R = TypeVar("R")

Predicate = Callable[[R], Decision | Awaitable[Decision]]


class WatchConverger:
    def __init__(
        self,
        timeout: float | None = None,
        logger: LoggerStream | None = None,
    ) -> None:
        if timeout is not None and timeout < 0:
            raise ValueError(f"Watch timeout must not be negative, got {timeout}")

        self._timeout = timeout
        self._logger = logger

    async def run(
        self,
        events: AsyncIterable[WatchEvent | Mapping],
        predicate: Predicate[R],
        resource_type: type[R],
        resource: str = "resource",
    ) -> ConvergenceResult:
        loop = asyncio.get_running_loop()
        start = time.monotonic()
        deadline = loop.time() + self._timeout if self._timeout is not None else None

        iterator = aiter(events)
        events_seen = 0

        try:
            while True:
                receive_timeout = asyncio.timeout_at(deadline)

                try:
                    async with receive_timeout:
                        event = await anext(iterator)

                except StopAsyncIteration:
                    return self._timed_out(resource, start, events_seen)

                except TimeoutError:
                    if receive_timeout.expired():
                        return self._timed_out(resource, start, events_seen)

                    raise

                events_seen += 1
                event = self._to_event(event)
                resource_state = self._cast(event.object, resource_type)

                decision = predicate(resource_state)
                if inspect.isawaitable(decision):
                    decision = await decision

                await self._log(
                    WatchTrace(
                        message=f"Watched {resource}: {decision.kind.value}",
                        resource=resource,
                        event_type=event.type.value,
                        events_seen=events_seen,
                    )
                )

                match decision.kind:
                    case DecisionKind.SUCCEED:
                        await self._log(
                            WatchInfo(
                                message=f"{resource} is completed!",
                                resource=resource,
                                event_type=event.type.value,
                                events_seen=events_seen,
                            )
                        )

                        return ConvergenceResult(
                            outcome=ConvergenceOutcome.SUCCEEDED,
                            elapsed=time.monotonic() - start,
                            resource=resource,
                            payload=decision.payload,
                            attempts=events_seen,
                        )

                    case DecisionKind.FAIL:
                        return ConvergenceResult(
                            outcome=ConvergenceOutcome.FAILED,
                            elapsed=time.monotonic() - start,
                            resource=resource,
                            reason=decision.reason,
                            last_error=OperationFailed(decision.reason),
                            attempts=events_seen,
                        )

                    case _:
                        continue

        finally:
            await self._close(iterator)

    def _to_event(self, event: WatchEvent | Mapping) -> WatchEvent:
        if isinstance(event, WatchEvent):
            return event

        if isinstance(event, Mapping):
            try:
                return WatchEvent.from_dict(event)
            except ValueError as err:
                raise TypeMismatchError(WatchEvent, event) from err

        raise TypeMismatchError(WatchEvent, event)

    def _cast(self, obj: object, resource_type: type[R]) -> R:
        if isinstance(obj, resource_type):
            return obj

        if isinstance(obj, Mapping) and issubclass(resource_type, msgspec.Struct):
            try:
                return msgspec.convert(dict(obj), type=resource_type)
            except msgspec.ValidationError as err:
                raise TypeMismatchError(resource_type, obj) from err

        raise TypeMismatchError(resource_type, obj)

    async def _close(self, iterator: AsyncIterator):
        aclose = getattr(iterator, "aclose", None)
        if aclose is None:
            return

        await aclose()

    def _timed_out(
        self,
        resource: str,
        start: float,
        events_seen: int,
    ) -> ConvergenceResult:
        return ConvergenceResult(
            outcome=ConvergenceOutcome.TIMED_OUT,
            elapsed=time.monotonic() - start,
            resource=resource,
            attempts=events_seen,
        )

    async def _log(self, entry: Entry):
        if self._logger is None:
            return

        await self._logger.log(entry)


async def watch_until(
    events: AsyncIterable[WatchEvent | Mapping],
    predicate: Predicate[R],
    resource_type: type[R],
    resource: str = "resource",
    timeout: float | None = None,
    logger: LoggerStream | None = None,
) -> ConvergenceResult:
    converger = WatchConverger(timeout=timeout, logger=logger)
    return await converger.run(
        events,
        predicate,
        resource_type,
        resource=resource,
    )
