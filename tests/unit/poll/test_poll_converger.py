"""
Tests for the fixed-interval poll converger.

Tests cover:
- Success and failure end the loop on the first terminal status
- Deadline expiry returns TIMED_OUT within one interval of the deadline
- FATAL fetch error policy aborts on the first failing fetch
- TOLERATE fetch error policy keeps polling through fetch errors
- Decode errors are raised regardless of policy
- A hanging fetch is cancelled at the deadline
"""

import asyncio
import time

import pytest

from converge.classify import TerminalOutcome
from converge.errors import DecodeError, FetchError, OperationFailed
from converge.poll import FetchErrorPolicy, PollConfig, PollConverger, poll_until
from converge.results import ConvergenceOutcome
from converge.status import BackupStatus


INTERVAL = 0.05

PENDING = {"conditions": [{"type": "Reconciling", "status": "True"}]}
READY_UNKNOWN = {"conditions": [{"type": "Ready", "status": "Unknown"}]}
READY = {"conditions": [{"type": "Ready", "status": "True"}]}


def backup_ready(filename: str) -> dict:
    return {
        "conditions": [{"type": "Ready", "status": "True", "message": "Completed"}],
        "filename": filename,
    }


def ready_false(reason: str) -> dict:
    return {"conditions": [{"type": "Ready", "status": "False", "reason": reason}]}


class ScriptedFetch:
    """Returns (or raises) scripted responses in order, repeating the last one."""

    def __init__(self, *responses) -> None:
        self._responses = list(responses)
        self.calls = 0
        self.call_times: list[float] = []

    async def __call__(self):
        self.calls += 1
        self.call_times.append(time.monotonic())
        response = self._responses[min(self.calls, len(self._responses)) - 1]
        if isinstance(response, BaseException):
            raise response

        return response


class TestPollSucceeds:
    """Tests for reaching a Ready=True status."""

    @pytest.mark.asyncio
    async def test_pending_then_succeeded_with_payload(self):
        """Two pending polls then a completed backup yields its filename."""
        fetch = ScriptedFetch(PENDING, READY_UNKNOWN, backup_ready("backup-001.tar.gz"))

        result = await poll_until(
            fetch,
            resource="backup backup-1",
            status_type=BackupStatus,
            success_field="filename",
            interval=INTERVAL,
            timeout=5.0,
        )

        assert result.outcome == ConvergenceOutcome.SUCCEEDED
        assert result.succeeded
        assert result.payload == "backup-001.tar.gz"
        assert result.attempts == 3
        assert fetch.calls == 3
        assert result.elapsed >= 2 * INTERVAL
        assert result.elapsed < 5.0
        assert result.last_error is None

    @pytest.mark.asyncio
    async def test_first_fetch_waits_one_interval(self):
        """Fetches happen on ticks, never immediately at start."""
        fetch = ScriptedFetch(READY)
        start = time.monotonic()

        result = await poll_until(fetch, interval=INTERVAL, timeout=5.0)

        assert result.succeeded
        assert fetch.call_times[0] - start >= INTERVAL * 0.9

    @pytest.mark.asyncio
    async def test_fetches_are_at_least_an_interval_apart(self):
        fetch = ScriptedFetch(PENDING, PENDING, PENDING, READY)

        await poll_until(fetch, interval=INTERVAL, timeout=5.0)

        gaps = [
            later - earlier
            for earlier, later in zip(fetch.call_times, fetch.call_times[1:])
        ]
        assert all(gap >= INTERVAL * 0.9 for gap in gaps)

    @pytest.mark.asyncio
    async def test_custom_classifier(self):
        """A caller-supplied classifier replaces the Ready check."""
        fetch = ScriptedFetch(PENDING)

        result = await poll_until(
            fetch,
            classifier=lambda status: TerminalOutcome.succeeded("custom"),
            interval=INTERVAL,
            timeout=5.0,
        )

        assert result.payload == "custom"
        assert fetch.calls == 1


class TestPollFails:
    """Tests for reaching a Ready=False status."""

    @pytest.mark.asyncio
    async def test_failed_condition_surfaces_reason(self):
        fetch = ScriptedFetch(PENDING, ready_false("InvalidBackupFile"), READY)

        result = await poll_until(fetch, interval=INTERVAL, timeout=5.0)

        assert result.outcome == ConvergenceOutcome.FAILED
        assert result.reason == "InvalidBackupFile"
        assert isinstance(result.last_error, OperationFailed)
        assert fetch.calls == 2

    @pytest.mark.asyncio
    async def test_raise_for_outcome_on_failure(self):
        fetch = ScriptedFetch(ready_false("disk full"))

        result = await poll_until(fetch, interval=INTERVAL, timeout=5.0)

        with pytest.raises(OperationFailed) as error:
            result.raise_for_outcome()

        assert error.value.reason == "disk full"


class TestPollTimesOut:
    """Tests for deadline expiry."""

    @pytest.mark.asyncio
    async def test_pending_forever_times_out_within_one_interval(self):
        timeout = 0.3
        fetch = ScriptedFetch(PENDING)

        result = await poll_until(fetch, interval=INTERVAL, timeout=timeout)

        assert result.outcome == ConvergenceOutcome.TIMED_OUT
        assert result.timed_out
        assert result.last_error is None
        assert timeout <= result.elapsed <= timeout + INTERVAL + 0.05
        assert fetch.calls >= 1

    @pytest.mark.asyncio
    async def test_timeout_shorter_than_interval(self):
        """No tick fits, so nothing is fetched."""
        fetch = ScriptedFetch(READY)

        result = await poll_until(fetch, interval=0.5, timeout=0.1)

        assert result.timed_out
        assert fetch.calls == 0
        assert result.elapsed >= 0.1

    @pytest.mark.asyncio
    async def test_tick_on_the_deadline_still_fetches(self):
        """With timeout equal to the interval the single tick still runs."""
        fetch = ScriptedFetch(READY)

        result = await poll_until(fetch, interval=0.1, timeout=0.1)

        assert result.succeeded
        assert fetch.calls == 1

    @pytest.mark.asyncio
    async def test_slow_fetch_on_the_deadline_tick(self):
        """The final tick's fetch may run up to one interval past the deadline."""

        async def slow_fetch():
            await asyncio.sleep(0.05)
            return READY

        result = await poll_until(slow_fetch, interval=0.1, timeout=0.1)

        assert result.succeeded
        assert result.elapsed < 0.1 + 0.1 + 0.05

    @pytest.mark.asyncio
    async def test_timeout_multiple_of_interval_reaches_last_tick(self):
        fetch = ScriptedFetch(PENDING, PENDING, READY)

        result = await poll_until(fetch, interval=0.1, timeout=0.3)

        assert result.succeeded
        assert fetch.calls == 3

    @pytest.mark.asyncio
    async def test_hanging_fetch_is_cancelled_at_deadline(self):
        """A fetch stuck past the deadline does not hang the caller."""
        cancelled = asyncio.Event()

        async def hanging_fetch():
            try:
                await asyncio.sleep(60)
            except asyncio.CancelledError:
                cancelled.set()
                raise

        result = await poll_until(hanging_fetch, interval=INTERVAL, timeout=0.3)

        assert result.timed_out
        assert result.elapsed < 0.3 + INTERVAL + 0.1
        assert cancelled.is_set()

    @pytest.mark.asyncio
    async def test_raise_for_outcome_on_timeout(self):
        fetch = ScriptedFetch(PENDING)

        result = await poll_until(fetch, interval=INTERVAL, timeout=0.15)

        with pytest.raises(Exception) as error:
            result.raise_for_outcome(timeout_message="timeout waiting for backup to complete")

        assert str(error.value) == "timeout waiting for backup to complete"


class TestFatalFetchErrorPolicy:
    """Tests for FetchErrorPolicy.FATAL."""

    @pytest.mark.asyncio
    async def test_first_fetch_error_is_raised(self):
        cause = ConnectionError("connection refused")
        fetch = ScriptedFetch(cause, READY)

        with pytest.raises(FetchError) as error:
            await poll_until(
                fetch,
                resource="backup backup-1",
                interval=INTERVAL,
                timeout=5.0,
                fetch_error_policy=FetchErrorPolicy.FATAL,
            )

        assert fetch.calls == 1
        assert error.value.__cause__ is cause
        assert error.value.resource == "backup backup-1"
        assert "connection refused" in str(error.value)

    @pytest.mark.asyncio
    async def test_fetch_error_after_pending_is_raised(self):
        fetch = ScriptedFetch(PENDING, PENDING, RuntimeError("503"), READY)

        with pytest.raises(FetchError):
            await poll_until(fetch, interval=INTERVAL, timeout=5.0)

        assert fetch.calls == 3

    @pytest.mark.asyncio
    async def test_fetch_timeout_error_before_deadline_is_fetch_error(self):
        """A TimeoutError raised by the fetch itself is not the deadline."""
        fetch = ScriptedFetch(TimeoutError("read timed out"), READY)

        with pytest.raises(FetchError):
            await poll_until(fetch, interval=INTERVAL, timeout=5.0)


class TestTolerantFetchErrorPolicy:
    """Tests for FetchErrorPolicy.TOLERATE."""

    @pytest.mark.asyncio
    async def test_continues_past_consecutive_fetch_errors(self):
        last_cause = ConnectionError("attempt 3")
        fetch = ScriptedFetch(
            ConnectionError("attempt 1"),
            ConnectionError("attempt 2"),
            last_cause,
            READY,
        )

        result = await poll_until(
            fetch,
            interval=INTERVAL,
            timeout=5.0,
            fetch_error_policy=FetchErrorPolicy.TOLERATE,
        )

        assert result.succeeded
        assert fetch.calls == 4
        assert result.last_error is last_cause

    @pytest.mark.asyncio
    async def test_status_less_unrelated_condition_is_pending(self):
        """A condition without a status does not abort the loop."""
        fetch = ScriptedFetch(
            {"conditions": [{"type": "Reconciling"}]},
            READY,
        )

        result = await poll_until(
            fetch,
            interval=INTERVAL,
            timeout=5.0,
            fetch_error_policy=FetchErrorPolicy.TOLERATE,
        )

        assert result.succeeded
        assert fetch.calls == 2

    @pytest.mark.asyncio
    async def test_missing_status_document_is_pending(self):
        fetch = ScriptedFetch(None, READY)

        result = await poll_until(fetch, interval=INTERVAL, timeout=5.0)

        assert result.succeeded
        assert fetch.calls == 2

    @pytest.mark.asyncio
    async def test_timeout_reports_last_fetch_error(self):
        cause = ConnectionError("control plane restarting")
        fetch = ScriptedFetch(cause)

        result = await poll_until(
            fetch,
            interval=INTERVAL,
            timeout=0.25,
            fetch_error_policy=FetchErrorPolicy.TOLERATE,
        )

        assert result.timed_out
        assert result.last_error is cause
        assert fetch.calls >= 2

    @pytest.mark.asyncio
    async def test_decode_error_is_never_swallowed(self):
        fetch = ScriptedFetch(
            ConnectionError("blip"),
            {"conditions": [{"type": "Ready"}]},
            READY,
        )

        with pytest.raises(DecodeError):
            await poll_until(
                fetch,
                interval=INTERVAL,
                timeout=5.0,
                fetch_error_policy=FetchErrorPolicy.TOLERATE,
            )

        assert fetch.calls == 2

    @pytest.mark.asyncio
    async def test_decode_error_raised_by_fetch_propagates(self):
        fetch = ScriptedFetch(DecodeError("bad payload"), READY)

        with pytest.raises(DecodeError):
            await poll_until(
                fetch,
                interval=INTERVAL,
                timeout=5.0,
                fetch_error_policy=FetchErrorPolicy.TOLERATE,
            )


class TestPollConverger:
    """Tests for the configured converger and its config."""

    @pytest.mark.asyncio
    async def test_run_uses_config(self):
        converger = PollConverger(
            PollConfig(
                interval=INTERVAL,
                timeout=5.0,
                fetch_error_policy=FetchErrorPolicy.TOLERATE,
            )
        )
        fetch = ScriptedFetch(OSError("reset"), backup_ready("b.tar.gz"))

        result = await converger.run(
            fetch,
            status_type=BackupStatus,
            success_field="filename",
        )

        assert result.payload == "b.tar.gz"
        assert converger.config.fetch_error_policy == FetchErrorPolicy.TOLERATE

    @pytest.mark.asyncio
    async def test_independent_convergers_run_concurrently(self):
        results = await asyncio.gather(
            poll_until(ScriptedFetch(PENDING, READY), interval=INTERVAL, timeout=5.0),
            poll_until(ScriptedFetch(ready_false("Error")), interval=INTERVAL, timeout=5.0),
            poll_until(ScriptedFetch(PENDING), interval=INTERVAL, timeout=0.2),
        )

        assert [result.outcome for result in results] == [
            ConvergenceOutcome.SUCCEEDED,
            ConvergenceOutcome.FAILED,
            ConvergenceOutcome.TIMED_OUT,
        ]

    def test_default_config(self):
        config = PollConfig()

        assert config.interval == 2.0
        assert config.timeout == 180.0
        assert config.fetch_error_policy == FetchErrorPolicy.FATAL

    @pytest.mark.parametrize("interval", [0, -1.0])
    def test_non_positive_interval_rejected(self, interval):
        with pytest.raises(ValueError):
            PollConfig(interval=interval)

    def test_negative_timeout_rejected(self):
        with pytest.raises(ValueError):
            PollConfig(timeout=-1.0)


class TestFetchErrorPolicy:
    @pytest.mark.parametrize(
        "name,policy",
        [
            ("fatal", FetchErrorPolicy.FATAL),
            ("tolerate", FetchErrorPolicy.TOLERATE),
            ("TOLERATE", FetchErrorPolicy.TOLERATE),
        ],
    )
    def test_from_name(self, name, policy):
        assert FetchErrorPolicy.from_name(name) == policy

    def test_unknown_name_rejected(self):
        with pytest.raises(ValueError):
            FetchErrorPolicy.from_name("retry")
