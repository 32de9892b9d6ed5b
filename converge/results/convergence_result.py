from dataclasses import dataclass

from converge.errors import ConvergenceTimeout, OperationFailed

from .convergence_outcome import ConvergenceOutcome


@dataclass(slots=True)
class ConvergenceResult:
    outcome: ConvergenceOutcome
    elapsed: float
    resource: str
    payload: str | None = None
    reason: str | None = None
    last_error: BaseException | None = None
    attempts: int = 0

    @property
    def succeeded(self) -> bool:
        return self.outcome == ConvergenceOutcome.SUCCEEDED

    @property
    def failed(self) -> bool:
        return self.outcome == ConvergenceOutcome.FAILED

    @property
    def timed_out(self) -> bool:
        return self.outcome == ConvergenceOutcome.TIMED_OUT

    def raise_for_outcome(self, timeout_message: str | None = None) -> str | None:
        """
        Return the success payload, or raise OperationFailed /
        ConvergenceTimeout for the other outcomes.
        """
        match self.outcome:
            case ConvergenceOutcome.SUCCEEDED:
                return self.payload
            case ConvergenceOutcome.FAILED:
                raise OperationFailed(self.reason or f"{self.resource} failed")
            case _:
                if timeout_message is None:
                    timeout_message = (
                        f"timeout waiting for {self.resource} to complete"
                    )

                raise ConvergenceTimeout(
                    timeout_message,
                    elapsed=self.elapsed,
                    last_error=self.last_error,
                ) from self.last_error
