from __future__ import annotations

from typing import TYPE_CHECKING

from .convergence import ConvergeError

if TYPE_CHECKING:
    from converge.verify.check_outcome import CheckOutcome


class AggregateVerificationError(ConvergeError):
    """
    One or more independent verification checks failed.

    Carries every failed check, never just the first. The message joins
    the individual failures with newlines, one per failed resource.
    """

    def __init__(self, failures: list[CheckOutcome]) -> None:
        self.failures = list(failures)
        super().__init__(
            "\n".join(str(failure.error) for failure in self.failures)
        )

    @property
    def errors(self) -> list[BaseException]:
        return [failure.error for failure in self.failures]

    def __len__(self) -> int:
        return len(self.failures)
