from dataclasses import dataclass, field

from converge.errors import AggregateVerificationError

from .check_outcome import CheckOutcome


@dataclass(slots=True)
class VerificationReport:
    outcomes: list[CheckOutcome] = field(default_factory=list)

    @property
    def failures(self) -> list[CheckOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.passed]

    @property
    def passed(self) -> bool:
        return len(self.failures) == 0

    @property
    def error(self) -> AggregateVerificationError | None:
        failures = self.failures
        if not failures:
            return None

        return AggregateVerificationError(failures)

    def raise_for_failures(self) -> None:
        if error := self.error:
            raise error
