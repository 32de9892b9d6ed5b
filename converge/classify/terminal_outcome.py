from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutcomeKind(Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    PENDING = "pending"


@dataclass(slots=True, frozen=True)
class TerminalOutcome:
    """
    Verdict of a single classification.

    Attributes:
        kind: Whether the resource succeeded, failed, or is still pending
        payload: Success payload (e.g. the produced backup filename)
        reason: Failure reason, only set when kind is FAILED
    """

    kind: OutcomeKind
    payload: str | None = None
    reason: str | None = None

    @classmethod
    def succeeded(cls, payload: str | None = None) -> TerminalOutcome:
        return cls(kind=OutcomeKind.SUCCEEDED, payload=payload)

    @classmethod
    def failed(cls, reason: str) -> TerminalOutcome:
        return cls(kind=OutcomeKind.FAILED, reason=reason)

    @classmethod
    def pending(cls) -> TerminalOutcome:
        return cls(kind=OutcomeKind.PENDING)

    @property
    def is_terminal(self) -> bool:
        return self.kind != OutcomeKind.PENDING
