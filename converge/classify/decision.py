from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DecisionKind(Enum):
    CONTINUE = "continue"
    SUCCEED = "succeed"
    FAIL = "fail"


@dataclass(slots=True, frozen=True)
class Decision:
    kind: DecisionKind
    payload: str | None = None
    reason: str | None = None

    @classmethod
    def proceed(cls) -> Decision:
        return cls(kind=DecisionKind.CONTINUE)

    @classmethod
    def succeed(cls, payload: str | None = None) -> Decision:
        return cls(kind=DecisionKind.SUCCEED, payload=payload)

    @classmethod
    def fail(cls, reason: str) -> Decision:
        return cls(kind=DecisionKind.FAIL, reason=reason)

    @property
    def is_terminal(self) -> bool:
        return self.kind != DecisionKind.CONTINUE
