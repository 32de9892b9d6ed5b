from __future__ import annotations

from enum import Enum
from typing import Literal

FetchErrorPolicyName = Literal["fatal", "tolerate"]


class FetchErrorPolicy(Enum):
    """
    What the poll loop does when a status fetch raises.

    FATAL: Abort on the first failing fetch and raise FetchError
    TOLERATE: Record the error and retry on the next tick
    """

    FATAL = "fatal"
    TOLERATE = "tolerate"

    @classmethod
    def from_name(cls, name: FetchErrorPolicyName) -> FetchErrorPolicy:
        try:
            return cls(name.lower())
        except ValueError as err:
            raise ValueError(f"Unknown fetch error policy '{name}'") from err
