from enum import Enum

import msgspec


class ConditionStatus(str, Enum):
    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


class Condition(msgspec.Struct, kw_only=True, rename="camel"):
    # Kept as the raw wire string; values outside ConditionStatus (or a
    # missing status) classify as pending.
    type: str
    status: str | None = None
    reason: str | None = None
    message: str | None = None
    last_update_time: str | None = None
    last_transition_time: str | None = None
