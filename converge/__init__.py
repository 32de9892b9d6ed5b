from .classify import Decision, TerminalOutcome, classify, classify_status
from .errors import (
    AggregateVerificationError,
    ConvergeError,
    ConvergenceTimeout,
    DecodeError,
    FetchError,
    OperationFailed,
    TypeMismatchError,
)
from .poll import FetchErrorPolicy, PollConfig, PollConverger, poll_until
from .results import ConvergenceOutcome, ConvergenceResult
from .status import Condition, ConditionStatus, ResourceHandle, extract_conditions, extract_status
from .verify import ResourceCheck, ResourceKind, VerificationReport, verify_all
from .watch import EventType, WatchConverger, WatchEvent, watch_until

__version__ = "0.1.0"

__all__ = [
    "AggregateVerificationError",
    "Condition",
    "ConditionStatus",
    "ConvergeError",
    "ConvergenceOutcome",
    "ConvergenceResult",
    "ConvergenceTimeout",
    "Decision",
    "DecodeError",
    "EventType",
    "FetchError",
    "FetchErrorPolicy",
    "OperationFailed",
    "PollConfig",
    "PollConverger",
    "ResourceCheck",
    "ResourceHandle",
    "ResourceKind",
    "TerminalOutcome",
    "TypeMismatchError",
    "VerificationReport",
    "WatchConverger",
    "WatchEvent",
    "classify",
    "classify_status",
    "extract_conditions",
    "extract_status",
    "poll_until",
    "verify_all",
    "watch_until",
]
