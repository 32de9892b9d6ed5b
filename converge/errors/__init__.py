from .convergence import (
    ConvergeError,
    ConvergenceTimeout,
    DecodeError,
    FetchError,
    OperationFailed,
    TypeMismatchError,
)
from .verification import AggregateVerificationError

__all__ = [
    "AggregateVerificationError",
    "ConvergeError",
    "ConvergenceTimeout",
    "DecodeError",
    "FetchError",
    "OperationFailed",
    "TypeMismatchError",
]
