from .convergence_outcome import ConvergenceOutcome
from .convergence_result import ConvergenceResult

__all__ = [
    "ConvergenceOutcome",
    "ConvergenceResult",
]
