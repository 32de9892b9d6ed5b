from .app_state import app_state_decision
from .classifier import READY_CONDITION, classify, classify_status, find_condition
from .decision import Decision, DecisionKind
from .terminal_outcome import OutcomeKind, TerminalOutcome

__all__ = [
    "Decision",
    "DecisionKind",
    "OutcomeKind",
    "READY_CONDITION",
    "TerminalOutcome",
    "app_state_decision",
    "classify",
    "classify_status",
    "find_condition",
]
