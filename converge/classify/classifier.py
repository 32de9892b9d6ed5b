"""
Terminal-state classification of condition lists.

A resource is done when it reports a ``Ready`` condition that is either
``True`` (succeeded) or ``False`` (failed). Every other shape, including a
missing ``Ready`` condition or one that is ``Unknown``, is still pending.
"""

from converge.errors import DecodeError
from converge.status import Condition, ConditionStatus, ResourceStatus

from .terminal_outcome import TerminalOutcome

READY_CONDITION = "Ready"


def find_condition(
    conditions: list[Condition],
    condition_type: str,
) -> Condition | None:
    # Last write wins when a condition type repeats.
    found: Condition | None = None
    for condition in conditions:
        if condition.type == condition_type:
            found = condition

    return found


def classify(
    conditions: list[Condition],
    payload: str | None = None,
) -> TerminalOutcome:
    ready = find_condition(conditions, READY_CONDITION)
    if ready is None:
        return TerminalOutcome.pending()

    match ready.status:
        case ConditionStatus.TRUE:
            return TerminalOutcome.succeeded(payload)
        case ConditionStatus.FALSE:
            reason = ready.reason or ready.message
            if not reason:
                reason = f"{READY_CONDITION} condition is False"

            return TerminalOutcome.failed(reason)
        case _:
            return TerminalOutcome.pending()


def classify_status(
    status: ResourceStatus,
    success_field: str | None = None,
) -> TerminalOutcome:
    """
    Classify a decoded status, reading ``success_field`` off it as the
    success payload.

    Raises:
        DecodeError: If ``success_field`` is not a field of the status type
    """
    payload: str | None = None
    if success_field:
        if success_field not in status.__struct_fields__:
            raise DecodeError(
                f"no field '{success_field}'",
                type(status).__name__,
            )

        value = getattr(status, success_field)
        payload = str(value) if value is not None else None

    return classify(status.conditions, payload=payload)
