"""
Batch status workflow.

    pickup -> washing -> completed -> delivered
    washing -> delivered

Batches only move forward; delivered is terminal.
"""
from typing import Dict, FrozenSet, List

from .models import BatchStatus


INITIAL_STATUS = BatchStatus.PICKUP
TERMINAL_STATUS = BatchStatus.DELIVERED

TRANSITIONS: Dict[str, FrozenSet[str]] = {
    BatchStatus.PICKUP: frozenset({BatchStatus.WASHING}),
    BatchStatus.WASHING: frozenset({BatchStatus.COMPLETED, BatchStatus.DELIVERED}),
    BatchStatus.COMPLETED: frozenset({BatchStatus.DELIVERED}),
    BatchStatus.DELIVERED: frozenset(),
}

# Stage-specific notes column written on entering a status
STAGE_NOTES_FIELD: Dict[str, str] = {
    BatchStatus.WASHING: 'washing_notes',
    BatchStatus.COMPLETED: 'completed_notes',
    BatchStatus.DELIVERED: 'delivery_notes',
}

_ORDER: List[str] = [
    BatchStatus.PICKUP,
    BatchStatus.WASHING,
    BatchStatus.COMPLETED,
    BatchStatus.DELIVERED,
]


def allowed_transitions(status: str) -> List[str]:
    """Statuses reachable from `status` in one step, in workflow order."""
    targets = TRANSITIONS.get(status, frozenset())
    return [s for s in _ORDER if s in targets]


def can_transition(from_status: str, to_status: str) -> bool:
    return to_status in TRANSITIONS.get(from_status, frozenset())


def transition_error(from_status: str, to_status: str) -> str:
    """Human readable reason a transition is rejected."""
    if to_status not in TRANSITIONS:
        return f"Invalid status '{to_status}'"
    if from_status == to_status:
        return f"Batch is already in '{to_status}' status"
    if from_status == TERMINAL_STATUS:
        return "Batch has already been delivered"
    allowed = allowed_transitions(from_status)
    return (
        f"Cannot change status from '{from_status}' to '{to_status}'. "
        f"Allowed: {', '.join(allowed)}"
    )
