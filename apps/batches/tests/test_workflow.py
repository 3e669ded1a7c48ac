import pytest

from apps.batches.models import BatchStatus
from apps.batches.workflow import (
    allowed_transitions,
    can_transition,
    transition_error,
    INITIAL_STATUS,
    TERMINAL_STATUS,
)


class TestWorkflow:

    def test_initial_and_terminal(self):
        assert INITIAL_STATUS == BatchStatus.PICKUP
        assert TERMINAL_STATUS == BatchStatus.DELIVERED
        assert allowed_transitions(BatchStatus.DELIVERED) == []

    def test_pickup_cannot_skip_to_delivered(self):
        assert can_transition(BatchStatus.PICKUP, BatchStatus.DELIVERED) is False

    def test_washing_branches(self):
        assert can_transition(BatchStatus.WASHING, BatchStatus.COMPLETED) is True
        assert can_transition(BatchStatus.WASHING, BatchStatus.DELIVERED) is True
        assert allowed_transitions(BatchStatus.WASHING) == [
            BatchStatus.COMPLETED,
            BatchStatus.DELIVERED,
        ]

    @pytest.mark.parametrize('target', list(BatchStatus))
    def test_delivered_is_terminal(self, target):
        assert can_transition(BatchStatus.DELIVERED, target) is False

    @pytest.mark.parametrize('status', list(BatchStatus))
    def test_same_state_rejected(self, status):
        assert can_transition(status, status) is False

    @pytest.mark.parametrize('from_status,to_status', [
        (BatchStatus.WASHING, BatchStatus.PICKUP),
        (BatchStatus.COMPLETED, BatchStatus.WASHING),
        (BatchStatus.COMPLETED, BatchStatus.PICKUP),
    ])
    def test_backward_rejected(self, from_status, to_status):
        assert can_transition(from_status, to_status) is False

    def test_unknown_status(self):
        assert can_transition('lost', BatchStatus.WASHING) is False
        assert transition_error(BatchStatus.PICKUP, 'ironing') == "Invalid status 'ironing'"

    def test_error_messages(self):
        assert 'already' in transition_error(BatchStatus.WASHING, BatchStatus.WASHING)
        assert transition_error(BatchStatus.DELIVERED, BatchStatus.PICKUP) == 'Batch has already been delivered'
        message = transition_error(BatchStatus.PICKUP, BatchStatus.DELIVERED)
        assert "Allowed: washing" in message
