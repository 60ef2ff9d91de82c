"""Unit tests for the search status state machine."""
import pytest

from src.domain.enums.search_status import SearchStatus
from src.domain.state_machine.search_state_machine import (
    InvalidStateTransitionError,
    SearchStateMachine,
)


@pytest.fixture()
def sm() -> SearchStateMachine:
    return SearchStateMachine()


class TestValidTransitions:
    def test_idle_to_fetching(self, sm: SearchStateMachine) -> None:
        assert sm.can_transition(SearchStatus.IDLE, SearchStatus.FETCHING) is True

    def test_fetching_to_ready(self, sm: SearchStateMachine) -> None:
        assert sm.can_transition(SearchStatus.FETCHING, SearchStatus.READY) is True

    def test_fetching_to_failed(self, sm: SearchStateMachine) -> None:
        assert sm.can_transition(SearchStatus.FETCHING, SearchStatus.FAILED) is True

    def test_fetching_reenters_fetching(self, sm: SearchStateMachine) -> None:
        assert sm.can_transition(SearchStatus.FETCHING, SearchStatus.FETCHING) is True

    def test_ready_to_fetching(self, sm: SearchStateMachine) -> None:
        assert sm.can_transition(SearchStatus.READY, SearchStatus.FETCHING) is True

    def test_failed_to_fetching(self, sm: SearchStateMachine) -> None:
        assert sm.can_transition(SearchStatus.FAILED, SearchStatus.FETCHING) is True


class TestInvalidTransitions:
    def test_idle_cannot_become_ready(self, sm: SearchStateMachine) -> None:
        assert sm.can_transition(SearchStatus.IDLE, SearchStatus.READY) is False

    def test_ready_cannot_fail_without_fetching(self, sm: SearchStateMachine) -> None:
        assert sm.can_transition(SearchStatus.READY, SearchStatus.FAILED) is False

    def test_nothing_returns_to_idle(self, sm: SearchStateMachine) -> None:
        for status in SearchStatus:
            assert sm.can_transition(status, SearchStatus.IDLE) is False


class TestValidateTransition:
    def test_valid_transition_does_not_raise(self, sm: SearchStateMachine) -> None:
        sm.validate_transition(SearchStatus.IDLE, SearchStatus.FETCHING)  # no exception

    def test_invalid_transition_raises(self, sm: SearchStateMachine) -> None:
        with pytest.raises(InvalidStateTransitionError) as exc_info:
            sm.validate_transition(SearchStatus.READY, SearchStatus.FAILED)
        assert "READY" in str(exc_info.value)
        assert "FAILED" in str(exc_info.value)


class TestSettledStatuses:
    def test_ready_and_failed_are_settled(self) -> None:
        assert SearchStatus.READY.is_settled
        assert SearchStatus.FAILED.is_settled

    def test_idle_and_fetching_are_not_settled(self) -> None:
        assert not SearchStatus.IDLE.is_settled
        assert not SearchStatus.FETCHING.is_settled

    def test_allowed_from_ready(self, sm: SearchStateMachine) -> None:
        assert sm.get_allowed_transitions(SearchStatus.READY) == frozenset({SearchStatus.FETCHING})
