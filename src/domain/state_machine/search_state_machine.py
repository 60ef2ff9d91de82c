from src.domain.enums.search_status import SearchStatus


# Mapping of valid transitions: from_status -> set of allowed to_statuses
VALID_TRANSITIONS: dict[SearchStatus, frozenset[SearchStatus]] = {
    SearchStatus.IDLE: frozenset({SearchStatus.FETCHING}),
    # FETCHING -> FETCHING covers a newer request superseding an in-flight one
    SearchStatus.FETCHING: frozenset(
        {SearchStatus.FETCHING, SearchStatus.READY, SearchStatus.FAILED}
    ),
    SearchStatus.READY: frozenset({SearchStatus.FETCHING}),
    SearchStatus.FAILED: frozenset({SearchStatus.FETCHING}),
}


class InvalidStateTransitionError(Exception):
    """Raised when an invalid status transition is attempted."""

    def __init__(self, from_status: SearchStatus, to_status: SearchStatus) -> None:
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(
            f"Invalid transition from {from_status.value} to {to_status.value}. "
            f"Allowed transitions: {sorted(s.value for s in VALID_TRANSITIONS.get(from_status, frozenset()))}"
        )


class SearchStateMachine:
    """
    Validates status transitions of a search session.

    Stateless: call validate_transition() with explicit statuses.
    """

    def can_transition(self, from_status: SearchStatus, to_status: SearchStatus) -> bool:
        """Return True if transitioning from_status → to_status is permitted."""
        return to_status in VALID_TRANSITIONS.get(from_status, frozenset())

    def validate_transition(self, from_status: SearchStatus, to_status: SearchStatus) -> None:
        """Raise InvalidStateTransitionError if the transition is not permitted."""
        if not self.can_transition(from_status, to_status):
            raise InvalidStateTransitionError(from_status, to_status)

    def get_allowed_transitions(self, from_status: SearchStatus) -> frozenset[SearchStatus]:
        """Return the set of statuses reachable from from_status."""
        return VALID_TRANSITIONS.get(from_status, frozenset())
