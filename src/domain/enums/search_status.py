from enum import Enum


class SearchStatus(str, Enum):
    """All possible states of a search session."""

    IDLE = "IDLE"
    FETCHING = "FETCHING"
    READY = "READY"
    FAILED = "FAILED"

    @property
    def is_settled(self) -> bool:
        """Settled states hold the outcome of the latest fetch."""
        return self in (SearchStatus.READY, SearchStatus.FAILED)
