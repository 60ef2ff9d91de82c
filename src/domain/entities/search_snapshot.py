from dataclasses import dataclass, field

from src.domain.entities.filter_state import FilterState
from src.domain.entities.listing_record import ListingRecord
from src.domain.entities.page_window import PageMarker
from src.domain.enums.search_status import SearchStatus


@dataclass(frozen=True)
class SearchSnapshot:
    """
    Immutable view of a search session, taken after a transition completes.

    Presentation code only ever reads snapshots; the orchestrator is the sole
    writer of the underlying state.
    """

    status: SearchStatus
    filter_state: FilterState
    visible_items: tuple[ListingRecord, ...] = field(default_factory=tuple)
    current_page: int = 1
    total_pages: int = 1
    page_window: tuple[PageMarker, ...] = (1,)
    result_count: int = 0
    error: str | None = None
    retryable: bool = False

    @property
    def is_loading(self) -> bool:
        return self.status == SearchStatus.FETCHING
