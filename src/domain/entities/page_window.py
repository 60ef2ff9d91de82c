from dataclasses import dataclass, field

from src.domain.entities.listing_record import ListingRecord

ELLIPSIS = "…"

# A page-navigation entry: either a page number or the ELLIPSIS marker
PageMarker = int | str


@dataclass(frozen=True)
class PageWindow:
    """The slice of a filtered result list shown on one page. Derived, never persisted."""

    current_page: int
    total_pages: int
    visible_items: tuple[ListingRecord, ...] = field(default_factory=tuple)
