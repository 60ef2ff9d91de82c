from collections.abc import Sequence

from src.domain.entities.listing_record import ListingRecord
from src.domain.entities.page_window import ELLIPSIS, PageMarker, PageWindow


class Paginator:
    """
    Slices a filtered result list into fixed-size pages.

    An empty list is one page of zero items, so total_pages is never below 1.
    A requested page outside [1, total_pages] is clamped into that range.
    """

    def __init__(
        self,
        items_per_page: int = 12,
        *,
        full_threshold: int = 7,
        neighbours: int = 2,
    ) -> None:
        if items_per_page < 1:
            raise ValueError(f"items_per_page must be >= 1, got {items_per_page}")
        self.items_per_page = items_per_page
        self.full_threshold = full_threshold
        self.neighbours = neighbours

    def total_pages(self, item_count: int) -> int:
        return max(1, -(-item_count // self.items_per_page))

    def clamp(self, page: int, item_count: int) -> int:
        return min(max(page, 1), self.total_pages(item_count))

    def paginate(self, items: Sequence[ListingRecord], page: int) -> PageWindow:
        total = self.total_pages(len(items))
        current = min(max(page, 1), total)
        start = (current - 1) * self.items_per_page
        return PageWindow(
            current_page=current,
            total_pages=total,
            visible_items=tuple(items[start : start + self.items_per_page]),
        )

    def page_window(self, current_page: int, total_pages: int) -> tuple[PageMarker, ...]:
        """
        Page numbers to show in the navigation bar.

        Up to ``full_threshold`` pages are all shown. Beyond that the first and
        last pages are always shown together with every page within
        ``neighbours`` of the current one; each remaining gap collapses into a
        single ELLIPSIS marker.

        >>> Paginator().page_window(5, 10)
        (1, '…', 3, 4, 5, 6, 7, '…', 10)
        """
        total = max(total_pages, 1)
        if total <= self.full_threshold:
            return tuple(range(1, total + 1))

        current = min(max(current_page, 1), total)
        shown = {1, total}
        shown.update(
            range(max(1, current - self.neighbours), min(total, current + self.neighbours) + 1)
        )

        window: list[PageMarker] = []
        previous = 0
        for page in sorted(shown):
            if page - previous > 1:
                window.append(ELLIPSIS)
            window.append(page)
            previous = page
        return tuple(window)
