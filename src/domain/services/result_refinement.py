"""
Local-side refinement of a remote result set.

The remote source only understands the text query and category; price range
and location are applied here. The filter is stable: it never re-sorts.
"""
from collections.abc import Iterable

from src.domain.entities.filter_state import FilterState
from src.domain.entities.listing_record import ListingRecord


def matches_price_filter(record: ListingRecord, state: FilterState) -> bool:
    if state.min_price is not None and record.price < state.min_price:
        return False
    if state.max_price is not None and record.price > state.max_price:
        return False
    return True


def matches_location_filter(record: ListingRecord, state: FilterState) -> bool:
    if state.location is None:
        return True
    if record.location is None:
        return False
    return state.location.casefold() in record.location.casefold()


def apply_filters(record: ListingRecord, state: FilterState) -> bool:
    return matches_price_filter(record, state) and matches_location_filter(record, state)


class ResultRefinementPipeline:
    """Applies the local-side predicates conjunctively, preserving remote order."""

    def refine(
        self, records: Iterable[ListingRecord], state: FilterState
    ) -> tuple[ListingRecord, ...]:
        if not state.has_local_filters:
            return tuple(records)
        return tuple(record for record in records if apply_filters(record, state))
