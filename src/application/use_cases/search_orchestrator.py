from collections.abc import Callable
from decimal import Decimal

import structlog

from src.application.interfaces.listing_source import ListingSource
from src.application.interfaces.search_address import SearchAddress
from src.config import settings
from src.domain.entities.filter_state import FilterState
from src.domain.entities.listing_record import ListingRecord
from src.domain.entities.search_snapshot import SearchSnapshot
from src.domain.enums.search_status import SearchStatus
from src.domain.services.filter_state_codec import FilterStateCodec
from src.domain.services.paginator import Paginator
from src.domain.services.result_refinement import ResultRefinementPipeline
from src.domain.state_machine.search_state_machine import SearchStateMachine

logger = structlog.get_logger(__name__)

SnapshotListener = Callable[[SearchSnapshot], None]


def _default_paginator() -> Paginator:
    return Paginator(
        settings.items_per_page,
        full_threshold=settings.page_window_full_threshold,
        neighbours=settings.page_window_neighbours,
    )


class SearchOrchestrator:
    """
    Use case: Own the filter state of one search session and reconcile it
    with the remote listing source.

    Changes to the text query or category trigger a remote fetch; changes to
    the price range or location re-refine the current result set locally.
    Any filter change sends the user back to page 1.

    Fetches are correlated by a monotonically increasing sequence number: a
    response that is not for the latest issued request is dropped, so a slow
    earlier fetch can never overwrite a fresher one.

    All methods must be called from the same event loop; the orchestrator is
    the only writer of its state and listeners receive immutable snapshots.
    """

    def __init__(
        self,
        listing_source: ListingSource,
        *,
        address: SearchAddress | None = None,
        codec: FilterStateCodec | None = None,
        pipeline: ResultRefinementPipeline | None = None,
        paginator: Paginator | None = None,
        state_machine: SearchStateMachine | None = None,
    ) -> None:
        self._source = listing_source
        self._address = address
        self._codec = codec or FilterStateCodec()
        self._pipeline = pipeline or ResultRefinementPipeline()
        self._paginator = paginator or _default_paginator()
        self._state_machine = state_machine or SearchStateMachine()

        self._state = FilterState()
        self._status = SearchStatus.IDLE
        self._result_set: tuple[ListingRecord, ...] | None = None
        self._filtered: tuple[ListingRecord, ...] = ()
        self._error: str | None = None
        self._latest_request = 0
        self._last_address: dict[str, str] | None = None
        self._listeners: list[SnapshotListener] = []
        self._snapshot = self._build_snapshot()

    # -------------------------------------------------------------------------
    # Read side
    # -------------------------------------------------------------------------

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def status(self) -> SearchStatus:
        return self._status

    @property
    def result_set(self) -> tuple[ListingRecord, ...] | None:
        """The unrefined remote result for the current server key, if any."""
        return self._result_set

    def snapshot(self) -> SearchSnapshot:
        return self._snapshot

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register a listener called with a snapshot after every transition."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -------------------------------------------------------------------------
    # Entry points
    # -------------------------------------------------------------------------

    async def open(self, state: FilterState) -> SearchSnapshot:
        """
        Hydrate from a decoded address and fetch.

        Unlike a filter change, the page carried by the address is kept (and
        clamped once results arrive) so a shared link reproduces the same page.
        """
        self._state = state
        await self._sync_address()
        await self._fetch(reset_page=False)
        return self._snapshot

    async def restore(self) -> SearchSnapshot:
        """Read the bound address and open the search it describes."""
        if self._address is None:
            raise RuntimeError("restore() requires a SearchAddress")
        params = await self._address.read()
        return await self.open(self._codec.decode(params))

    # -------------------------------------------------------------------------
    # Remote-side filters
    # -------------------------------------------------------------------------

    async def set_text_query(self, text_query: str) -> SearchSnapshot:
        if text_query == self._state.text_query:
            return self._snapshot
        self._state = self._state.with_changes(text_query=text_query, page=1)
        await self._sync_address()
        await self._fetch(reset_page=True)
        return self._snapshot

    async def set_category(self, category_id: str | None) -> SearchSnapshot:
        category_id = category_id or None
        if category_id == self._state.category_id:
            return self._snapshot
        self._state = self._state.with_changes(category_id=category_id, page=1)
        await self._sync_address()
        await self._fetch(reset_page=True)
        return self._snapshot

    # -------------------------------------------------------------------------
    # Local-side filters
    # -------------------------------------------------------------------------

    async def set_price_range(
        self, min_price: Decimal | None, max_price: Decimal | None
    ) -> SearchSnapshot:
        if (min_price, max_price) == (self._state.min_price, self._state.max_price):
            return self._snapshot
        self._state = self._state.with_changes(min_price=min_price, max_price=max_price, page=1)
        await self._refine_and_publish()
        return self._snapshot

    async def set_location(self, location: str | None) -> SearchSnapshot:
        location = location or None
        if location == self._state.location:
            return self._snapshot
        self._state = self._state.with_changes(location=location, page=1)
        await self._refine_and_publish()
        return self._snapshot

    # -------------------------------------------------------------------------
    # Whole-state operations
    # -------------------------------------------------------------------------

    async def apply(self, state: FilterState) -> SearchSnapshot:
        """Replace every filter at once, as a submitted filter form does."""
        new_state = state.with_changes(page=1)
        if new_state == self._state:
            return self._snapshot

        server_changed = new_state.server_key != self._state.server_key
        self._state = new_state
        if server_changed:
            await self._sync_address()
            await self._fetch(reset_page=True)
        else:
            await self._refine_and_publish()
        return self._snapshot

    async def clear_filters(self) -> SearchSnapshot:
        return await self.apply(self._state.cleared())

    async def go_to_page(self, page: int) -> SearchSnapshot:
        if self._status.is_settled:
            page = self._paginator.clamp(page, len(self._filtered))
        else:
            page = max(page, 1)
        if page != self._state.page:
            self._state = self._state.with_changes(page=page)
            await self._sync_address()
            self._publish()
        return self._snapshot

    async def retry(self) -> SearchSnapshot:
        """Re-issue the fetch for the current server key."""
        await self._fetch(reset_page=True)
        return self._snapshot

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    async def _fetch(self, *, reset_page: bool) -> None:
        self._latest_request += 1
        request_id = self._latest_request
        text_query, category_id = self._state.server_key

        self._transition(SearchStatus.FETCHING)
        self._result_set = None
        self._error = None
        self._refine()
        self._publish()

        logger.info(
            "search_fetch_started",
            request_id=request_id,
            text_query=text_query,
            category_id=category_id,
        )

        try:
            records = await self._source.search(text_query, category_id)
        except Exception as exc:
            if request_id != self._latest_request:
                logger.debug(
                    "stale_search_failure_discarded",
                    request_id=request_id,
                    latest_request_id=self._latest_request,
                )
                return
            logger.exception(
                "search_fetch_failed",
                request_id=request_id,
                text_query=text_query,
                category_id=category_id,
            )
            await self._fail(str(exc) or type(exc).__name__)
            return

        if request_id != self._latest_request:
            logger.debug(
                "stale_search_response_discarded",
                request_id=request_id,
                latest_request_id=self._latest_request,
            )
            return

        self._result_set = tuple(records)
        self._transition(SearchStatus.READY)
        if reset_page:
            self._state = self._state.with_changes(page=1)
        self._refine()
        result_set_size = len(self._result_set)
        result_count = len(self._filtered)
        await self._sync_address()
        # A newer fetch may have started while the address was being written
        if request_id != self._latest_request:
            logger.debug(
                "stale_search_response_discarded",
                request_id=request_id,
                latest_request_id=self._latest_request,
            )
            return
        self._publish()

        logger.info(
            "search_fetch_completed",
            request_id=request_id,
            result_set_size=result_set_size,
            result_count=result_count,
            page=self._state.page,
        )

    async def _fail(self, message: str) -> None:
        self._result_set = None
        self._error = message
        self._transition(SearchStatus.FAILED)
        self._refine()
        await self._sync_address()
        self._publish()

    async def _refine_and_publish(self) -> None:
        self._refine()
        await self._sync_address()
        self._publish()

    def _refine(self) -> None:
        """Recompute the filtered list; clamp the page once results are settled."""
        self._filtered = self._pipeline.refine(self._result_set or (), self._state)
        if self._status.is_settled:
            page = self._paginator.clamp(self._state.page, len(self._filtered))
            if page != self._state.page:
                logger.debug("search_page_clamped", requested=self._state.page, clamped=page)
                self._state = self._state.with_changes(page=page)

    def _transition(self, to_status: SearchStatus) -> None:
        # Raises InvalidStateTransitionError on a bad transition
        self._state_machine.validate_transition(self._status, to_status)
        self._status = to_status

    async def _sync_address(self) -> None:
        if self._address is None:
            return
        params = self._codec.encode(self._state)
        if params == self._last_address:
            return
        self._last_address = params
        await self._address.write(params)

    def _build_snapshot(self) -> SearchSnapshot:
        window = self._paginator.paginate(self._filtered, self._state.page)
        return SearchSnapshot(
            status=self._status,
            filter_state=self._state,
            visible_items=window.visible_items,
            current_page=window.current_page,
            total_pages=window.total_pages,
            page_window=self._paginator.page_window(window.current_page, window.total_pages),
            result_count=len(self._filtered),
            error=self._error,
            retryable=self._status == SearchStatus.FAILED,
        )

    def _publish(self) -> None:
        self._snapshot = self._build_snapshot()
        for listener in list(self._listeners):
            listener(self._snapshot)
