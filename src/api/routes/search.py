import structlog
from fastapi import APIRouter, Depends, Request

from src.api.dependencies import get_codec, get_search_orchestrator
from src.api.schemas.search_responses import SearchResponse
from src.application.use_cases.search_orchestrator import SearchOrchestrator
from src.domain.services.filter_state_codec import FilterStateCodec

logger = structlog.get_logger(__name__)
router = APIRouter(tags=["search"])


@router.get("/search", response_model=SearchResponse)
async def search_listings(
    request: Request,
    orchestrator: SearchOrchestrator = Depends(get_search_orchestrator),
    codec: FilterStateCodec = Depends(get_codec),
) -> SearchResponse:
    """
    Run the search described by the address parameters
    (q, mainCategoryId, minPrice, maxPrice, location, page).

    A remote failure is reported in the body as status FAILED, not as an
    HTTP error, so clients can offer a retry.
    """
    state = codec.decode(request.query_params)
    snapshot = await orchestrator.open(state)

    logger.info(
        "search_served",
        status=snapshot.status.value,
        result_count=snapshot.result_count,
        page=snapshot.current_page,
    )
    return SearchResponse.from_snapshot(
        snapshot,
        params=codec.encode(snapshot.filter_state),
        query_string=codec.to_query_string(snapshot.filter_state),
    )
