from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.api.dependencies import get_list_categories_use_case
from src.api.schemas.search_responses import CategoryResponse
from src.application.use_cases.list_categories import ListCategories
from src.infrastructure.external_services.listing_api_client import ListingApiError

router = APIRouter(tags=["categories"])


@router.get("/categories", response_model=list[CategoryResponse])
async def list_categories(
    q: str = Query(default=""),
    use_case: ListCategories = Depends(get_list_categories_use_case),
) -> list[CategoryResponse]:
    """Selectable main categories, optionally narrowed by name."""
    try:
        result = await use_case.execute(q)
    except ListingApiError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
    return [CategoryResponse.from_domain(c) for c in result.categories]
