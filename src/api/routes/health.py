from fastapi import APIRouter, Depends

from src.api.dependencies import get_listing_api_client
from src.infrastructure.external_services.listing_api_client import ListingApiClient

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    client: ListingApiClient = Depends(get_listing_api_client),
) -> dict:  # type: ignore[type-arg]
    """Liveness + listing API reachability check."""
    listing_api_status = "connected" if await client.ping() else "unreachable"
    overall = "healthy" if listing_api_status == "connected" else "degraded"
    return {"status": overall, "listing_api": listing_api_status}
