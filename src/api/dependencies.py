"""
FastAPI dependency injection wiring.

Each dependency function returns a fully-constructed object with its
collaborators injected, so route handlers stay thin.
"""
from fastapi import Depends

from src.application.interfaces.category_source import CategorySource
from src.application.interfaces.listing_source import ListingSource
from src.application.use_cases.list_categories import ListCategories
from src.application.use_cases.search_orchestrator import SearchOrchestrator
from src.config import settings
from src.domain.services.filter_state_codec import FilterStateCodec
from src.infrastructure.external_services.http_category_source import HttpCategorySource
from src.infrastructure.external_services.http_listing_source import HttpListingSource
from src.infrastructure.external_services.listing_api_client import ListingApiClient


# ---- Low-level dependencies ------------------------------------------------

def get_listing_api_client() -> ListingApiClient:
    return ListingApiClient()


def get_listing_source(
    client: ListingApiClient = Depends(get_listing_api_client),
) -> ListingSource:
    return HttpListingSource(client, settings.listing_kind)


def get_category_source(
    client: ListingApiClient = Depends(get_listing_api_client),
) -> CategorySource:
    return HttpCategorySource(client)


def get_codec() -> FilterStateCodec:
    return FilterStateCodec()


# ---- Use-case dependencies -------------------------------------------------

def get_search_orchestrator(
    listing_source: ListingSource = Depends(get_listing_source),
    codec: FilterStateCodec = Depends(get_codec),
) -> SearchOrchestrator:
    return SearchOrchestrator(listing_source, codec=codec)


def get_list_categories_use_case(
    category_source: CategorySource = Depends(get_category_source),
) -> ListCategories:
    return ListCategories(category_source)
