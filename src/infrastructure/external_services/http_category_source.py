from src.application.interfaces.category_source import CategorySource
from src.domain.entities.category import Category
from src.infrastructure.external_services.listing_api_client import (
    ListingApiClient,
    ListingApiError,
)


class HttpCategorySource(CategorySource):
    """Reads main categories from the marketplace REST API."""

    def __init__(self, client: ListingApiClient) -> None:
        self._client = client

    async def list_categories(self) -> list[Category]:
        payloads = await self._client.main_categories()
        try:
            return [Category(id=str(p["id"]), name=str(p.get("name", ""))) for p in payloads]
        except (KeyError, TypeError, AttributeError) as exc:
            raise ListingApiError(f"Malformed category payload: {exc!r}") from exc
