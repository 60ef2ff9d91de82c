from src.application.interfaces.listing_source import ListingSource, ListingSourceError
from src.domain.entities.listing_record import InvalidListingPayloadError, ListingRecord
from src.domain.enums.listing_kind import ListingKind
from src.infrastructure.external_services.listing_api_client import (
    ListingApiClient,
    ListingApiError,
)


class HttpListingSource(ListingSource):
    """Runs listing searches against the marketplace REST API."""

    def __init__(self, client: ListingApiClient, kind: ListingKind) -> None:
        self._client = client
        self._kind = kind

    async def search(
        self, text_query: str, category_id: str | None = None
    ) -> list[ListingRecord]:
        try:
            payloads = await self._client.search(self._kind, text_query, category_id)
            return [ListingRecord.from_payload(payload) for payload in payloads]
        except (ListingApiError, InvalidListingPayloadError) as exc:
            raise ListingSourceError(str(exc)) from exc
