"""HTTP client for the marketplace listing API."""
from typing import Any

import httpx
import structlog

from src.config import settings
from src.domain.enums.listing_kind import ListingKind

logger = structlog.get_logger(__name__)


class ListingApiError(Exception):
    pass


class ListingApiClient:
    """Thin HTTP wrapper around the marketplace REST API."""

    def __init__(
        self,
        base_url: str = settings.listing_api_url,
        api_key: str | None = settings.listing_api_key,
        timeout: float = settings.request_timeout_seconds,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._headers = {"Content-Type": "application/json"}
        if api_key:
            self._headers["Authorization"] = f"Bearer {api_key}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def _get(self, path: str, params: dict[str, str]) -> Any:
        async with self._client() as client:
            try:
                response = await client.get(path, params=params)
                response.raise_for_status()
                return response.json()
            except httpx.HTTPStatusError as exc:
                logger.error(
                    "listing_api_request_failed",
                    path=path,
                    status_code=exc.response.status_code,
                    response=exc.response.text,
                )
                raise ListingApiError(
                    f"Listing API returned {exc.response.status_code} for {path}"
                ) from exc
            except httpx.RequestError as exc:
                logger.error("listing_api_connection_failed", path=path, error=str(exc))
                raise ListingApiError(f"Failed to reach listing API: {exc}") from exc
            except ValueError as exc:
                logger.error("listing_api_invalid_json", path=path)
                raise ListingApiError(f"Listing API returned invalid JSON for {path}") from exc

    async def search(
        self,
        kind: ListingKind,
        text_query: str = "",
        category_id: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        GET /services?q=&mainCategoryId= → [{...}, ...]
        GET /jobs?q=&mainCategoryId=     → {"jobs": [...], "totalPages": ..., ...}
        """
        params: dict[str, str] = {}
        if text_query:
            params["q"] = text_query
        if category_id:
            params["mainCategoryId"] = category_id

        data = await self._get(kind.path, params)
        if isinstance(data, dict):
            data = data.get(kind.value, [])
        if not isinstance(data, list):
            raise ListingApiError(f"Unexpected {kind.value} payload: {type(data).__name__}")

        logger.info(
            "listing_api_search",
            kind=kind.value,
            text_query=text_query,
            category_id=category_id,
            count=len(data),
        )
        return data

    async def main_categories(self, query: str = "") -> list[dict[str, Any]]:
        """GET /main-categories?q= → [{"id": "...", "name": "..."}, ...]"""
        data = await self._get("/main-categories", {"q": query} if query else {})
        if not isinstance(data, list):
            raise ListingApiError(f"Unexpected categories payload: {type(data).__name__}")
        return data

    async def ping(self) -> bool:
        """Return True if the listing API answers the category endpoint."""
        try:
            await self.main_categories()
        except ListingApiError:
            return False
        return True
