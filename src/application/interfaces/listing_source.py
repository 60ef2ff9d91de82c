from abc import ABC, abstractmethod

from src.domain.entities.listing_record import ListingRecord


class ListingSourceError(Exception):
    """Raised by a ListingSource when the remote query cannot be completed."""


class ListingSource(ABC):
    """Port for the remote keyword/category listing query."""

    @abstractmethod
    async def search(
        self, text_query: str, category_id: str | None = None
    ) -> list[ListingRecord]:
        """
        Return the listings matching (text_query, category_id), in the remote
        source's order. Raises ListingSourceError on failure.
        """
        ...
