"""
In-memory listing and category sources, used in tests and local development.
"""
from collections.abc import Iterable

import structlog

from src.application.interfaces.category_source import CategorySource
from src.application.interfaces.listing_source import ListingSource
from src.domain.entities.category import Category
from src.domain.entities.listing_record import ListingRecord

logger = structlog.get_logger(__name__)


class InMemoryListingSource(ListingSource):
    """
    Answers searches from a fixed list of records.

    A record matches the text query when the query appears, case-insensitively,
    in its title or description attribute; category matches use the
    ``mainCategoryId`` attribute.
    """

    def __init__(self, records: Iterable[ListingRecord] = ()) -> None:
        self._records = list(records)
        self.calls: list[tuple[str, str | None]] = []

    async def search(
        self, text_query: str, category_id: str | None = None
    ) -> list[ListingRecord]:
        self.calls.append((text_query, category_id))
        needle = text_query.casefold()
        results = [
            record
            for record in self._records
            if (category_id is None or record.attributes.get("mainCategoryId") == category_id)
            and (not needle or needle in _searchable_text(record))
        ]
        logger.debug(
            "in_memory_search",
            text_query=text_query,
            category_id=category_id,
            count=len(results),
        )
        return results


class InMemoryCategorySource(CategorySource):
    def __init__(self, categories: Iterable[Category] = ()) -> None:
        self._categories = list(categories)

    async def list_categories(self) -> list[Category]:
        return list(self._categories)


def _searchable_text(record: ListingRecord) -> str:
    parts = (record.attributes.get("title"), record.attributes.get("description"))
    return " ".join(str(p) for p in parts if p).casefold()
