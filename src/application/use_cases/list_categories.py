from dataclasses import dataclass

import structlog

from src.application.interfaces.category_source import CategorySource
from src.domain.entities.category import Category

logger = structlog.get_logger(__name__)


@dataclass
class ListCategoriesOutput:
    categories: list[Category]

    def name_for(self, category_id: str | None) -> str | None:
        """Display name of ``category_id``, or None when it is not listed."""
        if category_id is None:
            return None
        for category in self.categories:
            if category.id == category_id:
                return category.name
        return None


class ListCategories:
    """Use case: Fetch the selectable main categories, optionally narrowed by name."""

    def __init__(self, category_source: CategorySource) -> None:
        self._category_source = category_source

    async def execute(self, query: str = "") -> ListCategoriesOutput:
        categories = await self._category_source.list_categories()

        needle = query.strip().casefold()
        if needle:
            categories = [c for c in categories if needle in c.name.casefold()]

        logger.debug("categories_listed", query=query, count=len(categories))
        return ListCategoriesOutput(categories=list(categories))
