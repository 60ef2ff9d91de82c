from abc import ABC, abstractmethod

from src.domain.entities.category import Category


class CategorySource(ABC):
    """Port for read-only category master data."""

    @abstractmethod
    async def list_categories(self) -> list[Category]:
        ...
