from typing import Any

from pydantic import BaseModel

from src.domain.entities.category import Category
from src.domain.entities.search_snapshot import SearchSnapshot
from src.domain.enums.search_status import SearchStatus


class SearchResponse(BaseModel):
    status: SearchStatus
    items: list[dict[str, Any]]
    current_page: int
    total_pages: int
    page_window: list[int | str]
    result_count: int
    active_filter_count: int
    error: str | None = None
    retryable: bool = False
    params: dict[str, str]
    query_string: str

    @classmethod
    def from_snapshot(
        cls, snapshot: SearchSnapshot, params: dict[str, str], query_string: str
    ) -> "SearchResponse":
        return cls(
            status=snapshot.status,
            items=[record.to_payload() for record in snapshot.visible_items],
            current_page=snapshot.current_page,
            total_pages=snapshot.total_pages,
            page_window=list(snapshot.page_window),
            result_count=snapshot.result_count,
            active_filter_count=snapshot.filter_state.active_filter_count,
            error=snapshot.error,
            retryable=snapshot.retryable,
            params=params,
            query_string=query_string,
        )


class CategoryResponse(BaseModel):
    id: str
    name: str

    @classmethod
    def from_domain(cls, category: Category) -> "CategoryResponse":
        return cls(id=category.id, name=category.name)
