from dataclasses import dataclass, replace
from decimal import Decimal


@dataclass(frozen=True)
class FilterState:
    """
    The complete search state of one browsing session.

    Single source of truth for the search page: the address is only ever a
    serialization of this value. Absent optional fields mean "no constraint".
    An inverted price range (min_price > max_price) is valid and matches nothing.
    """

    # Remote-side filters
    text_query: str = ""
    category_id: str | None = None

    # Local-side filters
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    location: str | None = None

    # Pagination
    page: int = 1

    def __post_init__(self) -> None:
        # An empty string means "no constraint", same as None
        for name in ("category_id", "location"):
            if getattr(self, name) == "":
                object.__setattr__(self, name, None)
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        for name in ("min_price", "max_price"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

    @property
    def server_key(self) -> tuple[str, str | None]:
        """The dimensions sent to the remote source."""
        return (self.text_query, self.category_id)

    @property
    def has_local_filters(self) -> bool:
        return (
            self.min_price is not None
            or self.max_price is not None
            or self.location is not None
        )

    @property
    def active_filter_count(self) -> int:
        """Number of refinement filters in use (the text query is not counted)."""
        return sum(
            value is not None
            for value in (self.category_id, self.min_price, self.max_price, self.location)
        )

    def with_changes(self, **changes: object) -> "FilterState":
        return replace(self, **changes)  # type: ignore[arg-type]

    def cleared(self) -> "FilterState":
        """Drop every filter and return to the first page."""
        return FilterState()
