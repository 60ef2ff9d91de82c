from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    """A selectable main category from master data."""

    id: str
    name: str
