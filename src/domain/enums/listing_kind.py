from enum import Enum


class ListingKind(str, Enum):
    """Catalogs that can be searched."""

    JOBS = "jobs"
    SERVICES = "services"

    @property
    def path(self) -> str:
        return f"/{self.value}"
