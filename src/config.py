from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.enums.listing_kind import ListingKind


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Remote listing API (WorkHorizon backend)
    listing_api_url: str = "http://localhost:5000/api"
    listing_api_key: str | None = None
    listing_kind: ListingKind = ListingKind.SERVICES
    request_timeout_seconds: float = 10.0

    # Pagination
    items_per_page: int = 12
    page_window_full_threshold: int = 7
    page_window_neighbours: int = 2

    log_level: str = "INFO"


settings = Settings()
