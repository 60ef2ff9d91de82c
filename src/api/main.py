"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import categories, health, search
from src.config import settings

logger = structlog.get_logger(__name__)


def configure_logging(level: str = settings.log_level) -> None:
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    configure_logging()
    logger.info("listing_search_starting", listing_kind=settings.listing_kind.value)
    yield
    logger.info("listing_search_stopping")


def create_app() -> FastAPI:
    app = FastAPI(
        title="WorkHorizon Listing Search",
        description="Search-state reconciliation and pagination for job and service listings.",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(search.router)
    app.include_router(categories.router)

    return app


app = create_app()
