from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from materials_explorer.entrypoints.http.dependencies import load_catalog_from_config
from materials_explorer.entrypoints.http.exception_handlers import register_exception_handlers
from materials_explorer.entrypoints.http.routes.health import router as health_router
from materials_explorer.entrypoints.http.routes.materials import router as materials_router
from materials_explorer.entrypoints.http.routes.sessions import router as sessions_router
from materials_explorer.entrypoints.http.sessions import SessionRegistry
from materials_explorer.infra.config import random_seed, result_window_size
from materials_explorer.ports.catalog_loader import CatalogLoader
from materials_explorer.use_cases.load_catalog import LoadCatalog

logger = logging.getLogger(__name__)


def build_app(
    catalog_loader: CatalogLoader | None = None,
    window_size: int | None = None,
    seed: int | None = None,
) -> FastAPI:
    """
    Build the API.

    The catalog is loaded once when the app starts; a LoadError aborts
    startup. Without an explicit loader, the source comes from configuration.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if catalog_loader is not None:
            catalog = LoadCatalog(catalog_loader).execute()
        else:
            catalog = load_catalog_from_config()

        app.state.catalog = catalog
        app.state.sessions = SessionRegistry(
            catalog,
            window_size=window_size or result_window_size(),
            seed=seed if seed is not None else random_seed(),
        )
        logger.info("Materials explorer ready", extra={"records": len(catalog)})
        yield

    app = FastAPI(
        title="Materials Explorer API",
        description="""
        Explore a pre-computed catalog of materials and their elastic properties.

        ## Features
        - Free-text search over ids, formulas, chemical systems and elements
        - Range, categorical and toggle facets (AND semantics)
        - "Feeling lucky" random pick over the whole catalog
        - Progressive disclosure of per-material detail

        ## Sessions
        Facet state lives in an explorer session held in memory. It is never
        persisted and is lost when the process restarts.

        ## Missing data
        Materials without a measured value always pass a range filter on it.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=lifespan,
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(materials_router, prefix="/v1")
    app.include_router(sessions_router, prefix="/v1")

    return app


app = build_app()
