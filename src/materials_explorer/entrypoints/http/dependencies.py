"""
Dependency injection for FastAPI routes.

Key principle: the catalog and the session registry are built once per app
(in the lifespan hook) and read from app.state; use cases are created per request.
"""

from __future__ import annotations

from fastapi import Depends, Request

from materials_explorer.adapters.json_catalog_loader import JsonCatalogLoader
from materials_explorer.adapters.sql_catalog_loader import SqlCatalogLoader
from materials_explorer.domain.catalog import CatalogStore
from materials_explorer.entrypoints.http.sessions import SessionRegistry
from materials_explorer.infra.config import catalog_path
from materials_explorer.infra.db.session import get_session
from materials_explorer.use_cases.get_material_by_id import GetMaterialById
from materials_explorer.use_cases.load_catalog import LoadCatalog


def load_catalog_from_config() -> CatalogStore:
    """
    Load the catalog from the configured source.

    MATERIALS_CATALOG_PATH wins when set; otherwise the `materials` table at
    DATABASE_URL is read.

    Raises:
        LoadError: If the catalog is malformed
        RuntimeError: If no source is configured
    """
    path = catalog_path()
    if path:
        return LoadCatalog(JsonCatalogLoader(path)).execute()

    with get_session() as session:
        return LoadCatalog(SqlCatalogLoader(session)).execute()


def get_catalog(request: Request) -> CatalogStore:
    return request.app.state.catalog


def get_session_registry(request: Request) -> SessionRegistry:
    return request.app.state.sessions


def get_get_material_by_id_use_case(
    catalog: CatalogStore = Depends(get_catalog),
) -> GetMaterialById:
    """
    Factory function that returns a configured GetMaterialById use case.

    Args:
        catalog: Shared read-only catalog (injected by FastAPI)

    Returns:
        GetMaterialById: Configured use case instance
    """
    return GetMaterialById(catalog=catalog)
