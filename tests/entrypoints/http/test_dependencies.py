"""
Unit tests for FastAPI dependency injection functions.

- load_catalog_from_config() picks the JSON file when configured, else the database
- get_catalog() / get_session_registry() read the objects built at startup
- get_get_material_by_id_use_case() wires the use case to the shared catalog
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

from materials_explorer.domain.catalog import CatalogStore
from materials_explorer.entrypoints.http.dependencies import (
    get_catalog,
    get_get_material_by_id_use_case,
    get_session_registry,
    load_catalog_from_config,
)
from materials_explorer.use_cases.get_material_by_id import GetMaterialById


# ==============================================================================
# load_catalog_from_config()
# ==============================================================================


def test_load_catalog_from_json_path(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([]), encoding="utf-8")

    with patch(
        "materials_explorer.entrypoints.http.dependencies.catalog_path",
        return_value=str(path),
    ), patch("materials_explorer.entrypoints.http.dependencies.get_session") as mock_get_session:
        catalog = load_catalog_from_config()

    assert isinstance(catalog, CatalogStore)
    assert len(catalog) == 0
    mock_get_session.assert_not_called()


def test_load_catalog_from_database_when_no_path(materials) -> None:
    mock_session = Mock()
    mock_context_manager = MagicMock()
    mock_context_manager.__enter__.return_value = mock_session
    mock_context_manager.__exit__.return_value = None

    with patch(
        "materials_explorer.entrypoints.http.dependencies.catalog_path", return_value=None
    ), patch(
        "materials_explorer.entrypoints.http.dependencies.get_session",
        return_value=mock_context_manager,
    ), patch(
        "materials_explorer.entrypoints.http.dependencies.SqlCatalogLoader"
    ) as mock_loader_class:
        mock_loader_class.return_value.load.return_value = materials

        catalog = load_catalog_from_config()

    mock_loader_class.assert_called_once_with(mock_session)
    assert len(catalog) == 4


# ==============================================================================
# app.state readers
# ==============================================================================


def test_get_catalog_reads_app_state(catalog: CatalogStore) -> None:
    request = Mock()
    request.app.state.catalog = catalog

    assert get_catalog(request) is catalog


def test_get_session_registry_reads_app_state() -> None:
    request = Mock()
    registry = Mock()
    request.app.state.sessions = registry

    assert get_session_registry(request) is registry


# ==============================================================================
# get_get_material_by_id_use_case()
# ==============================================================================


def test_get_material_by_id_use_case_is_wired_to_catalog(catalog: CatalogStore) -> None:
    use_case = get_get_material_by_id_use_case(catalog=catalog)

    assert isinstance(use_case, GetMaterialById)
    assert use_case._catalog is catalog


def test_get_material_by_id_use_case_is_fresh_per_call(catalog: CatalogStore) -> None:
    assert get_get_material_by_id_use_case(catalog=catalog) is not get_get_material_by_id_use_case(
        catalog=catalog
    )
