from fastapi import APIRouter, Depends

from materials_explorer.domain.catalog import CatalogStore
from materials_explorer.entrypoints.http.dependencies import (
    get_catalog,
    get_get_material_by_id_use_case,
)
from materials_explorer.entrypoints.http.dtos.materials import MaterialDetailDTO
from materials_explorer.entrypoints.http.dtos.session import FacetCatalogDTO
from materials_explorer.entrypoints.http.error_responses import ErrorResponse
from materials_explorer.entrypoints.http.mappers.material_mapper import MaterialMapper
from materials_explorer.entrypoints.http.mappers.session_mapper import SessionMapper
from materials_explorer.use_cases.filter_catalog import FilterEngine
from materials_explorer.use_cases.get_material_by_id import GetMaterialById, GetMaterialByIdRequest


router = APIRouter(tags=["Materials"])


@router.get(
    "/facets",
    response_model=FacetCatalogDTO,
    summary="Facet definitions",
    description="""
    Range facet bounds, steps and display precision, plus the distinct
    categorical values present in the catalog (sorted ascending).
    """,
)
def get_facets(catalog: CatalogStore = Depends(get_catalog)) -> FacetCatalogDTO:
    engine = FilterEngine()
    return SessionMapper.to_facet_catalog(
        {
            "crystal_system": engine.crystal_systems(catalog),
            "validation_status": engine.validation_statuses(catalog),
        }
    )


@router.get(
    "/materials/{material_id}",
    response_model=MaterialDetailDTO,
    summary="Get material detail",
    description="""
    Full detail of one material, including elastic properties and the DFT
    validation report when they were computed.

    Unmeasured values are returned as null, never as zero.
    """,
    responses={
        404: {"model": ErrorResponse, "description": "Material not found"},
    },
)
def get_material(
    material_id: str,
    use_case: GetMaterialById = Depends(get_get_material_by_id_use_case),
) -> MaterialDetailDTO:
    """Material detail endpoint following parse → execute → map → return pattern."""
    result = use_case.execute(GetMaterialByIdRequest(material_id=material_id))
    return MaterialMapper.to_detail(result.material)
