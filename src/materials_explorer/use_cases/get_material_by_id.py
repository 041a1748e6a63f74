"""Get material by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from materials_explorer.domain.catalog import CatalogStore
from materials_explorer.domain.errors import NotFoundError, ValidationError
from materials_explorer.domain.material import MaterialRecord


@dataclass(frozen=True, slots=True)
class GetMaterialByIdRequest:
    """Request to get a material by ID."""

    material_id: str


@dataclass(frozen=True, slots=True)
class GetMaterialByIdResponse:
    """Response containing the requested material."""

    material: MaterialRecord


class GetMaterialById:
    """
    Use case for retrieving the full detail of a single material.

    Responsibilities:
    - Reject blank ids
    - Look the id up in the in-memory catalog
    - Raise NotFoundError if the material doesn't exist
    """

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def execute(self, request: GetMaterialByIdRequest) -> GetMaterialByIdResponse:
        """
        Raises:
            ValidationError: If material_id is blank
            NotFoundError: If no material has the given ID
        """
        if not request.material_id.strip():
            raise ValidationError(
                errors=[
                    {
                        "field": "material_id",
                        "message": "Must not be blank",
                        "code": "BLANK_ID",
                    }
                ]
            )

        material = self._catalog.get(request.material_id)

        if material is None:
            raise NotFoundError(resource="Material", identifier=request.material_id)

        return GetMaterialByIdResponse(material=material)
