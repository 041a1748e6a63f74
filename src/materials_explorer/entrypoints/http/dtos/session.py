from pydantic import BaseModel, Field

from materials_explorer.domain.facets import MetalFilter
from materials_explorer.entrypoints.http.dtos.materials import MaterialCardDTO


class RangeFacetDTO(BaseModel):
    name: str
    label: str
    unit: str
    minimum: float
    maximum: float
    step: float
    decimals: int
    optional: bool = Field(description="Records missing this field always pass the range filter")


class FacetCatalogDTO(BaseModel):
    ranges: list[RangeFacetDTO]
    categorical: dict[str, list[str]]
    toggles: list[str]
    metal_states: list[str]


class RangeControlDTO(BaseModel):
    name: str
    committed: tuple[float, float]
    lower_text: str
    upper_text: str
    lower_editing: bool
    upper_editing: bool


class FacetValuesDTO(BaseModel):
    query: str
    categorical: dict[str, str]
    toggles: dict[str, bool]
    metal: MetalFilter


class SessionViewDTO(BaseModel):
    session_id: str
    state: str = Field(description="empty | unconstrained | constrained")
    mode: str = Field(description="filtered | random")
    total: int
    visible: int
    has_more: bool
    materials: list[MaterialCardDTO]
    facets: FacetValuesDTO
    ranges: list[RangeControlDTO]
    categorical_values: dict[str, list[str]]


class QueryUpdateDTO(BaseModel):
    query: str = Field(
        default="",
        description="Matches id, formula or chemical system (substring) or an element symbol",
        examples=["Fe"],
        max_length=200,
    )


class RangeDragDTO(BaseModel):
    lower: float = Field(allow_inf_nan=False, examples=[2.5])
    upper: float = Field(allow_inf_nan=False, examples=[7.5])


class RangeTextDTO(BaseModel):
    raw: str = Field(description="Raw text as typed; may be transiently invalid", max_length=64)


class CategoricalUpdateDTO(BaseModel):
    value: str = Field(description="A catalog value or 'all'", examples=["cubic"])


class MetalUpdateDTO(BaseModel):
    state: MetalFilter
