from pydantic import BaseModel, Field


class SymmetryDTO(BaseModel):
    crystal_system: str
    point_group: str | None = None
    space_group_symbol: str | None = None
    space_group_number: int | None = None


class ElasticityDTO(BaseModel):
    fitting_method: str
    bulk_modulus_vrh: float | None = Field(default=None, description="GPa, null if unmeasured")
    shear_modulus_vrh: float | None = Field(default=None, description="GPa, null if unmeasured")
    young_modulus_vrh: float | None = Field(default=None, description="GPa, null if unmeasured")


class ValidationReportDTO(BaseModel):
    status: str
    relax_converged: bool
    scf_converged: bool
    has_elastic_outputs: bool
    dft_bulk_modulus: float | None = None
    dft_shear_modulus: float | None = None
    dft_young_modulus: float | None = None
    dft_poisson_ratio: float | None = None
    dft_anisotropy: float | None = None


class MaterialDetailDTO(BaseModel):
    """Everything known about one material (expanded card or detail page)."""

    id: str
    formula: str
    elements: list[str]
    chemical_system: str
    density: float
    volume: float
    site_count: int
    symmetry: SymmetryDTO
    universal_anisotropy: float
    homogeneous_poisson: float
    elasticity: ElasticityDTO | None = None
    validation: ValidationReportDTO | None = None
    band_gap: float | None = None
    formation_energy_per_atom: float | None = None
    is_stable: bool | None = None
    is_metal: bool | None = None


class MaterialCardDTO(BaseModel):
    """Collapsed result card; `detail` is filled only when the card is expanded."""

    id: str
    formula: str
    elements: list[str]
    crystal_system: str
    density: float
    band_gap: float | None = None
    is_stable: bool | None = None
    is_metal: bool | None = None
    expanded: bool = False
    detail: MaterialDetailDTO | None = None
