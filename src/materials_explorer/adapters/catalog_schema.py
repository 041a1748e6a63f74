"""Pydantic schema for raw catalog records.

Shared by every catalog source so that JSON files and database rows go through
the same validation. Values are never coerced across types: "7.2" is not a
density, 3.0 is not a site count, "true" is not a flag.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)
from pydantic import ValidationError as PydanticValidationError

from materials_explorer.domain.errors import LoadError
from materials_explorer.domain.material import (
    Elasticity,
    MaterialRecord,
    Symmetry,
    ValidationReport,
    ValidationStatus,
    chemical_system_of,
)


def _reject_non_numeric(value: Any) -> Any:
    # bool is an int subclass; neither it nor numeric strings count as numbers
    if isinstance(value, (str, bool)):
        raise ValueError("Input should be a number")
    return value


Number = Annotated[float, BeforeValidator(_reject_non_numeric), Field(allow_inf_nan=False)]


class _Schema(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class SymmetrySchema(_Schema):
    crystal_system: StrictStr = Field(min_length=1)
    point_group: StrictStr | None = None
    symbol: StrictStr | None = None
    number: StrictInt | None = Field(default=None, ge=1, le=230)


class ModulusSchema(_Schema):
    voigt: Number | None = None
    reuss: Number | None = None
    vrh: Number | None = None


class ElasticitySchema(_Schema):
    fitting_method: StrictStr
    bulk_modulus: ModulusSchema | None = None
    shear_modulus: ModulusSchema | None = None
    young_modulus: ModulusSchema | None = None


class ValidationSchema(_Schema):
    status: Literal["passed", "warning", "failed", "not_run"]
    relax_converged: StrictBool
    scf_converged: StrictBool
    has_elastic_outputs: StrictBool
    dft_bulk_modulus: Number | None = None
    dft_shear_modulus: Number | None = None
    dft_young_modulus: Number | None = None
    dft_poisson_ratio: Number | None = None
    dft_anisotropy: Number | None = None


class MaterialRecordSchema(_Schema):
    material_id: StrictStr = Field(min_length=1)
    formula_pretty: StrictStr = Field(min_length=1)
    elements: list[StrictStr] = Field(min_length=1)
    chemsys: StrictStr | None = None
    density: Number
    volume: Number
    nsites: StrictInt = Field(ge=1)
    symmetry: SymmetrySchema
    universal_anisotropy: Number
    homogeneous_poisson: Number
    elasticity: ElasticitySchema | None = None
    validation: ValidationSchema | None = None
    band_gap: Number | None = None
    formation_energy_per_atom: Number | None = None
    is_stable: StrictBool | None = None
    is_metal: StrictBool | None = None

    @field_validator("elements")
    @classmethod
    def elements_are_unique(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            raise ValueError("elements must not repeat")
        return value

    @model_validator(mode="after")
    def chemsys_matches_elements(self) -> MaterialRecordSchema:
        if self.chemsys is not None and self.chemsys != chemical_system_of(self.elements):
            raise ValueError(f"chemsys '{self.chemsys}' does not match elements")
        return self

    def to_domain(self) -> MaterialRecord:
        elasticity = None
        if self.elasticity is not None:
            elasticity = Elasticity(
                fitting_method=self.elasticity.fitting_method,
                bulk_modulus_vrh=_vrh(self.elasticity.bulk_modulus),
                shear_modulus_vrh=_vrh(self.elasticity.shear_modulus),
                young_modulus_vrh=_vrh(self.elasticity.young_modulus),
            )

        validation = None
        if self.validation is not None:
            validation = ValidationReport(
                status=ValidationStatus(self.validation.status),
                relax_converged=self.validation.relax_converged,
                scf_converged=self.validation.scf_converged,
                has_elastic_outputs=self.validation.has_elastic_outputs,
                dft_bulk_modulus=self.validation.dft_bulk_modulus,
                dft_shear_modulus=self.validation.dft_shear_modulus,
                dft_young_modulus=self.validation.dft_young_modulus,
                dft_poisson_ratio=self.validation.dft_poisson_ratio,
                dft_anisotropy=self.validation.dft_anisotropy,
            )

        return MaterialRecord(
            id=self.material_id,
            display_formula=self.formula_pretty,
            elements=tuple(self.elements),
            chemical_system=self.chemsys or chemical_system_of(self.elements),
            density=self.density,
            volume=self.volume,
            site_count=self.nsites,
            symmetry=Symmetry(
                crystal_system=self.symmetry.crystal_system,
                point_group=self.symmetry.point_group,
                space_group_symbol=self.symmetry.symbol,
                space_group_number=self.symmetry.number,
            ),
            universal_anisotropy=self.universal_anisotropy,
            homogeneous_poisson=self.homogeneous_poisson,
            elasticity=elasticity,
            validation=validation,
            band_gap=self.band_gap,
            formation_energy_per_atom=self.formation_energy_per_atom,
            is_stable=self.is_stable,
            is_metal=self.is_metal,
        )


def _vrh(modulus: ModulusSchema | None) -> float | None:
    return modulus.vrh if modulus is not None else None


def parse_records(raw_records: Any) -> list[MaterialRecord]:
    """
    Validate raw records and convert them to domain records.

    Every record is checked before anything is returned so the caller sees
    all problems at once.

    Raises:
        LoadError: If the payload is not a list or any record is malformed
    """
    if not isinstance(raw_records, list):
        raise LoadError(
            errors=[{"field": "", "message": "Catalog must be a list of records", "code": "NOT_A_LIST"}]
        )

    records: list[MaterialRecord] = []
    errors: list[dict[str, str]] = []
    invalid_indexes: set[int] = set()

    for index, raw in enumerate(raw_records):
        try:
            records.append(MaterialRecordSchema.model_validate(raw).to_domain())
        except PydanticValidationError as exc:
            invalid_indexes.add(index)
            for error in exc.errors():
                # Model-level validators report an empty location
                field_path = ".".join(str(loc) for loc in error["loc"])
                errors.append(
                    {
                        "field": f"[{index}].{field_path}" if field_path else f"[{index}]",
                        "message": error["msg"],
                        "code": error["type"],
                    }
                )

    if errors:
        raise LoadError(
            "Catalog failed validation",
            errors=errors,
            invalid_records=len(invalid_indexes),
        )

    return records
