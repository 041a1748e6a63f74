from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ValidationStatus(str, Enum):
    """Outcome of the DFT cross-check run against a record's elastic data."""

    PASSED = "passed"
    WARNING = "warning"
    FAILED = "failed"
    NOT_RUN = "not_run"


@dataclass(frozen=True, slots=True)
class Symmetry:
    crystal_system: str
    point_group: str | None = None
    space_group_symbol: str | None = None
    space_group_number: int | None = None


@dataclass(frozen=True, slots=True)
class Elasticity:
    """Voigt-Reuss-Hill averaged moduli in GPa.

    Each modulus is independently optional: None means unmeasured, not zero.
    """

    fitting_method: str
    bulk_modulus_vrh: float | None = None
    shear_modulus_vrh: float | None = None
    young_modulus_vrh: float | None = None


@dataclass(frozen=True, slots=True)
class ValidationReport:
    status: ValidationStatus
    relax_converged: bool
    scf_converged: bool
    has_elastic_outputs: bool
    dft_bulk_modulus: float | None = None
    dft_shear_modulus: float | None = None
    dft_young_modulus: float | None = None
    dft_poisson_ratio: float | None = None
    dft_anisotropy: float | None = None


@dataclass(frozen=True, slots=True)
class MaterialRecord:
    id: str
    display_formula: str
    elements: tuple[str, ...]
    chemical_system: str
    density: float
    volume: float
    site_count: int
    symmetry: Symmetry
    universal_anisotropy: float
    homogeneous_poisson: float
    elasticity: Elasticity | None = None
    validation: ValidationReport | None = None
    band_gap: float | None = None
    formation_energy_per_atom: float | None = None
    is_stable: bool | None = None
    is_metal: bool | None = None

    @property
    def crystal_system(self) -> str:
        return self.symmetry.crystal_system

    @property
    def validation_status(self) -> str | None:
        return self.validation.status.value if self.validation is not None else None


def chemical_system_of(elements: tuple[str, ...] | list[str]) -> str:
    """Grouping key for a composition, e.g. ("O", "Fe") -> "Fe-O"."""
    return "-".join(sorted(elements))
