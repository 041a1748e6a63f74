from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from materials_explorer.domain.catalog import CatalogStore
from materials_explorer.domain.material import (
    Elasticity,
    MaterialRecord,
    Symmetry,
    ValidationReport,
    ValidationStatus,
    chemical_system_of,
)

MaterialFactory = Callable[..., MaterialRecord]


def build_material(material_id: str = "mp-1", **overrides: Any) -> MaterialRecord:
    """A valid record with every required field; override what the test cares about."""
    elements = tuple(overrides.pop("elements", ("Fe", "O")))
    fields: dict[str, Any] = {
        "id": material_id,
        "display_formula": "Fe2O3",
        "elements": elements,
        "chemical_system": chemical_system_of(elements),
        "density": 5.0,
        "volume": 100.0,
        "site_count": 10,
        "symmetry": Symmetry(crystal_system="trigonal", space_group_symbol="R-3c", space_group_number=167),
        "universal_anisotropy": 0.5,
        "homogeneous_poisson": 0.25,
        "elasticity": None,
        "validation": None,
    }
    fields.update(overrides)
    return MaterialRecord(**fields)


@pytest.fixture()
def make_material() -> MaterialFactory:
    return build_material


@pytest.fixture()
def materials() -> list[MaterialRecord]:
    """Small catalog mixing measured, unmeasured and partially measured records."""
    return [
        build_material(
            "mp-19770",
            display_formula="Fe2O3",
            elements=("Fe", "O"),
            density=5.2,
            symmetry=Symmetry(crystal_system="trigonal"),
            elasticity=Elasticity(
                fitting_method="finite_difference",
                bulk_modulus_vrh=200.0,
                shear_modulus_vrh=90.0,
                young_modulus_vrh=235.0,
            ),
            validation=ValidationReport(
                status=ValidationStatus.PASSED,
                relax_converged=True,
                scf_converged=True,
                has_elastic_outputs=True,
                dft_bulk_modulus=198.0,
            ),
            band_gap=2.1,
            is_stable=True,
            is_metal=False,
        ),
        build_material(
            "mp-149",
            display_formula="Si",
            elements=("Si",),
            density=2.3,
            symmetry=Symmetry(crystal_system="cubic"),
            elasticity=Elasticity(fitting_method="stress_strain", bulk_modulus_vrh=88.0),
            band_gap=0.6,
            is_stable=True,
            is_metal=False,
        ),
        build_material(
            "mp-13",
            display_formula="Fe",
            elements=("Fe",),
            density=7.9,
            symmetry=Symmetry(crystal_system="cubic"),
            elasticity=None,
            validation=ValidationReport(
                status=ValidationStatus.WARNING,
                relax_converged=True,
                scf_converged=False,
                has_elastic_outputs=False,
            ),
            band_gap=0.0,
            is_stable=True,
            is_metal=True,
        ),
        build_material(
            "mp-2657",
            display_formula="TiO2",
            elements=("Ti", "O"),
            density=4.2,
            symmetry=Symmetry(crystal_system="tetragonal"),
            elasticity=Elasticity(
                fitting_method="finite_difference",
                bulk_modulus_vrh=0.0,
                shear_modulus_vrh=110.0,
            ),
            is_stable=False,
            is_metal=None,
        ),
    ]


@pytest.fixture()
def catalog(materials: list[MaterialRecord]) -> CatalogStore:
    return CatalogStore(materials)
