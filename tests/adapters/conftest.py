from __future__ import annotations

from typing import Any

import pytest


def build_raw_record(material_id: str = "mp-19770", **overrides: Any) -> dict[str, Any]:
    """One catalog record in export format."""
    raw: dict[str, Any] = {
        "material_id": material_id,
        "formula_pretty": "Fe2O3",
        "elements": ["Fe", "O"],
        "chemsys": "Fe-O",
        "density": 5.2,
        "volume": 302.3,
        "nsites": 30,
        "symmetry": {
            "crystal_system": "Trigonal",
            "point_group": "-3m",
            "symbol": "R-3c",
            "number": 167,
        },
        "universal_anisotropy": 0.41,
        "homogeneous_poisson": 0.27,
        "elasticity": {
            "fitting_method": "finite_difference",
            "bulk_modulus": {"voigt": 205.0, "reuss": 195.0, "vrh": 200.0},
            "shear_modulus": {"vrh": 90.0},
            "young_modulus": None,
        },
        "validation": {
            "status": "passed",
            "relax_converged": True,
            "scf_converged": True,
            "has_elastic_outputs": True,
            "dft_bulk_modulus": 198.4,
        },
        "band_gap": 2.1,
        "formation_energy_per_atom": -1.7,
        "is_stable": True,
        "is_metal": False,
    }
    raw.update(overrides)
    return raw


@pytest.fixture()
def raw_record() -> dict[str, Any]:
    return build_raw_record()


@pytest.fixture()
def make_raw_record():
    return build_raw_record
