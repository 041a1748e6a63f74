"""Facet definitions and the mutable facet state of one explorer session."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, IntEnum

from materials_explorer.domain.errors import ValidationError
from materials_explorer.domain.material import MaterialRecord

ALL = "all"


class Endpoint(IntEnum):
    LOWER = 0
    UPPER = 1

    @classmethod
    def parse(cls, value: str) -> Endpoint:
        try:
            return cls[value.upper()]
        except KeyError:
            raise ValidationError(
                errors=[
                    {
                        "field": "endpoint",
                        "message": "Must be 'lower' or 'upper'",
                        "code": "INVALID_ENDPOINT",
                    }
                ]
            ) from None


class MetalFilter(str, Enum):
    ANY = "any"
    METAL = "metal"
    NON_METAL = "non_metal"


@dataclass(frozen=True, slots=True)
class NumericRange:
    lower: float
    upper: float

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper

    def as_tuple(self) -> tuple[float, float]:
        return (self.lower, self.upper)


@dataclass(frozen=True, slots=True)
class RangeFacetSpec:
    """Static configuration of one numeric facet.

    `optional` marks facets whose field may be absent on a record; absent
    values always pass the range test.
    """

    name: str
    label: str
    unit: str
    minimum: float
    maximum: float
    step: float
    decimals: int
    accessor: Callable[[MaterialRecord], float | None]
    optional: bool = False

    @property
    def full_span(self) -> NumericRange:
        return NumericRange(self.minimum, self.maximum)

    def format(self, value: float) -> str:
        """Display form of a committed value; the only formatter for this facet."""
        return f"{value:.{self.decimals}f}"


def _bulk_modulus(record: MaterialRecord) -> float | None:
    return record.elasticity.bulk_modulus_vrh if record.elasticity is not None else None


def _shear_modulus(record: MaterialRecord) -> float | None:
    return record.elasticity.shear_modulus_vrh if record.elasticity is not None else None


def _young_modulus(record: MaterialRecord) -> float | None:
    return record.elasticity.young_modulus_vrh if record.elasticity is not None else None


RANGE_FACETS: tuple[RangeFacetSpec, ...] = (
    RangeFacetSpec(
        name="density",
        label="Density",
        unit="g/cm³",
        minimum=0.0,
        maximum=20.0,
        step=0.5,
        decimals=1,
        accessor=lambda record: record.density,
    ),
    RangeFacetSpec(
        name="volume",
        label="Volume",
        unit="Å³",
        minimum=0.0,
        maximum=2000.0,
        step=10.0,
        decimals=0,
        accessor=lambda record: record.volume,
    ),
    RangeFacetSpec(
        name="site_count",
        label="Sites",
        unit="",
        minimum=0.0,
        maximum=200.0,
        step=1.0,
        decimals=0,
        accessor=lambda record: record.site_count,
    ),
    RangeFacetSpec(
        name="bulk_modulus",
        label="Bulk modulus (VRH)",
        unit="GPa",
        minimum=0.0,
        maximum=600.0,
        step=5.0,
        decimals=0,
        accessor=_bulk_modulus,
        optional=True,
    ),
    RangeFacetSpec(
        name="shear_modulus",
        label="Shear modulus (VRH)",
        unit="GPa",
        minimum=0.0,
        maximum=400.0,
        step=5.0,
        decimals=0,
        accessor=_shear_modulus,
        optional=True,
    ),
    RangeFacetSpec(
        name="young_modulus",
        label="Young's modulus (VRH)",
        unit="GPa",
        minimum=0.0,
        maximum=1000.0,
        step=10.0,
        decimals=0,
        accessor=_young_modulus,
        optional=True,
    ),
    RangeFacetSpec(
        name="poisson_ratio",
        label="Poisson ratio",
        unit="",
        minimum=-1.0,
        maximum=0.5,
        step=0.01,
        decimals=2,
        accessor=lambda record: record.homogeneous_poisson,
    ),
    RangeFacetSpec(
        name="universal_anisotropy",
        label="Universal anisotropy",
        unit="",
        minimum=0.0,
        maximum=50.0,
        step=0.5,
        decimals=1,
        accessor=lambda record: record.universal_anisotropy,
    ),
    RangeFacetSpec(
        name="band_gap",
        label="Band gap",
        unit="eV",
        minimum=0.0,
        maximum=10.0,
        step=0.1,
        decimals=1,
        accessor=lambda record: record.band_gap,
        optional=True,
    ),
)

RANGE_FACETS_BY_NAME: dict[str, RangeFacetSpec] = {spec.name: spec for spec in RANGE_FACETS}

# Categorical facet name -> record field accessor
CATEGORICAL_FACETS: dict[str, Callable[[MaterialRecord], str | None]] = {
    "crystal_system": lambda record: record.crystal_system,
    "validation_status": lambda record: record.validation_status,
}

BOOLEAN_FACETS: dict[str, Callable[[MaterialRecord], bool | None]] = {
    "stable_only": lambda record: record.is_stable,
}

TEXT_FACET = "query"
METAL_FACET = "metal"


def range_facet(name: str) -> RangeFacetSpec:
    try:
        return RANGE_FACETS_BY_NAME[name]
    except KeyError:
        raise ValidationError(
            errors=[{"field": "facet", "message": f"Unknown range facet '{name}'", "code": "UNKNOWN_FACET"}]
        ) from None


def all_facet_names() -> list[str]:
    return [
        TEXT_FACET,
        *RANGE_FACETS_BY_NAME,
        *CATEGORICAL_FACETS,
        *BOOLEAN_FACETS,
        METAL_FACET,
    ]


@dataclass(slots=True)
class FacetState:
    """Current value of every facet.

    Mutated only by the owning session's facet operations. `ranges` holds
    committed ranges only; uncommitted text lives in the range controls.
    """

    query: str = ""
    ranges: dict[str, NumericRange] = field(
        default_factory=lambda: {spec.name: spec.full_span for spec in RANGE_FACETS}
    )
    categorical: dict[str, str] = field(default_factory=lambda: {name: ALL for name in CATEGORICAL_FACETS})
    toggles: dict[str, bool] = field(default_factory=lambda: {name: False for name in BOOLEAN_FACETS})
    metal: MetalFilter = MetalFilter.ANY

    def is_default(self, name: str) -> bool:
        if name == TEXT_FACET:
            return not self.query.strip()
        if name in self.ranges:
            return self.ranges[name] == RANGE_FACETS_BY_NAME[name].full_span
        if name in self.categorical:
            return self.categorical[name] == ALL
        if name in self.toggles:
            return not self.toggles[name]
        if name == METAL_FACET:
            return self.metal is MetalFilter.ANY
        raise ValidationError(
            errors=[{"field": "facet", "message": f"Unknown facet '{name}'", "code": "UNKNOWN_FACET"}]
        )

    def is_unconstrained(self) -> bool:
        return all(self.is_default(name) for name in all_facet_names())

    def reset(self, name: str) -> None:
        if name == TEXT_FACET:
            self.query = ""
        elif name in self.ranges:
            self.ranges[name] = RANGE_FACETS_BY_NAME[name].full_span
        elif name in self.categorical:
            self.categorical[name] = ALL
        elif name in self.toggles:
            self.toggles[name] = False
        elif name == METAL_FACET:
            self.metal = MetalFilter.ANY
        else:
            raise ValidationError(
                errors=[{"field": "facet", "message": f"Unknown facet '{name}'", "code": "UNKNOWN_FACET"}]
            )
