from __future__ import annotations

import random
from collections.abc import Callable, Iterable

from materials_explorer.domain.facets import (
    BOOLEAN_FACETS,
    CATEGORICAL_FACETS,
    RANGE_FACETS,
    FacetState,
)
from materials_explorer.domain.material import MaterialRecord
from materials_explorer.domain.predicates import (
    Predicate,
    all_of,
    categorical_predicate,
    metal_predicate,
    range_predicate,
    text_predicate,
    toggle_predicate,
)


class FilterEngine:
    """
    Composes active facet predicates and applies them to the catalog.

    - AND semantics across facets
    - Stable: matches keep catalog order, nothing is re-sorted
    - Pure: same (catalog, facet_state) always gives the same result
    - Facets at their default contribute no predicate
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def build_predicates(self, facet_state: FacetState) -> list[Predicate]:
        predicates: list[Predicate] = []

        if not facet_state.is_default("query"):
            predicates.append(text_predicate(facet_state.query))

        for spec in RANGE_FACETS:
            if not facet_state.is_default(spec.name):
                predicates.append(range_predicate(spec, facet_state.ranges[spec.name]))

        for name, accessor in CATEGORICAL_FACETS.items():
            if not facet_state.is_default(name):
                predicates.append(categorical_predicate(name, accessor, facet_state.categorical[name]))

        for name, flag in BOOLEAN_FACETS.items():
            if not facet_state.is_default(name):
                predicates.append(toggle_predicate(name, flag, facet_state.toggles[name]))

        if not facet_state.is_default("metal"):
            predicates.append(metal_predicate(facet_state.metal))

        return predicates

    def evaluate(
        self, catalog: Iterable[MaterialRecord], facet_state: FacetState
    ) -> list[MaterialRecord]:
        matches = all_of(self.build_predicates(facet_state))
        return [record for record in catalog if matches(record)]

    def pick_random(self, catalog: tuple[MaterialRecord, ...] | list[MaterialRecord]) -> MaterialRecord | None:
        """Uniform pick over the whole, unfiltered catalog; None only when it is empty."""
        if not catalog:
            return None
        return catalog[self._rng.randrange(len(catalog))]

    def crystal_systems(self, catalog: Iterable[MaterialRecord]) -> list[str]:
        return distinct_values(catalog, CATEGORICAL_FACETS["crystal_system"])

    def validation_statuses(self, catalog: Iterable[MaterialRecord]) -> list[str]:
        return distinct_values(catalog, CATEGORICAL_FACETS["validation_status"])


def distinct_values(
    catalog: Iterable[MaterialRecord], accessor: Callable[[MaterialRecord], str | None]
) -> list[str]:
    """Distinct non-missing values, sorted ascending."""
    return sorted({value for value in map(accessor, catalog) if value is not None})
