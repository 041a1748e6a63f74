"""Presentation boundary of the explorer core.

One ExplorerSession per user: it owns the facet state, one range control per
numeric facet and the result presenter, and exposes read-only views plus named
action hooks. Every action runs to completion before the next one starts.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass

from materials_explorer.domain.catalog import CatalogStore
from materials_explorer.domain.errors import NotFoundError, ValidationError
from materials_explorer.domain.facets import (
    ALL,
    BOOLEAN_FACETS,
    CATEGORICAL_FACETS,
    RANGE_FACETS,
    Endpoint,
    FacetState,
    MetalFilter,
    NumericRange,
    range_facet,
)
from materials_explorer.domain.material import MaterialRecord
from materials_explorer.domain.range_control import CommitListener, RangeControl
from materials_explorer.use_cases.filter_catalog import FilterEngine
from materials_explorer.use_cases.result_presenter import ResultPresenter, ResultView

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RangeControlView:
    name: str
    committed: NumericRange
    lower_text: str
    upper_text: str
    lower_editing: bool
    upper_editing: bool


class ExplorerSession:
    def __init__(self, catalog: CatalogStore, engine: FilterEngine, window_size: int) -> None:
        self._catalog = catalog
        self._engine = engine
        self._facets = FacetState()
        self._presenter = ResultPresenter(window_size)
        self._ranges: dict[str, RangeControl] = {
            spec.name: RangeControl(spec, on_commit=self._range_listener(spec.name))
            for spec in RANGE_FACETS
        }
        # Derived once per catalog load
        self._categorical_values: dict[str, list[str]] = {
            "crystal_system": engine.crystal_systems(catalog),
            "validation_status": engine.validation_statuses(catalog),
        }

    # ==========================================================================
    # Read access
    # ==========================================================================

    def view(self) -> ResultView:
        return self._presenter.view()

    def facet_state(self) -> FacetState:
        """Copy of the current facet values; mutating it has no effect."""
        return copy.deepcopy(self._facets)

    def categorical_values(self, name: str) -> list[str]:
        self._require_categorical(name)
        return list(self._categorical_values[name])

    def range_view(self, name: str) -> RangeControlView:
        control = self._range(name)
        return RangeControlView(
            name=name,
            committed=control.committed,
            lower_text=control.display_text(Endpoint.LOWER),
            upper_text=control.display_text(Endpoint.UPPER),
            lower_editing=control.is_editing(Endpoint.LOWER),
            upper_editing=control.is_editing(Endpoint.UPPER),
        )

    def range_views(self) -> list[RangeControlView]:
        return [self.range_view(spec.name) for spec in RANGE_FACETS]

    def is_expanded(self, material_id: str) -> bool:
        return self._presenter.is_expanded(material_id)

    # ==========================================================================
    # Facet actions
    # ==========================================================================

    def update_text_facet(self, query: str) -> None:
        if query == self._facets.query:
            return
        self._facets.query = query
        self._refilter()

    def set_range_drag(self, name: str, pair: tuple[float, float]) -> None:
        self._range(name).set_drag_value(pair)

    def focus_range_text(self, name: str, endpoint: Endpoint) -> None:
        self._range(name).focus(endpoint)

    def set_range_text(self, name: str, endpoint: Endpoint, raw: str) -> None:
        self._range(name).set_text(endpoint, raw)

    def commit_range_text(self, name: str, endpoint: Endpoint) -> bool:
        return self._range(name).commit_text(endpoint)

    def update_categorical_facet(self, name: str, value: str) -> None:
        self._require_categorical(name)
        if value != ALL and value not in self._categorical_values[name]:
            raise ValidationError(
                errors=[
                    {
                        "field": name,
                        "message": f"'{value}' is not a value of this catalog",
                        "code": "UNKNOWN_VALUE",
                    }
                ]
            )
        if self._facets.categorical[name] == value:
            return
        self._facets.categorical[name] = value
        self._refilter()

    def toggle_boolean_facet(self, name: str) -> bool:
        if name not in BOOLEAN_FACETS:
            raise ValidationError(
                errors=[{"field": "facet", "message": f"Unknown toggle '{name}'", "code": "UNKNOWN_FACET"}]
            )
        self._facets.toggles[name] = not self._facets.toggles[name]
        self._refilter()
        return self._facets.toggles[name]

    def update_metal_facet(self, selected: MetalFilter) -> None:
        if self._facets.metal is selected:
            return
        self._facets.metal = selected
        self._refilter()

    def reset_facet(self, name: str) -> None:
        if name in self._ranges:
            # The control's commit listener refilters
            self._ranges[name].reset()
            return
        if self._facets.is_default(name):
            return
        self._facets.reset(name)
        self._refilter()

    # ==========================================================================
    # Presentation actions
    # ==========================================================================

    def trigger_search(self) -> None:
        self._refilter()

    def pick_random(self) -> MaterialRecord | None:
        record = self._engine.pick_random(self._catalog.records)
        if record is not None:
            self._presenter.show_random(record)
        return record

    def toggle_expanded(self, material_id: str) -> bool:
        if material_id not in self._catalog:
            raise NotFoundError(resource="Material", identifier=material_id)
        return self._presenter.toggle_expanded(material_id)

    def expand_result_window(self) -> None:
        self._presenter.expand_window()

    # ==========================================================================
    # Internals
    # ==========================================================================

    def _range_listener(self, name: str) -> CommitListener:
        def on_commit(committed: NumericRange) -> None:
            self._facets.ranges[name] = committed
            self._refilter()

        return on_commit

    def _range(self, name: str) -> RangeControl:
        return self._ranges[range_facet(name).name]

    def _require_categorical(self, name: str) -> None:
        if name not in CATEGORICAL_FACETS:
            raise ValidationError(
                errors=[
                    {"field": "facet", "message": f"Unknown categorical facet '{name}'", "code": "UNKNOWN_FACET"}
                ]
            )

    def _refilter(self) -> None:
        results = self._engine.evaluate(self._catalog, self._facets)
        self._presenter.show_results(results, constrained=not self._facets.is_unconstrained())
        logger.debug(
            "Catalog filtered",
            extra={"matches": len(results), "catalog": len(self._catalog)},
        )
