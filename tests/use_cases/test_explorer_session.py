"""
Test suite for ExplorerSession.

Drives the session through its action hooks only and checks what a renderer
would see: the result view, range control views and facet state.
"""

from __future__ import annotations

import random

import pytest

from materials_explorer.domain.catalog import CatalogStore
from materials_explorer.domain.errors import NotFoundError, ValidationError
from materials_explorer.domain.facets import RANGE_FACETS, Endpoint, MetalFilter, NumericRange
from materials_explorer.use_cases.explorer_session import ExplorerSession
from materials_explorer.use_cases.filter_catalog import FilterEngine
from materials_explorer.use_cases.result_presenter import DisplayMode, PresenterState


@pytest.fixture()
def session(catalog: CatalogStore) -> ExplorerSession:
    return ExplorerSession(catalog, FilterEngine(rng=random.Random(0)), window_size=2)


def _ids(session: ExplorerSession) -> list[str]:
    return [record.id for record in session.view().records]


# ==============================================================================
# Initial State
# ==============================================================================


def test_new_session_shows_nothing(session: ExplorerSession) -> None:
    view = session.view()

    assert view.state is PresenterState.EMPTY
    assert view.records == []
    assert session.facet_state().is_unconstrained()


def test_trigger_search_shows_first_window(session: ExplorerSession) -> None:
    session.trigger_search()

    view = session.view()
    assert view.state is PresenterState.UNCONSTRAINED
    assert _ids(session) == ["mp-19770", "mp-149"]
    assert view.total_count == 4
    assert view.has_more


def test_categorical_values_come_from_catalog(session: ExplorerSession) -> None:
    assert session.categorical_values("crystal_system") == ["cubic", "tetragonal", "trigonal"]
    assert session.categorical_values("validation_status") == ["passed", "warning"]


def test_every_range_facet_has_a_control(session: ExplorerSession) -> None:
    views = session.range_views()

    assert [view.name for view in views] == [spec.name for spec in RANGE_FACETS]
    density = session.range_view("density")
    assert density.committed == NumericRange(0.0, 20.0)
    assert (density.lower_text, density.upper_text) == ("0.0", "20.0")
    assert not density.lower_editing


def test_facet_state_is_a_copy(session: ExplorerSession) -> None:
    state = session.facet_state()
    state.query = "Fe"

    assert session.facet_state().query == ""


# ==============================================================================
# Text Facet
# ==============================================================================


def test_text_query_constrains_results(session: ExplorerSession) -> None:
    session.update_text_facet("Fe")

    assert session.view().state is PresenterState.CONSTRAINED
    assert _ids(session) == ["mp-19770", "mp-13"]


def test_clearing_query_returns_to_unconstrained(session: ExplorerSession) -> None:
    session.update_text_facet("Fe")
    session.update_text_facet("")

    assert session.view().state is PresenterState.UNCONSTRAINED
    assert session.view().total_count == 4


def test_unchanged_query_does_not_refilter(session: ExplorerSession) -> None:
    session.update_text_facet("")

    assert session.view().state is PresenterState.EMPTY


# ==============================================================================
# Range Facets
# ==============================================================================


def test_drag_commits_and_refilters(session: ExplorerSession) -> None:
    session.set_range_drag("density", (5.0, 10.0))

    assert session.facet_state().ranges["density"] == NumericRange(5.0, 10.0)
    assert _ids(session) == ["mp-19770", "mp-13"]


def test_typed_boundary_applies_on_commit_only(session: ExplorerSession) -> None:
    session.focus_range_text("density", Endpoint.LOWER)
    session.set_range_text("density", Endpoint.LOWER, "5")

    assert session.view().state is PresenterState.EMPTY
    assert session.range_view("density").lower_text == "5"
    assert session.range_view("density").lower_editing

    assert session.commit_range_text("density", Endpoint.LOWER) is True

    assert session.view().total_count == 2
    view = session.range_view("density")
    assert view.lower_text == "5.0"
    assert not view.lower_editing


def test_unparseable_boundary_is_discarded(session: ExplorerSession) -> None:
    session.focus_range_text("density", Endpoint.UPPER)
    session.set_range_text("density", Endpoint.UPPER, "heavy")

    assert session.commit_range_text("density", Endpoint.UPPER) is False

    assert session.view().state is PresenterState.EMPTY
    assert session.range_view("density").upper_text == "20.0"


def test_optional_range_keeps_unmeasured_records(session: ExplorerSession) -> None:
    session.set_range_drag("bulk_modulus", (100.0, 600.0))

    session.expand_result_window()
    assert _ids(session) == ["mp-19770", "mp-13"]


def test_unknown_range_facet_is_rejected(session: ExplorerSession) -> None:
    with pytest.raises(ValidationError):
        session.set_range_drag("hardness", (1.0, 2.0))


# ==============================================================================
# Categorical, Toggle and Metal Facets
# ==============================================================================


def test_categorical_selection(session: ExplorerSession) -> None:
    session.update_categorical_facet("crystal_system", "cubic")

    assert _ids(session) == ["mp-149", "mp-13"]


def test_categorical_value_must_exist_in_catalog(session: ExplorerSession) -> None:
    with pytest.raises(ValidationError) as exc_info:
        session.update_categorical_facet("crystal_system", "hexagonal")

    assert exc_info.value.errors[0]["code"] == "UNKNOWN_VALUE"


def test_unknown_categorical_facet_is_rejected(session: ExplorerSession) -> None:
    with pytest.raises(ValidationError):
        session.update_categorical_facet("space_group", "Fm-3m")


def test_toggle_flips_and_refilters(session: ExplorerSession) -> None:
    assert session.toggle_boolean_facet("stable_only") is True
    assert session.view().total_count == 3

    assert session.toggle_boolean_facet("stable_only") is False
    assert session.view().state is PresenterState.UNCONSTRAINED


def test_unknown_toggle_is_rejected(session: ExplorerSession) -> None:
    with pytest.raises(ValidationError):
        session.toggle_boolean_facet("theoretical")


def test_metal_facet(session: ExplorerSession) -> None:
    session.update_metal_facet(MetalFilter.METAL)

    assert _ids(session) == ["mp-13"]


# ==============================================================================
# Reset
# ==============================================================================


def test_reset_range_facet(session: ExplorerSession) -> None:
    session.set_range_drag("density", (5.0, 10.0))

    session.reset_facet("density")

    assert session.facet_state().is_unconstrained()
    assert session.range_view("density").committed == NumericRange(0.0, 20.0)
    assert session.view().state is PresenterState.UNCONSTRAINED


@pytest.mark.parametrize("facet", ["query", "crystal_system", "stable_only", "metal"])
def test_reset_non_range_facet(session: ExplorerSession, facet: str) -> None:
    session.update_text_facet("Fe")
    session.update_categorical_facet("crystal_system", "cubic")
    session.toggle_boolean_facet("stable_only")
    session.update_metal_facet(MetalFilter.METAL)

    session.reset_facet(facet)

    assert session.facet_state().is_default(facet)


def test_reset_default_facet_is_a_no_op(session: ExplorerSession) -> None:
    session.reset_facet("query")

    assert session.view().state is PresenterState.EMPTY


def test_reset_unknown_facet_is_rejected(session: ExplorerSession) -> None:
    with pytest.raises(ValidationError):
        session.reset_facet("hardness")


# ==============================================================================
# Random Pick, Window and Detail
# ==============================================================================


def test_pick_random_shows_one_record(session: ExplorerSession, catalog: CatalogStore) -> None:
    session.update_text_facet("Si")

    record = session.pick_random()

    assert record in catalog.records
    view = session.view()
    assert view.mode is DisplayMode.RANDOM
    assert view.records == [record]


def test_facet_change_ends_random_mode(session: ExplorerSession) -> None:
    session.pick_random()

    session.update_metal_facet(MetalFilter.NON_METAL)

    assert session.view().mode is DisplayMode.FILTERED
    assert _ids(session) == ["mp-19770", "mp-149"]


def test_pick_random_on_empty_catalog() -> None:
    session = ExplorerSession(CatalogStore([]), FilterEngine(), window_size=12)

    assert session.pick_random() is None
    assert session.view().state is PresenterState.EMPTY


def test_expand_result_window(session: ExplorerSession) -> None:
    session.trigger_search()

    session.expand_result_window()

    assert session.view().visible_count == 4
    assert not session.view().has_more


def test_toggle_expanded(session: ExplorerSession) -> None:
    session.trigger_search()

    assert session.toggle_expanded("mp-149") is True
    assert session.is_expanded("mp-149")
    assert session.view().is_expanded("mp-149")


def test_toggle_expanded_ignores_material_filtered_out(session: ExplorerSession) -> None:
    session.update_text_facet("Fe")

    assert session.toggle_expanded("mp-149") is False

    assert not session.is_expanded("mp-149")
    session.update_text_facet("")
    assert not session.view().is_expanded("mp-149")


def test_toggle_expanded_unknown_material(session: ExplorerSession) -> None:
    with pytest.raises(NotFoundError):
        session.toggle_expanded("mp-0")
