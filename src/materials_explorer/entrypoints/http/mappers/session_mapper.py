from __future__ import annotations

from materials_explorer.domain.facets import (
    BOOLEAN_FACETS,
    CATEGORICAL_FACETS,
    RANGE_FACETS,
    MetalFilter,
    RangeFacetSpec,
)
from materials_explorer.entrypoints.http.dtos.session import (
    FacetCatalogDTO,
    FacetValuesDTO,
    RangeControlDTO,
    RangeFacetDTO,
    SessionViewDTO,
)
from materials_explorer.entrypoints.http.mappers.material_mapper import MaterialMapper
from materials_explorer.use_cases.explorer_session import ExplorerSession, RangeControlView


class SessionMapper:
    """Maps explorer session state to REST DTOs."""

    @staticmethod
    def to_range_facet(spec: RangeFacetSpec) -> RangeFacetDTO:
        return RangeFacetDTO(
            name=spec.name,
            label=spec.label,
            unit=spec.unit,
            minimum=spec.minimum,
            maximum=spec.maximum,
            step=spec.step,
            decimals=spec.decimals,
            optional=spec.optional,
        )

    @staticmethod
    def to_facet_catalog(categorical: dict[str, list[str]]) -> FacetCatalogDTO:
        return FacetCatalogDTO(
            ranges=[SessionMapper.to_range_facet(spec) for spec in RANGE_FACETS],
            categorical=categorical,
            toggles=list(BOOLEAN_FACETS),
            metal_states=[state.value for state in MetalFilter],
        )

    @staticmethod
    def to_range_control(view: RangeControlView) -> RangeControlDTO:
        return RangeControlDTO(
            name=view.name,
            committed=view.committed.as_tuple(),
            lower_text=view.lower_text,
            upper_text=view.upper_text,
            lower_editing=view.lower_editing,
            upper_editing=view.upper_editing,
        )

    @staticmethod
    def to_response(session_id: str, session: ExplorerSession) -> SessionViewDTO:
        """
        Converts the session's current view to the REST response.

        Args:
            session_id: Registry key (echoed back)
            session: Session whose state is rendered

        Returns:
            SessionViewDTO: Results window, facet values and range displays
        """
        view = session.view()
        facets = session.facet_state()

        return SessionViewDTO(
            session_id=session_id,
            state=view.state.value,
            mode=view.mode.value,
            total=view.total_count,
            visible=view.visible_count,
            has_more=view.has_more,
            materials=[
                MaterialMapper.to_card(record, expanded=view.is_expanded(record.id))
                for record in view.records
            ],
            facets=FacetValuesDTO(
                query=facets.query,
                categorical=dict(facets.categorical),
                toggles=dict(facets.toggles),
                metal=facets.metal,
            ),
            ranges=[SessionMapper.to_range_control(range_view) for range_view in session.range_views()],
            categorical_values={name: session.categorical_values(name) for name in CATEGORICAL_FACETS},
        )
