"""Explorer session routes.

Each route runs exactly one session action and returns the resulting view, so
a client can re-render from the response alone.
"""

from fastapi import APIRouter, Depends, status

from materials_explorer.domain.facets import Endpoint
from materials_explorer.entrypoints.http.dependencies import get_session_registry
from materials_explorer.entrypoints.http.dtos.session import (
    CategoricalUpdateDTO,
    MetalUpdateDTO,
    QueryUpdateDTO,
    RangeDragDTO,
    RangeTextDTO,
    SessionViewDTO,
)
from materials_explorer.entrypoints.http.error_responses import ErrorResponse
from materials_explorer.entrypoints.http.mappers.session_mapper import SessionMapper
from materials_explorer.entrypoints.http.sessions import SessionRegistry


router = APIRouter(
    prefix="/sessions",
    tags=["Sessions"],
    responses={
        404: {"model": ErrorResponse, "description": "Session (or material) not found"},
        422: {"model": ErrorResponse, "description": "Unknown facet, endpoint or value"},
    },
)


@router.post(
    "",
    response_model=SessionViewDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Start an explorer session",
    description="New sessions start with every facet unconstrained and no list shown.",
)
def create_session(registry: SessionRegistry = Depends(get_session_registry)) -> SessionViewDTO:
    session_id = registry.create()
    with registry.acquire(session_id) as session:
        return SessionMapper.to_response(session_id, session)


@router.get("/{session_id}", response_model=SessionViewDTO, summary="Current session view")
def get_session_view(
    session_id: str, registry: SessionRegistry = Depends(get_session_registry)
) -> SessionViewDTO:
    with registry.acquire(session_id) as session:
        return SessionMapper.to_response(session_id, session)


# ==============================================================================
# Facet actions
# ==============================================================================


@router.put("/{session_id}/query", response_model=SessionViewDTO, summary="Set the text query")
def update_query(
    session_id: str,
    body: QueryUpdateDTO,
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionViewDTO:
    with registry.acquire(session_id) as session:
        session.update_text_facet(body.query)
        return SessionMapper.to_response(session_id, session)


@router.put(
    "/{session_id}/ranges/{facet}",
    response_model=SessionViewDTO,
    summary="Drag a range slider",
    description="Commits immediately; values are clamped, snapped to the facet step and pinned if crossed.",
)
def drag_range(
    session_id: str,
    facet: str,
    body: RangeDragDTO,
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionViewDTO:
    with registry.acquire(session_id) as session:
        session.set_range_drag(facet, (body.lower, body.upper))
        return SessionMapper.to_response(session_id, session)


@router.post(
    "/{session_id}/ranges/{facet}/{endpoint}/focus",
    response_model=SessionViewDTO,
    summary="Focus a range boundary field",
)
def focus_range_text(
    session_id: str,
    facet: str,
    endpoint: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionViewDTO:
    with registry.acquire(session_id) as session:
        session.focus_range_text(facet, Endpoint.parse(endpoint))
        return SessionMapper.to_response(session_id, session)


@router.put(
    "/{session_id}/ranges/{facet}/{endpoint}/text",
    response_model=SessionViewDTO,
    summary="Type into a range boundary field",
    description="Only the pending text changes; filtering is untouched until commit.",
)
def set_range_text(
    session_id: str,
    facet: str,
    endpoint: str,
    body: RangeTextDTO,
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionViewDTO:
    with registry.acquire(session_id) as session:
        session.set_range_text(facet, Endpoint.parse(endpoint), body.raw)
        return SessionMapper.to_response(session_id, session)


@router.post(
    "/{session_id}/ranges/{facet}/{endpoint}/commit",
    response_model=SessionViewDTO,
    summary="Commit a range boundary field (blur or confirm)",
    description="Unparsable text is discarded and the field reverts to the committed value.",
)
def commit_range_text(
    session_id: str,
    facet: str,
    endpoint: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionViewDTO:
    with registry.acquire(session_id) as session:
        session.commit_range_text(facet, Endpoint.parse(endpoint))
        return SessionMapper.to_response(session_id, session)


@router.put(
    "/{session_id}/categorical/{facet}",
    response_model=SessionViewDTO,
    summary="Select a categorical value",
)
def update_categorical(
    session_id: str,
    facet: str,
    body: CategoricalUpdateDTO,
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionViewDTO:
    with registry.acquire(session_id) as session:
        session.update_categorical_facet(facet, body.value)
        return SessionMapper.to_response(session_id, session)


@router.post("/{session_id}/toggles/{facet}", response_model=SessionViewDTO, summary="Flip a toggle")
def toggle_facet(
    session_id: str,
    facet: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionViewDTO:
    with registry.acquire(session_id) as session:
        session.toggle_boolean_facet(facet)
        return SessionMapper.to_response(session_id, session)


@router.put("/{session_id}/metal", response_model=SessionViewDTO, summary="Select metal / non-metal")
def update_metal(
    session_id: str,
    body: MetalUpdateDTO,
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionViewDTO:
    with registry.acquire(session_id) as session:
        session.update_metal_facet(body.state)
        return SessionMapper.to_response(session_id, session)


@router.delete(
    "/{session_id}/facets/{facet}",
    response_model=SessionViewDTO,
    summary="Return one facet to its default",
)
def reset_facet(
    session_id: str,
    facet: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionViewDTO:
    with registry.acquire(session_id) as session:
        session.reset_facet(facet)
        return SessionMapper.to_response(session_id, session)


# ==============================================================================
# Presentation actions
# ==============================================================================


@router.post("/{session_id}/search", response_model=SessionViewDTO, summary="Show filtered results")
def trigger_search(
    session_id: str, registry: SessionRegistry = Depends(get_session_registry)
) -> SessionViewDTO:
    with registry.acquire(session_id) as session:
        session.trigger_search()
        return SessionMapper.to_response(session_id, session)


@router.post(
    "/{session_id}/random",
    response_model=SessionViewDTO,
    summary="Feeling lucky",
    description="Picks one material uniformly from the whole catalog, ignoring filters.",
)
def pick_random(
    session_id: str, registry: SessionRegistry = Depends(get_session_registry)
) -> SessionViewDTO:
    with registry.acquire(session_id) as session:
        session.pick_random()
        return SessionMapper.to_response(session_id, session)


@router.post(
    "/{session_id}/materials/{material_id}/toggle",
    response_model=SessionViewDTO,
    summary="Expand or collapse one result card",
)
def toggle_expanded(
    session_id: str,
    material_id: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionViewDTO:
    with registry.acquire(session_id) as session:
        session.toggle_expanded(material_id)
        return SessionMapper.to_response(session_id, session)


@router.post(
    "/{session_id}/window/expand",
    response_model=SessionViewDTO,
    summary="Show all results",
    description="Also collapses every expanded card.",
)
def expand_window(
    session_id: str, registry: SessionRegistry = Depends(get_session_registry)
) -> SessionViewDTO:
    with registry.acquire(session_id) as session:
        session.expand_result_window()
        return SessionMapper.to_response(session_id, session)
