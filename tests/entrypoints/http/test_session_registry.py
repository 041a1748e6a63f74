"""Test suite for SessionRegistry."""

from __future__ import annotations

import pytest

from materials_explorer.domain.catalog import CatalogStore
from materials_explorer.domain.errors import NotFoundError
from materials_explorer.entrypoints.http.sessions import SessionRegistry


def test_create_returns_unique_ids(catalog: CatalogStore) -> None:
    registry = SessionRegistry(catalog, window_size=12)

    ids = {registry.create() for _ in range(10)}

    assert len(ids) == 10
    assert len(registry) == 10


def test_acquire_returns_the_same_session(catalog: CatalogStore) -> None:
    registry = SessionRegistry(catalog, window_size=12)
    session_id = registry.create()

    with registry.acquire(session_id) as first:
        first.update_text_facet("Fe")
    with registry.acquire(session_id) as second:
        assert second.facet_state().query == "Fe"


def test_acquire_unknown_session(catalog: CatalogStore) -> None:
    registry = SessionRegistry(catalog, window_size=12)

    with pytest.raises(NotFoundError) as exc_info:
        with registry.acquire("missing"):
            pass

    assert exc_info.value.context["resource"] == "Session"


def test_oldest_session_is_evicted(catalog: CatalogStore) -> None:
    registry = SessionRegistry(catalog, window_size=12, max_sessions=2)
    first = registry.create()
    second = registry.create()

    # Touching a session makes it the most recent
    with registry.acquire(first):
        pass
    registry.create()

    assert len(registry) == 2
    with registry.acquire(first):
        pass
    with pytest.raises(NotFoundError):
        with registry.acquire(second):
            pass


def test_seeded_sessions_pick_the_same_sequence(catalog: CatalogStore) -> None:
    registry = SessionRegistry(catalog, window_size=12, seed=99)
    first, second = registry.create(), registry.create()

    with registry.acquire(first) as session:
        picks_first = [session.pick_random().id for _ in range(10)]
    with registry.acquire(second) as session:
        picks_second = [session.pick_random().id for _ in range(10)]

    assert picks_first == picks_second


def test_sessions_share_the_catalog(catalog: CatalogStore) -> None:
    registry = SessionRegistry(catalog, window_size=12)

    assert registry.catalog is catalog
