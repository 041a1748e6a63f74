"""In-process registry of explorer sessions.

Facet state is never persisted: a session lives as long as the process and is
evicted oldest-first once the registry is full.
"""

from __future__ import annotations

import logging
import random
import threading
import uuid
from collections import OrderedDict
from collections.abc import Iterator
from contextlib import contextmanager

from materials_explorer.domain.catalog import CatalogStore
from materials_explorer.domain.errors import NotFoundError
from materials_explorer.use_cases.explorer_session import ExplorerSession
from materials_explorer.use_cases.filter_catalog import FilterEngine

logger = logging.getLogger(__name__)

DEFAULT_MAX_SESSIONS = 1000


class SessionRegistry:
    """
    Creates and hands out explorer sessions.

    Each session has its own lock so that its actions run one at a time even
    though FastAPI serves sync routes from a thread pool.
    """

    def __init__(
        self,
        catalog: CatalogStore,
        window_size: int,
        seed: int | None = None,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
    ) -> None:
        self._catalog = catalog
        self._window_size = window_size
        self._seed = seed
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, tuple[ExplorerSession, threading.Lock]] = OrderedDict()
        self._registry_lock = threading.Lock()

    @property
    def catalog(self) -> CatalogStore:
        return self._catalog

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> str:
        session_id = uuid.uuid4().hex
        engine = FilterEngine(rng=random.Random(self._seed))
        session = ExplorerSession(self._catalog, engine, self._window_size)

        with self._registry_lock:
            self._sessions[session_id] = (session, threading.Lock())
            while len(self._sessions) > self._max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info("Session evicted", extra={"session_id": evicted})

        return session_id

    @contextmanager
    def acquire(self, session_id: str) -> Iterator[ExplorerSession]:
        """
        Exclusive access to one session for the duration of an action.

        Raises:
            NotFoundError: If the session does not exist (or was evicted)
        """
        with self._registry_lock:
            entry = self._sessions.get(session_id)
            if entry is None:
                raise NotFoundError(resource="Session", identifier=session_id)
            self._sessions.move_to_end(session_id)

        session, lock = entry
        with lock:
            yield session
