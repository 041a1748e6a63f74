"""Decides what part of a filter result is shown and in which detail."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from materials_explorer.domain.material import MaterialRecord


class PresenterState(str, Enum):
    EMPTY = "empty"  # nothing asked yet: call-to-action placeholder, no list
    UNCONSTRAINED = "unconstrained"
    CONSTRAINED = "constrained"


class DisplayMode(str, Enum):
    FILTERED = "filtered"
    RANDOM = "random"


@dataclass(frozen=True, slots=True)
class ResultView:
    """Read-only snapshot handed to the rendering collaborator."""

    state: PresenterState
    mode: DisplayMode
    records: list[MaterialRecord]
    total_count: int
    visible_count: int
    has_more: bool
    expanded_ids: frozenset[str]

    def is_expanded(self, material_id: str) -> bool:
        return material_id in self.expanded_ids


class ResultPresenter:
    """
    State machine over the latest filter result.

    States:
        EMPTY: no facet differs from its default and no search was triggered
        UNCONSTRAINED: search triggered, every facet at its default
        CONSTRAINED: at least one facet differs from its default

    Window: the first `window_size` records are shown until the user asks for
    all of them. Expanded-detail flags are per record id and survive
    re-filtering while the id stays in the result. Only records on display
    (the current result, or the random pick in random mode) can be expanded.
    """

    def __init__(self, window_size: int) -> None:
        if window_size <= 0:
            raise ValueError("window_size must be > 0")
        self._window_size = window_size
        self._results: list[MaterialRecord] = []
        self._result_ids: set[str] = set()
        self._random_pick: MaterialRecord | None = None
        self._search_triggered = False
        self._constrained = False
        self._show_all = False
        self._expanded: dict[str, bool] = {}

    # --------------------------------------------------------------------------
    # Transitions
    # --------------------------------------------------------------------------

    def show_results(self, results: list[MaterialRecord], constrained: bool) -> None:
        """A new filter result replaces the previous one and ends random mode."""
        self._results = results
        self._constrained = constrained
        self._random_pick = None
        self._show_all = False
        self._search_triggered = True

        self._result_ids = {record.id for record in results}
        self._expanded = {
            material_id: flag for material_id, flag in self._expanded.items() if material_id in self._result_ids
        }

    def show_random(self, record: MaterialRecord) -> None:
        self._random_pick = record
        self._search_triggered = True

    def expand_window(self) -> None:
        self._show_all = True
        self._expanded.clear()

    def toggle_expanded(self, material_id: str) -> bool:
        """
        Flip one record's detail flag.

        Returns:
            The new flag; False without storing anything when the record is
            not on display
        """
        if not self._on_display(material_id):
            return False
        flag = not self._expanded.get(material_id, False)
        self._expanded[material_id] = flag
        return flag

    # --------------------------------------------------------------------------
    # Read access
    # --------------------------------------------------------------------------

    @property
    def state(self) -> PresenterState:
        if self._constrained:
            return PresenterState.CONSTRAINED
        if self._search_triggered:
            return PresenterState.UNCONSTRAINED
        return PresenterState.EMPTY

    @property
    def mode(self) -> DisplayMode:
        return DisplayMode.RANDOM if self._random_pick is not None else DisplayMode.FILTERED

    def is_expanded(self, material_id: str) -> bool:
        return self._expanded.get(material_id, False)

    def view(self) -> ResultView:
        expanded_ids = frozenset(material_id for material_id, flag in self._expanded.items() if flag)
        state = self.state

        if state is PresenterState.EMPTY:
            return ResultView(state, self.mode, [], 0, 0, False, expanded_ids)

        if self._random_pick is not None:
            return ResultView(state, DisplayMode.RANDOM, [self._random_pick], 1, 1, False, expanded_ids)

        total = len(self._results)
        visible = self._results if self._show_all else self._results[: self._window_size]
        return ResultView(
            state=state,
            mode=DisplayMode.FILTERED,
            records=list(visible),
            total_count=total,
            visible_count=len(visible),
            has_more=len(visible) < total,
            expanded_ids=expanded_ids,
        )

    # --------------------------------------------------------------------------
    # Internals
    # --------------------------------------------------------------------------

    def _on_display(self, material_id: str) -> bool:
        if self.state is PresenterState.EMPTY:
            return False
        if self._random_pick is not None:
            return material_id == self._random_pick.id
        return material_id in self._result_ids
