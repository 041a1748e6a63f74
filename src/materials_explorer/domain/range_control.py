"""Range-control synchronisation.

Keeps a committed numeric range, a two-handle slider and two boundary text
fields consistent. The slider commits on every drag event; text fields only
commit on blur or confirm. While a text field has focus, its displayed text is
owned by the user's keystrokes and external committed changes are deferred
until focus is lost.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal

from materials_explorer.domain.errors import ParseError
from materials_explorer.domain.facets import Endpoint, NumericRange, RangeFacetSpec

logger = logging.getLogger(__name__)

CommitListener = Callable[[NumericRange], None]


def parse_boundary_text(raw: str) -> float:
    """
    Parse user-typed boundary text as a finite number.

    Raises:
        ParseError: If the text is empty, not numeric, NaN or infinite
    """
    try:
        value = float(raw.strip())
    except ValueError:
        raise ParseError(raw) from None
    if not math.isfinite(value):
        raise ParseError(raw)
    return value


class RangeControl:
    """
    Owns the state of one numeric facet's range widget.

    State:
        committed: authoritative range, the only field read by filtering
        pending_text: raw text per endpoint, may be transiently invalid
        editing: which endpoint currently has input focus
        dirty: which endpoint has keystrokes not yet committed

    Invariant: committed.lower <= committed.upper after every transition.
    """

    def __init__(
        self,
        spec: RangeFacetSpec,
        on_commit: CommitListener | None = None,
        initial: NumericRange | None = None,
    ) -> None:
        self._spec = spec
        self._on_commit = on_commit
        self._committed = initial or spec.full_span
        self._pending_text = [spec.format(self._committed.lower), spec.format(self._committed.upper)]
        self._editing = [False, False]
        self._dirty = [False, False]

    # --------------------------------------------------------------------------
    # Read access
    # --------------------------------------------------------------------------

    @property
    def spec(self) -> RangeFacetSpec:
        return self._spec

    @property
    def committed(self) -> NumericRange:
        return self._committed

    def is_editing(self, endpoint: Endpoint) -> bool:
        return self._editing[endpoint]

    def pending_text(self, endpoint: Endpoint) -> str:
        return self._pending_text[endpoint]

    def display_text(self, endpoint: Endpoint) -> str:
        if self._editing[endpoint]:
            return self._pending_text[endpoint]
        return self._spec.format(self._endpoint_value(endpoint))

    # --------------------------------------------------------------------------
    # Transitions
    # --------------------------------------------------------------------------

    def set_drag_value(self, pair: tuple[float, float]) -> None:
        """Slider drag: commits immediately, no text involved."""
        lower = self._snap(self._clamp(pair[0]))
        upper = self._snap(self._clamp(pair[1]))
        # Crossed handles are pinned together rather than rejected
        lower = min(lower, upper)
        self._commit(NumericRange(lower, upper))

    def focus(self, endpoint: Endpoint) -> None:
        if not self._editing[endpoint]:
            self._pending_text[endpoint] = self._spec.format(self._endpoint_value(endpoint))
        self._editing[endpoint] = True
        self._dirty[endpoint] = False

    def set_text(self, endpoint: Endpoint, raw: str) -> None:
        """Keystroke in a boundary field: never touches committed."""
        self._editing[endpoint] = True
        self._pending_text[endpoint] = raw
        self._dirty[endpoint] = True

    def commit_text(self, endpoint: Endpoint) -> bool:
        """
        Commit the pending text of one endpoint (blur or explicit confirm).

        Returns:
            True if the committed range changed
        """
        self._editing[endpoint] = False
        if not self._dirty[endpoint]:
            # Nothing typed: pick up any committed change made while focused
            self._resync(endpoint)
            return False
        self._dirty[endpoint] = False
        try:
            value = parse_boundary_text(self._pending_text[endpoint])
        except ParseError as exc:
            logger.debug(
                "Discarded unparsable range text",
                extra={"facet": self._spec.name, "endpoint": endpoint.name, "raw": exc.context["raw"]},
            )
            self._resync(endpoint)
            return False

        value = self._snap(self._clamp(value))
        if endpoint is Endpoint.LOWER:
            new_range = NumericRange(min(value, self._committed.upper), self._committed.upper)
        else:
            new_range = NumericRange(self._committed.lower, max(value, self._committed.lower))

        changed = self._commit(new_range)
        # A commit that leaves committed untouched still normalises the text
        self._resync(endpoint)
        return changed

    def reset(self) -> None:
        self._commit(self._spec.full_span)

    # --------------------------------------------------------------------------
    # Internals
    # --------------------------------------------------------------------------

    def _endpoint_value(self, endpoint: Endpoint) -> float:
        return self._committed.lower if endpoint is Endpoint.LOWER else self._committed.upper

    def _clamp(self, value: float) -> float:
        return min(max(value, self._spec.minimum), self._spec.maximum)

    def _snap(self, value: float) -> float:
        # Decimal arithmetic keeps round-half-up exact for steps like 0.1
        origin = Decimal(repr(self._spec.minimum))
        step = Decimal(repr(self._spec.step))
        steps = ((Decimal(repr(value)) - origin) / step).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        return self._clamp(float(origin + steps * step))

    def _commit(self, new_range: NumericRange) -> bool:
        if new_range == self._committed:
            return False
        self._committed = new_range
        for endpoint in Endpoint:
            if not self._editing[endpoint]:
                self._resync(endpoint)
        if self._on_commit is not None:
            self._on_commit(new_range)
        return True

    def _resync(self, endpoint: Endpoint) -> None:
        self._pending_text[endpoint] = self._spec.format(self._endpoint_value(endpoint))
