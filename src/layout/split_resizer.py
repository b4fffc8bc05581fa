"""Drag-to-resize engine for split-pane dividers.

The resizer turns a pointer drag on a divider into a split fraction.
Every update is recomputed from the fraction and container extent captured
when the gesture started, so the result depends only on the anchor and the
cumulative displacement:

    fraction = clamp((extent * anchor + delta * damping) / extent, 0.1, 0.9)

Usage:
    resizer = SplitPaneResizer(initial_fraction=settings.get_float(key, 0.5))
    session = resizer.begin_drag(resizer.fraction, container.width())
    resizer.update_drag(session, pointer_x - press_x)
    settings.set_float(key, resizer.end_drag(session))

The module has no Qt dependency; ``gui.split_pane`` feeds it mouse deltas.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from config.layout_config import (
    DEFAULT_SPLIT_FRACTION,
    DRAG_DAMPING_FACTOR,
    MAX_SPLIT_FRACTION,
    MIN_SPLIT_FRACTION,
)
from utils.env import is_dev_mode

logger = logging.getLogger(__name__)


class DragStateError(RuntimeError):
    """Raised in development mode when a drag call arrives out of order."""


class Orientation(str, Enum):
    """Axis along which a divider moves."""

    HORIZONTAL = "horizontal"  # panes side by side, divider moves along x
    VERTICAL = "vertical"  # panes stacked, divider moves along y

    def axis_delta(self, dx: float, dy: float) -> float:
        """Pick the displacement component along this orientation's axis."""
        return dx if self is Orientation.HORIZONTAL else dy


@dataclass(frozen=True)
class DragSession:
    """Anchor values captured when a drag gesture begins."""

    anchor_fraction: float
    anchor_extent: float

    @property
    def has_extent(self) -> bool:
        return self.anchor_extent > 0


def clamp_fraction(
    value: float,
    minimum: float = MIN_SPLIT_FRACTION,
    maximum: float = MAX_SPLIT_FRACTION,
) -> float:
    return max(minimum, min(maximum, value))


def compute_fraction(
    anchor_fraction: float,
    anchor_extent: float,
    cumulative_delta: float,
    damping: float = DRAG_DAMPING_FACTOR,
    minimum: float = MIN_SPLIT_FRACTION,
    maximum: float = MAX_SPLIT_FRACTION,
) -> Optional[float]:
    """Return the clamped fraction for a drag, or None when the extent is unusable.

    Args:
        anchor_fraction: Divider fraction when the drag started
        anchor_extent: Container size along the split axis at drag start
        cumulative_delta: Pointer displacement since drag start (same units as extent)
        damping: Multiplier applied to the raw displacement

    Returns:
        New fraction within [minimum, maximum], or None if ``anchor_extent <= 0``
        or the delta is not a finite number.
    """
    if anchor_extent <= 0 or not math.isfinite(cumulative_delta):
        return None

    anchor_position = anchor_extent * anchor_fraction
    new_position = anchor_position + cumulative_delta * damping
    return clamp_fraction(new_position / anchor_extent, minimum, maximum)


class SplitPaneResizer:
    """Owns the split fraction and drag state machine for a single divider.

    States are Idle and Dragging. ``begin_drag`` enters Dragging, ``end_drag``
    returns to Idle. ``update_drag`` is only valid while Dragging with the
    session returned by the latest ``begin_drag``.
    """

    def __init__(
        self,
        initial_fraction: float = DEFAULT_SPLIT_FRACTION,
        orientation: Orientation = Orientation.HORIZONTAL,
        damping: float = DRAG_DAMPING_FACTOR,
        on_change: Optional[Callable[[float], None]] = None,
    ):
        self.orientation = orientation
        self.damping = damping
        self._on_change = on_change
        self._fraction = self._sanitize(initial_fraction)
        self._session: Optional[DragSession] = None

    @staticmethod
    def _sanitize(value: float) -> float:
        try:
            value = float(value)
        except (TypeError, ValueError):
            return DEFAULT_SPLIT_FRACTION
        if not math.isfinite(value):
            return DEFAULT_SPLIT_FRACTION
        return clamp_fraction(value)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def fraction(self) -> float:
        """Current divider position within [0.1, 0.9]."""
        return self._fraction

    @property
    def is_dragging(self) -> bool:
        return self._session is not None

    @property
    def active_session(self) -> Optional[DragSession]:
        return self._session

    def set_fraction(self, value: float) -> float:
        """Replace the fraction from outside a gesture (e.g. settings reload)."""
        self._apply(self._sanitize(value))
        return self._fraction

    # ------------------------------------------------------------------
    # Drag gesture
    # ------------------------------------------------------------------

    def begin_drag(self, current_fraction: float, container_extent: float) -> DragSession:
        """Start a gesture anchored at ``current_fraction``.

        A non-positive extent still starts the session; updates on it are no-ops.
        Starting while already dragging abandons the previous session.
        """
        if self._session is not None:
            logger.debug("Abandoning unfinished drag session")

        anchor = self._sanitize(current_fraction)
        self._apply(anchor)
        self._session = DragSession(anchor_fraction=anchor, anchor_extent=float(container_extent))

        if not self._session.has_extent:
            logger.debug(
                "Drag started with non-positive extent; updates ignored",
                extra={"extent": container_extent},
            )
        return self._session

    def update_drag(self, session: DragSession, cumulative_delta: float) -> float:
        """Recompute the fraction from the session anchor and total displacement."""
        if not self._check_session(session, "update_drag"):
            return self._fraction

        new_fraction = compute_fraction(
            session.anchor_fraction,
            session.anchor_extent,
            cumulative_delta,
            damping=self.damping,
        )
        if new_fraction is None:
            return self._fraction

        self._apply(new_fraction)
        return self._fraction

    def update_drag_xy(self, session: DragSession, dx: float, dy: float) -> float:
        """Convenience wrapper taking a 2D displacement."""
        return self.update_drag(session, self.orientation.axis_delta(dx, dy))

    def end_drag(self, session: DragSession) -> float:
        """Finish the gesture and return the fraction to persist."""
        if self._check_session(session, "end_drag"):
            self._session = None
        return self._fraction

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check_session(self, session: DragSession, operation: str) -> bool:
        if self._session is not None and session is self._session:
            return True

        message = (
            f"{operation} called without an active drag session"
            if self._session is None
            else f"{operation} called with a stale drag session"
        )
        if is_dev_mode():
            raise DragStateError(message)
        logger.warning(message)
        return False

    def _apply(self, value: float) -> None:
        if value == self._fraction:
            return
        self._fraction = value
        if self._on_change is not None:
            self._on_change(value)
