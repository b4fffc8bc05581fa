"""Split-pane layout constants and persisted divider keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

MIN_SPLIT_FRACTION = 0.1
MAX_SPLIT_FRACTION = 0.9
DEFAULT_SPLIT_FRACTION = 0.5

# Divider tracks the pointer at half speed
DRAG_DAMPING_FACTOR = 0.5

SPLIT_HANDLE_WIDTH = 8


@dataclass(frozen=True)
class DividerConfig:
    """Settings key and default position for one persisted divider."""

    key: str
    default_fraction: float
    description: str


MAIN_SPLIT = DividerConfig("mainSplitPosition", 0.25, "Navigation list | content")
RIGHT_VERTICAL_SPLIT = DividerConfig("rightVerticalSplitPosition", 0.5, "Top row | bottom row")
TOP_HORIZONTAL_SPLIT = DividerConfig("topHorizontalSplitPosition", 0.5, "Top-left | top-right")
BOTTOM_HORIZONTAL_SPLIT = DividerConfig("bottomHorizontalSplitPosition", 0.5, "Bottom-left | bottom-right")

DIVIDERS: Tuple[DividerConfig, ...] = (
    MAIN_SPLIT,
    RIGHT_VERTICAL_SPLIT,
    TOP_HORIZONTAL_SPLIT,
    BOTTOM_HORIZONTAL_SPLIT,
)


def divider_defaults() -> Dict[str, float]:
    """Return {settings_key: default_fraction} for every divider."""
    return {divider.key: divider.default_fraction for divider in DIVIDERS}
