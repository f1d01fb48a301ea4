"""Popover placement.

Screen coordinates, origin top-left. Kept free of Tk so placement can be
tested headless.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

POPOVER_GAP = 8
VIEWPORT_MARGIN = 12


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


def place_popover(
    anchor: Rect,
    size: Tuple[int, int],
    viewport: Rect,
    *,
    gap: int = POPOVER_GAP,
    margin: int = VIEWPORT_MARGIN,
) -> Tuple[int, int]:
    """Top-left corner for a popover of `size` below `anchor`.

    Horizontally centred on the anchor, then clamped so the popover keeps
    `margin` pixels from both viewport edges. A popover wider than the
    viewport is pinned to the left margin.
    """
    width, _height = size
    x = round(anchor.center_x - width / 2)
    min_x = viewport.x + margin
    max_x = viewport.right - margin - width
    x = max(min_x, min(x, max_x))
    y = anchor.bottom + gap
    return int(x), int(y)
