"""
Region geometry for the expression panel.

The five regions sit on one horizontal row. This module is plain Python so
hit-testing can be used (and tested) without a running QApplication.
"""
from __future__ import annotations

from dataclasses import dataclass

from graphicalcalculator.config import (
    REGION_COUNT, REGION_WIDTH, REGION_HEIGHT, REGION_START_X, REGION_START_Y, REGION_INC_X,
    TEXT_POINT_COUNT, TEXT_OFFSET_X, TEXT_OFFSET_Y,
)


@dataclass(frozen=True)
class RegionRect:
    """Axis-aligned rectangle in panel pixel coordinates (y down)."""
    x: int
    y: int
    width: int
    height: int

    def contains(self, px: float, py: float) -> bool:
        # left/top inclusive, right/bottom exclusive
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height


def region_rects() -> list[RegionRect]:
    """The editable regions, index 0 being the left-most one."""
    return [
        RegionRect(REGION_START_X + i * REGION_INC_X, REGION_START_Y, REGION_WIDTH, REGION_HEIGHT)
        for i in range(REGION_COUNT)
    ]


def text_points() -> list[tuple[int, int]]:
    """Anchor points for `operand operator operand operator operand = result`."""
    start_x = REGION_START_X + TEXT_OFFSET_X
    start_y = REGION_START_Y + TEXT_OFFSET_Y
    return [(start_x + i * REGION_INC_X, start_y) for i in range(TEXT_POINT_COUNT)]


def region_at(px: float, py: float) -> int | None:
    """Index of the region containing the point, or None."""
    for i, rect in enumerate(region_rects()):
        if rect.contains(px, py):
            return i
    return None
