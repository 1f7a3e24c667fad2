from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class GraphPoint:
    x: float
    y: float

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass(frozen=True)
class ScreenPoint:
    col: int
    row: int


@dataclass(frozen=True)
class Rect:
    """Integer screen-space rectangle, top-left anchored."""

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

    def contains(self, col: int, row: int) -> bool:
        return self.x <= col < self.right and self.y <= row < self.bottom


@dataclass(frozen=True)
class RectF:
    """Graph-space rectangle anchored at its bottom-left corner."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height

    def contains(self, point: GraphPoint) -> bool:
        return self.x <= point.x < self.right and self.y <= point.y < self.top
