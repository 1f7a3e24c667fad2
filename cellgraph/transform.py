from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

from cellgraph.errors import GraphConfigError
from cellgraph.geometry import GraphPoint, Rect, RectF, ScreenPoint


@dataclass(frozen=True)
class GraphTransform:
    """Maps between screen cells and graph space for one redraw pass.

    Screen rows grow downward while graph Y grows upward, so row 0 is the top of
    the viewport and `scroll_offset` is the graph coordinate shown at the
    bottom-left cell of the drawable area (just inside the margins).
    """

    scroll_offset: tuple[float, float]
    cell_size: tuple[float, float]
    margin_left: int
    margin_bottom: int
    viewport_height: int

    def __post_init__(self) -> None:
        cx, cy = self.cell_size
        if cx == 0 or cy == 0:
            raise GraphConfigError("cell_size cannot be 0")

    def screen_to_graph(self, col: int, row: int) -> RectF:
        ox, oy = self.scroll_offset
        cx, cy = self.cell_size
        return RectF(
            x=ox + (col - self.margin_left) * cx,
            y=oy + (self.viewport_height - (row + self.margin_bottom + 1)) * cy,
            width=cx,
            height=cy,
        )

    def screen_rect_to_graph(self, area: Rect) -> RectF:
        # bottom-left cell of the area anchors the graph rectangle
        corner = self.screen_to_graph(area.x, area.bottom - 1)
        cx, cy = self.cell_size
        return RectF(x=corner.x, y=corner.y, width=area.width * cx, height=area.height * cy)

    def graph_to_screen(self, point: GraphPoint) -> ScreenPoint:
        """Project `point` to a screen cell; the result may lie outside the viewport."""

        ox, oy = self.scroll_offset
        cx, cy = self.cell_size
        col = self.margin_left + math.floor((point.x - ox) / cx)
        row = (self.viewport_height - 1) - self.margin_bottom - math.floor((point.y - oy) / cy)
        return ScreenPoint(col=int(col), row=int(row))

    def graph_to_screen_many(self, xs: np.ndarray, ys: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        ox, oy = self.scroll_offset
        cx, cy = self.cell_size
        cols = self.margin_left + np.floor((np.asarray(xs, dtype=np.float64) - ox) / cx)
        rows = (self.viewport_height - 1) - self.margin_bottom - np.floor((np.asarray(ys, dtype=np.float64) - oy) / cy)
        return cols.astype(np.int64), rows.astype(np.int64)


def contains_many(area: RectF, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    return (xs >= area.x) & (xs < area.right) & (ys >= area.y) & (ys < area.top)
