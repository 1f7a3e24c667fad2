from __future__ import annotations

from typing import Sequence

from cellgraph.geometry import Rect, ScreenPoint
from cellgraph.raster.canvas import CanvasDriver, put_glyph


def rasterize_line(start: ScreenPoint, end: ScreenPoint) -> list[ScreenPoint]:
    """Cells of the Bresenham line from `start` to `end`, both ends included.

    A zero-length line yields no cells.
    """

    if start == end:
        return []
    x0, y0 = start.col, start.row
    x1, y1 = end.col, end.row
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = int((dx if dx > dy else -dy) / 2)

    cells: list[ScreenPoint] = []
    while True:
        cells.append(ScreenPoint(col=x0, row=y0))
        if x0 == x1 and y0 == y1:
            break
        e2 = err
        if e2 > -dx:
            err -= dy
            x0 += sx
        if e2 < dy:
            err += dx
            y0 += sy
    return cells


def clip_line(start: ScreenPoint, end: ScreenPoint, area: Rect) -> tuple[ScreenPoint, ScreenPoint] | None:
    """Liang-Barsky clip of the segment to the cells of `area`.

    Segments already inside are returned unchanged; None when nothing is visible.
    """

    if area.width <= 0 or area.height <= 0:
        return None
    x0, y0 = float(start.col), float(start.row)
    dx, dy = float(end.col - start.col), float(end.row - start.row)
    t0, t1 = 0.0, 1.0
    for p, q in (
        (-dx, x0 - area.x),
        (dx, (area.right - 1) - x0),
        (-dy, y0 - area.y),
        (dy, (area.bottom - 1) - y0),
    ):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)
    if t0 == 0.0 and t1 == 1.0:
        return start, end
    clipped_start = ScreenPoint(col=round(x0 + t0 * dx), row=round(y0 + t0 * dy))
    clipped_end = ScreenPoint(col=round(x0 + t1 * dx), row=round(y0 + t1 * dy))
    return clipped_start, clipped_end


def draw_line(dst: CanvasDriver, start: ScreenPoint, end: ScreenPoint, symbol: str) -> None:
    """Draw the part of the line that falls on `dst`; work is bounded by the canvas size."""

    if start == end:
        return
    clipped = clip_line(start, end, Rect(x=0, y=0, width=dst.width, height=dst.height))
    if clipped is None:
        return
    first, last = clipped
    if first == last:
        # a longer line that crosses a single visible cell
        put_glyph(dst, first.col, first.row, symbol)
        return
    for cell in rasterize_line(first, last):
        put_glyph(dst, cell.col, cell.row, symbol)


def draw_polyline(dst: CanvasDriver, points: Sequence[ScreenPoint], symbol: str) -> None:
    if len(points) < 2:
        return
    for i in range(len(points) - 1):
        draw_line(dst, points[i], points[i + 1], symbol)
