from __future__ import annotations

from typing import Protocol

import numpy as np

from cellgraph.geometry import Rect
from cellgraph.style import Attribute


H_LINE = "─"
V_LINE = "│"
TOP_TEE = "┬"
RIGHT_TEE = "┤"
CROSSHAIR = "┼"
UL_CORNER = "┌"
UR_CORNER = "┐"
LL_CORNER = "└"
LR_CORNER = "┘"


class CanvasDriver(Protocol):
    """Cell-writing surface the graph draws onto.

    Writes outside the grid must be dropped silently.
    """

    width: int
    height: int

    def move_cursor(self, col: int, row: int) -> None: ...

    def write_glyph(self, symbol: str) -> None: ...

    def write_text(self, text: str) -> None: ...

    def set_color(self, attribute: Attribute) -> None: ...


class CellCanvas:
    """Character grid backed by numpy arrays of symbols and color attributes."""

    def __init__(self, width: int, height: int, color: Attribute | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self.width = width
        self.height = height
        self.current_color = color or Attribute()
        self.glyphs = np.full((height, width), " ", dtype="<U1")
        self.colors = np.empty((height, width), dtype=object)
        self.colors[:, :] = self.current_color
        self._cursor_col = 0
        self._cursor_row = 0

    @property
    def cursor(self) -> tuple[int, int]:
        return (self._cursor_col, self._cursor_row)

    def move_cursor(self, col: int, row: int) -> None:
        self._cursor_col = int(col)
        self._cursor_row = int(row)

    def set_color(self, attribute: Attribute) -> None:
        self.current_color = attribute

    def write_glyph(self, symbol: str) -> None:
        col, row = self._cursor_col, self._cursor_row
        if 0 <= row < self.height and 0 <= col < self.width:
            self.glyphs[row, col] = symbol
            self.colors[row, col] = self.current_color
        self._cursor_col += 1

    def write_text(self, text: str) -> None:
        for ch in text:
            self.write_glyph(ch)

    def glyph_at(self, col: int, row: int) -> str:
        return str(self.glyphs[row, col])

    def color_at(self, col: int, row: int) -> Attribute:
        return self.colors[row, col]

    def find(self, symbol: str) -> list[tuple[int, int]]:
        rows, cols = np.nonzero(self.glyphs == symbol)
        return [(int(c), int(r)) for r, c in zip(rows.tolist(), cols.tolist(), strict=False)]

    def to_text(self) -> str:
        return "\n".join("".join(row) for row in self.glyphs.tolist())


def put_glyph(dst: CanvasDriver, col: int, row: int, symbol: str) -> None:
    dst.move_cursor(col, row)
    dst.write_glyph(symbol)


def draw_frame(dst: CanvasDriver, area: Rect) -> None:
    if area.width < 2 or area.height < 2:
        return
    left, top = area.x, area.y
    right, bottom = area.right - 1, area.bottom - 1
    dst.move_cursor(left, top)
    dst.write_text(UL_CORNER + H_LINE * (area.width - 2) + UR_CORNER)
    for row in range(top + 1, bottom):
        put_glyph(dst, left, row, V_LINE)
        put_glyph(dst, right, row, V_LINE)
    dst.move_cursor(left, bottom)
    dst.write_text(LL_CORNER + H_LINE * (area.width - 2) + LR_CORNER)
