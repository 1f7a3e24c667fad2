from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from cellgraph.geometry import GraphPoint, Rect, ScreenPoint
from cellgraph.raster import CanvasDriver, draw_frame, draw_polyline, put_glyph, truncate_or_pad, truncate_to_width
from cellgraph.style import Attribute, CellGlyph

if TYPE_CHECKING:
    from cellgraph.view import GraphView


class Annotation(Protocol):
    """Overlay drawn independently of series data."""

    @property
    def before_series(self) -> bool: ...

    def render(self, graph: "GraphView", driver: CanvasDriver, screen_bounds: Rect) -> None: ...


@dataclass
class TextAnnotation:
    """Text pinned to a screen cell or to a graph-space location.

    `screen_position` wins over `graph_position` when both are set.
    """

    text: str = ""
    screen_position: ScreenPoint | None = None
    graph_position: GraphPoint | None = None
    before_series: bool = False

    def render(self, graph: "GraphView", driver: CanvasDriver, screen_bounds: Rect) -> None:
        if self.screen_position is not None:
            self._draw_text(driver, screen_bounds, self.screen_position.col, self.screen_position.row)
            return
        if self.graph_position is not None and self.graph_position.is_finite():
            pos = graph.graph_space_to_screen(self.graph_position)
            self._draw_text(driver, screen_bounds, pos.col, pos.row)

    def _draw_text(self, driver: CanvasDriver, screen_bounds: Rect, col: int, row: int) -> None:
        if not screen_bounds.contains(col, row):
            return
        if not self.text.strip():
            return
        available = screen_bounds.width - col
        if available <= 0:
            return
        driver.move_cursor(col, row)
        driver.write_text(truncate_to_width(self.text, available))


@dataclass
class LegendAnnotation:
    """Key box listing (glyph, description) pairs, one per line, inside fixed screen `bounds`."""

    bounds: Rect
    border: bool = True
    entries: list[tuple[CellGlyph, str]] = field(default_factory=list)

    @property
    def before_series(self) -> bool:
        return False

    def add_entry(self, glyph: CellGlyph, text: str) -> "LegendAnnotation":
        self.entries.append((glyph, text))
        return self

    def render(self, graph: "GraphView", driver: CanvasDriver, screen_bounds: Rect) -> None:
        inset = 1 if self.border else 0
        if self.border:
            draw_frame(driver, self.bounds)

        col = self.bounds.x + inset
        row = self.bounds.y + inset
        available_width = self.bounds.width - 2 * inset
        available_height = self.bounds.height - 2 * inset

        for line, (glyph, text) in enumerate(self.entries):
            if line >= available_height:
                break
            if glyph.color is not None:
                driver.set_color(glyph.color)
            else:
                graph.set_driver_color_to_graph_color(driver)
            put_glyph(driver, col, row + line, glyph.symbol)

            graph.set_driver_color_to_graph_color(driver)
            driver.move_cursor(col + 1, row + line)
            driver.write_text(truncate_or_pad(text, available_width - 1, "left"))


@dataclass
class PathAnnotation:
    """Open polyline through graph-space `points`, drawn in list order.

    A NaN or infinite point breaks the path; the runs on either side are still drawn.
    """

    points: list[GraphPoint] = field(default_factory=list)
    line_color: Attribute | None = None
    line_symbol: str = "."
    before_series: bool = False

    def runs(self) -> list[list[GraphPoint]]:
        out: list[list[GraphPoint]] = [[]]
        for point in self.points:
            if point.is_finite():
                out[-1].append(point)
            elif out[-1]:
                out.append([])
        return [run for run in out if len(run) > 1]

    def render(self, graph: "GraphView", driver: CanvasDriver, screen_bounds: Rect) -> None:
        if self.line_color is not None:
            driver.set_color(self.line_color)
        else:
            graph.set_driver_color_to_graph_color(driver)
        for run in self.runs():
            draw_polyline(driver, [graph.graph_space_to_screen(p) for p in run], self.line_symbol)
        graph.set_driver_color_to_graph_color(driver)
