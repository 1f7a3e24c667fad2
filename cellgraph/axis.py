from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
import math
from typing import TYPE_CHECKING, Callable

from cellgraph.geometry import GraphPoint, Rect, RectF, ScreenPoint
from cellgraph.raster import H_LINE, RIGHT_TEE, TOP_TEE, V_LINE, CanvasDriver, put_glyph, text_width, truncate_to_width

if TYPE_CHECKING:
    from cellgraph.view import GraphView


DEFAULT_SHOW_LABELS_EVERY = 5


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass
class AxisTick:
    """A marked position on an axis, recomputed on every redraw."""

    orientation: Orientation
    screen_location: ScreenPoint
    graph_space: RectF
    text: str = ""


LabelGetter = Callable[[AxisTick], str]


def format_axis_value(value: float) -> str:
    """Zero-decimal, thousands-grouped rendering of an axis coordinate."""

    if not math.isfinite(value):
        return str(value)
    try:
        q = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return str(value)
    out = format(q, ",f")
    if out == "-0":
        out = "0"
    return out


def default_x_label(tick: AxisTick) -> str:
    return format_axis_value(tick.graph_space.x)


def default_y_label(tick: AxisTick) -> str:
    return format_axis_value(tick.graph_space.y)


class Axis:
    """Axis line with ticks every `increment` graph units and a label every `show_labels_every` ticks.

    `increment == 0` disables ticks and `show_labels_every == 0` disables labels.
    Subclasses supply the orientation-specific placement.
    """

    orientation: Orientation

    def __init__(self) -> None:
        self.increment: float = 1.0
        self.show_labels_every: int = DEFAULT_SHOW_LABELS_EVERY
        self.visible: bool = True
        self.text: str = ""
        self.label_getter: LabelGetter = self._default_label_getter()

    def reset(self) -> None:
        self.increment = 1.0
        self.show_labels_every = DEFAULT_SHOW_LABELS_EVERY
        self.visible = True
        self.text = ""
        self.label_getter = self._default_label_getter()

    def _default_label_getter(self) -> LabelGetter:
        raise NotImplementedError

    def draw_axis_line(self, driver: CanvasDriver, graph: "GraphView", bounds: Rect) -> None:
        raise NotImplementedError

    def draw_axis_labels(self, driver: CanvasDriver, graph: "GraphView", bounds: Rect) -> None:
        raise NotImplementedError

    def ticks(self, graph: "GraphView", bounds: Rect) -> list[AxisTick]:
        raise NotImplementedError

    def _collect_ticks(self, cells: list[tuple[ScreenPoint, RectF]], coord: Callable[[RectF], float], cell_extent: float) -> list[AxisTick]:
        if self.increment == 0:
            return []
        out: list[AxisTick] = []
        labelled = 0
        for screen, graph_space in cells:
            if math.fmod(abs(coord(graph_space)), self.increment) >= cell_extent:
                continue
            tick = AxisTick(orientation=self.orientation, screen_location=screen, graph_space=graph_space)
            if self.show_labels_every != 0:
                if labelled % self.show_labels_every == 0:
                    tick.text = self.label_getter(tick) or ""
                labelled += 1
            out.append(tick)
        return out


class HorizontalAxis(Axis):
    orientation = Orientation.HORIZONTAL

    def _default_label_getter(self) -> LabelGetter:
        return default_x_label

    def axis_row(self, graph: "GraphView", bounds: Rect) -> int:
        """Screen row of the graph origin, pinned inside the drawable rows when off-screen."""

        origin = graph.graph_space_to_screen(GraphPoint(0.0, 0.0))
        return min(max(0, origin.row), bounds.height - (graph.margin_bottom + 1))

    def ticks(self, graph: "GraphView", bounds: Rect) -> list[AxisTick]:
        transform = graph.transform
        row = self.axis_row(graph, bounds)
        cells = [(ScreenPoint(col, row), transform.screen_to_graph(col, row)) for col in range(bounds.width)]
        return self._collect_ticks(cells, lambda r: r.x, transform.cell_size[0])

    def draw_axis_line(self, driver: CanvasDriver, graph: "GraphView", bounds: Rect) -> None:
        if not self.visible:
            return
        driver.move_cursor(0, self.axis_row(graph, bounds))
        driver.write_text(H_LINE * bounds.width)

    def draw_axis_labels(self, driver: CanvasDriver, graph: "GraphView", bounds: Rect) -> None:
        if not self.visible:
            return
        for tick in self.ticks(graph, bounds):
            put_glyph(driver, tick.screen_location.col, tick.screen_location.row, TOP_TEE)
            if not tick.text.strip():
                continue
            # centred under the tick, clipped at the right edge
            draw_at = max(0, tick.screen_location.col - text_width(tick.text) // 2)
            available = bounds.width - draw_at
            if available <= 0:
                continue
            driver.move_cursor(draw_at, min(tick.screen_location.row + 1, bounds.height - 1))
            driver.write_text(truncate_to_width(tick.text, available))

        if self.text.strip():
            title = truncate_to_width(self.text, bounds.width)
            driver.move_cursor(bounds.width // 2 - text_width(title) // 2, bounds.height - 1)
            driver.write_text(title)


class VerticalAxis(Axis):
    orientation = Orientation.VERTICAL

    def _default_label_getter(self) -> LabelGetter:
        return default_y_label

    def axis_col(self, graph: "GraphView", bounds: Rect) -> int:
        """Screen column of the graph origin, pinned right of the left margin when off-screen."""

        origin = graph.graph_space_to_screen(GraphPoint(0.0, 0.0))
        return min(max(graph.margin_left, origin.col), bounds.width - 1)

    def ticks(self, graph: "GraphView", bounds: Rect) -> list[AxisTick]:
        transform = graph.transform
        col = self.axis_col(graph, bounds)
        cells = [(ScreenPoint(col, row), transform.screen_to_graph(col, row)) for row in range(bounds.height)]
        return self._collect_ticks(cells, lambda r: r.y, transform.cell_size[1])

    def draw_axis_line(self, driver: CanvasDriver, graph: "GraphView", bounds: Rect) -> None:
        if not self.visible:
            return
        col = self.axis_col(graph, bounds)
        for row in range(bounds.height):
            put_glyph(driver, col, row, V_LINE)

    def draw_axis_labels(self, driver: CanvasDriver, graph: "GraphView", bounds: Rect) -> None:
        if not self.visible:
            return
        col = self.axis_col(graph, bounds)
        ticks = self.ticks(graph, bounds)
        thickness = max((text_width(t.text) for t in ticks), default=1)
        for tick in ticks:
            put_glyph(driver, tick.screen_location.col, tick.screen_location.row, RIGHT_TEE)
            if not tick.text.strip():
                continue
            driver.move_cursor(max(0, col - thickness), tick.screen_location.row)
            driver.write_text(tick.text)

        if self.text.strip():
            title = self.text[: bounds.height]
            start_row = bounds.height // 2 - len(title) // 2
            for i, ch in enumerate(title):
                put_glyph(driver, 0, start_row + i, ch)
