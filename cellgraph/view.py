from __future__ import annotations

import logging
from typing import Callable, Mapping

from cellgraph.annotations import Annotation
from cellgraph.axis import Axis, HorizontalAxis, VerticalAxis
from cellgraph.config import DEFAULT_FAST_SCROLL_FACTOR, AxisConfig, GraphViewConfig
from cellgraph.errors import GraphConfigError
from cellgraph.geometry import GraphPoint, Rect, RectF, ScreenPoint
from cellgraph.input import ScrollKeyEvent, parse_scroll_key, parse_scroll_key_event
from cellgraph.raster import CROSSHAIR, CanvasDriver, CellCanvas, DirtyState, draw_line, put_glyph
from cellgraph.series import Series
from cellgraph.style import Attribute, ColorScheme
from cellgraph.transform import GraphTransform


LOGGER = logging.getLogger(__name__)


class GraphView:
    """Scrollable chart widget mapping a continuous graph space onto a grid of terminal cells.

    `scroll_offset` is the graph coordinate at the bottom-left of the drawable area
    and `cell_size` is how much graph space one cell spans. Series and axis content
    never enters the left/bottom margins, though axis labels may. Every redraw
    re-derives all geometry from this state.
    """

    def __init__(self, width: int, height: int, *, color_scheme: ColorScheme | None = None) -> None:
        self._width, self._height = _validate_size(width, height)
        self.color_scheme = color_scheme or ColorScheme()
        self.axis_x: Axis = HorizontalAxis()
        self.axis_y: Axis = VerticalAxis()
        self.series: list[Series] = []
        self.annotations: list[Annotation] = []
        self.margin_left = 0
        self.margin_bottom = 0
        self.scroll_offset: tuple[float, float] = (0.0, 0.0)
        self.cell_size: tuple[float, float] = (1.0, 1.0)
        self.graph_color: Attribute | None = None
        self.fast_scroll_factor = DEFAULT_FAST_SCROLL_FACTOR
        self.can_focus = True
        self.has_focus = True
        self.dirty = DirtyState()
        self.on_needs_display: Callable[[], None] | None = None

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def bounds(self) -> Rect:
        return Rect(x=0, y=0, width=self._width, height=self._height)

    def resize(self, width: int, height: int) -> "GraphView":
        self._width, self._height = _validate_size(width, height)
        self.set_needs_display("resize")
        return self

    @property
    def transform(self) -> GraphTransform:
        return GraphTransform(
            scroll_offset=self.scroll_offset,
            cell_size=self.cell_size,
            margin_left=self.margin_left,
            margin_bottom=self.margin_bottom,
            viewport_height=self._height,
        )

    def screen_to_graph_space(self, col: int, row: int) -> RectF:
        return self.transform.screen_to_graph(col, row)

    def screen_rect_to_graph_space(self, area: Rect) -> RectF:
        return self.transform.screen_rect_to_graph(area)

    def graph_space_to_screen(self, location: GraphPoint) -> ScreenPoint:
        return self.transform.graph_to_screen(location)

    def draw_line(self, driver: CanvasDriver, start: ScreenPoint, end: ScreenPoint, symbol: str) -> None:
        draw_line(driver, start, end, symbol)

    def set_driver_color_to_graph_color(self, driver: CanvasDriver) -> None:
        driver.set_color(self.graph_color or self.color_scheme.normal)

    def drawable_bounds(self) -> Rect:
        return Rect(
            x=self.margin_left,
            y=0,
            width=self._width - self.margin_left,
            height=self._height - self.margin_bottom,
        )

    def redraw(self, driver: CanvasDriver) -> None:
        if self.margin_left < 0 or self.margin_bottom < 0:
            raise GraphConfigError("margins must be >= 0")
        # fails fast on a zero cell size
        transform = self.transform
        bounds = self.bounds

        self.set_driver_color_to_graph_color(driver)
        blank = " " * bounds.width
        for row in range(bounds.height):
            driver.move_cursor(0, row)
            driver.write_text(blank)

        LOGGER.debug(
            "redraw %dx%d series=%d annotations=%d offset=%s cell_size=%s",
            bounds.width,
            bounds.height,
            len(self.series),
            len(self.annotations),
            self.scroll_offset,
            self.cell_size,
        )
        if not self.series and not self.annotations:
            self.dirty.clear()
            return

        for annotation in self.annotations:
            if annotation.before_series:
                annotation.render(self, driver, bounds)
        self.set_driver_color_to_graph_color(driver)

        draw_bounds = self.drawable_bounds()
        graph_space = transform.screen_rect_to_graph(draw_bounds)
        for series in self.series:
            series.draw_series(self, driver, draw_bounds, graph_space)
            self.set_driver_color_to_graph_color(driver)

        self.axis_y.draw_axis_line(driver, self, bounds)
        self.axis_x.draw_axis_line(driver, self, bounds)
        self.axis_y.draw_axis_labels(driver, self, bounds)
        self.axis_x.draw_axis_labels(driver, self, bounds)
        self.set_driver_color_to_graph_color(driver)

        origin = transform.graph_to_screen(GraphPoint(0.0, 0.0))
        if self.axis_x.visible and self.axis_y.visible and draw_bounds.contains(origin.col, origin.row):
            put_glyph(driver, origin.col, origin.row, CROSSHAIR)

        for annotation in self.annotations:
            if not annotation.before_series:
                annotation.render(self, driver, bounds)
        self.dirty.clear()

    def render(self) -> CellCanvas:
        canvas = CellCanvas(self._width, self._height, color=self.graph_color or self.color_scheme.normal)
        self.redraw(canvas)
        return canvas

    def scroll(self, offset_x: float, offset_y: float) -> None:
        """Move the viewport by the given graph-space distance."""

        ox, oy = self.scroll_offset
        self.scroll_offset = (ox + offset_x, oy + offset_y)
        LOGGER.debug("scroll by (%s, %s) -> %s", offset_x, offset_y, self.scroll_offset)
        self.set_needs_display("scroll")

    def apply_scroll(self, event: ScrollKeyEvent) -> None:
        step = self.fast_scroll_factor if event.fast else 1.0
        cx, cy = self.cell_size
        if event.direction == "left":
            self.scroll(-cx * step, 0.0)
        elif event.direction == "right":
            self.scroll(cx * step, 0.0)
        elif event.direction == "down":
            self.scroll(0.0, -cy * step)
        else:
            self.scroll(0.0, cy * step)

    def handle_key(self, key: str, modifiers: Mapping[str, bool] | None = None) -> bool:
        """Scroll for arrow keys; returns False for keys the host should handle."""

        if not (self.has_focus and self.can_focus):
            return False
        event = parse_scroll_key(key, modifiers)
        if event is None:
            return False
        self.apply_scroll(event)
        return True

    def handle_event(self, event_type: str, payload: object) -> bool:
        if not (self.has_focus and self.can_focus):
            return False
        event = parse_scroll_key_event(event_type, payload)
        if event is None:
            return False
        self.apply_scroll(event)
        return True

    def set_needs_display(self, reason: str = "") -> None:
        self.dirty.mark(reason)
        if self.on_needs_display is not None:
            self.on_needs_display()

    def reset(self) -> None:
        """Restore default scroll, cell size, axes and colour, and drop all series and annotations."""

        self.scroll_offset = (0.0, 0.0)
        self.cell_size = (1.0, 1.0)
        self.axis_x.reset()
        self.axis_y.reset()
        self.series.clear()
        self.annotations.clear()
        self.graph_color = None
        self.set_needs_display("reset")

    def apply_config(self, config: GraphViewConfig) -> "GraphView":
        self.cell_size = config.cell_size
        self.scroll_offset = config.scroll_offset
        self.margin_left = config.margin_left
        self.margin_bottom = config.margin_bottom
        self.fast_scroll_factor = config.fast_scroll_factor
        self.graph_color = config.graph_color
        self.color_scheme = config.color_scheme
        _apply_axis_config(self.axis_x, config.axis_x)
        _apply_axis_config(self.axis_y, config.axis_y)
        self.set_needs_display("config")
        return self


def _apply_axis_config(axis: Axis, config: AxisConfig) -> None:
    axis.increment = config.increment
    axis.show_labels_every = config.show_labels_every
    axis.visible = config.visible
    axis.text = config.title


def _validate_size(width: int, height: int) -> tuple[int, int]:
    if width <= 0 or height <= 0:
        raise GraphConfigError("graph width and height must be > 0")
    return int(width), int(height)
