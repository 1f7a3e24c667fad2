from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, Sequence

import numpy as np

from cellgraph.axis import AxisTick, Orientation
from cellgraph.errors import GraphConfigError
from cellgraph.geometry import GraphPoint, Rect, RectF
from cellgraph.raster import CanvasDriver, put_glyph
from cellgraph.style import Attribute, CellGlyph
from cellgraph.transform import contains_many

if TYPE_CHECKING:
    from cellgraph.view import GraphView


class Series(Protocol):
    def draw_series(self, graph: "GraphView", driver: CanvasDriver, bounds: Rect, graph_bounds: RectF) -> None:
        """Draw the part of the series inside `graph_bounds` onto the `bounds` screen area."""
        ...


@dataclass
class ScatterSeries:
    """Discrete points, each drawn as a single glyph."""

    points: list[GraphPoint] = field(default_factory=list)
    fill: CellGlyph = field(default_factory=lambda: CellGlyph("x"))

    def draw_series(self, graph: "GraphView", driver: CanvasDriver, bounds: Rect, graph_bounds: RectF) -> None:
        if not self.points:
            return
        xs = np.fromiter((p.x for p in self.points), dtype=np.float64, count=len(self.points))
        ys = np.fromiter((p.y for p in self.points), dtype=np.float64, count=len(self.points))
        mask = contains_many(graph_bounds, xs, ys)
        if not np.any(mask):
            return
        if self.fill.color is not None:
            driver.set_color(self.fill.color)
        cols, rows = graph.transform.graph_to_screen_many(xs[mask], ys[mask])
        for col, row in zip(cols.tolist(), rows.tolist(), strict=False):
            put_glyph(driver, col, row, self.fill.symbol)
        if self.fill.color is not None:
            graph.set_driver_color_to_graph_color(driver)


@dataclass(frozen=True)
class Bar:
    text: str
    fill: CellGlyph
    value: float


@dataclass
class BarSeries:
    """Bars placed every `bar_every` graph units along an axis, starting at `offset`.

    Vertical bars rise from y=0; horizontal bars extend right from x=0.
    """

    bars: list[Bar] = field(default_factory=list)
    bar_every: float = 1.0
    orientation: Orientation = Orientation.VERTICAL
    offset: float = 0.0
    override_bar_color: Attribute | None = None
    override_bar_symbol: str | None = None

    def bar_position(self, index: int) -> float:
        return self.offset + index * self.bar_every

    def adjust_fill(self, fill: CellGlyph) -> CellGlyph:
        if self.override_bar_color is None and self.override_bar_symbol is None:
            return fill
        return CellGlyph(
            symbol=self.override_bar_symbol or fill.symbol,
            color=self.override_bar_color if self.override_bar_color is not None else fill.color,
        )

    def draw_series(self, graph: "GraphView", driver: CanvasDriver, bounds: Rect, graph_bounds: RectF) -> None:
        for i, bar in enumerate(self.bars):
            along = self.bar_position(i)
            if self.orientation == Orientation.HORIZONTAL:
                start = GraphPoint(0.0, along)
                end = GraphPoint(bar.value, along)
            else:
                start = GraphPoint(along, 0.0)
                end = GraphPoint(along, bar.value)
            if not (start.is_finite() and end.is_finite()):
                continue

            fill = self.adjust_fill(bar.fill)
            if fill.color is not None:
                driver.set_color(fill.color)
            graph.draw_line(driver, graph.graph_space_to_screen(start), graph.graph_space_to_screen(end), fill.symbol)
            if fill.color is not None:
                graph.set_driver_color_to_graph_color(driver)

    def bar_at(self, cell: RectF) -> Bar | None:
        """Bar whose axis position falls inside `cell`, if any."""

        lo, hi = (cell.y, cell.top) if self.orientation == Orientation.HORIZONTAL else (cell.x, cell.right)
        for i, bar in enumerate(self.bars):
            if lo <= self.bar_position(i) < hi:
                return bar
        return None

    def get_label_text(self, tick: AxisTick) -> str:
        """Axis label getter that names the bar drawn at `tick`."""

        bar = self.bar_at(tick.graph_space)
        return bar.text if bar is not None else ""


class MultiBarSeries:
    """Bars clustered by category; sub-series `i` is shifted by `i * spacing`.

    Callers should keep `spacing` below `bars_every / number_of_bars_per_category`
    or neighbouring clusters overlap.
    """

    def __init__(
        self,
        number_of_bars_per_category: int,
        bars_every: float,
        spacing: float,
        colors: Sequence[Attribute] | None = None,
        orientation: Orientation = Orientation.VERTICAL,
    ) -> None:
        if number_of_bars_per_category <= 0:
            raise GraphConfigError("number_of_bars_per_category must be > 0")
        if colors is not None and len(colors) != number_of_bars_per_category:
            raise GraphConfigError("Number of colours must match the number of bars")
        self.spacing = float(spacing)
        self._sub_series = tuple(
            BarSeries(
                bar_every=bars_every,
                offset=i * self.spacing,
                orientation=orientation,
                override_bar_color=colors[i] if colors is not None else None,
            )
            for i in range(number_of_bars_per_category)
        )

    @property
    def sub_series(self) -> tuple[BarSeries, ...]:
        return self._sub_series

    def add_bars(self, label: str, fill: str, *values: float) -> "MultiBarSeries":
        if len(values) != len(self._sub_series):
            raise GraphConfigError("Number of values must match the number of bars per category")
        for series, value in zip(self._sub_series, values, strict=True):
            series.bars.append(Bar(text=label, fill=CellGlyph(fill), value=float(value)))
        return self

    def draw_series(self, graph: "GraphView", driver: CanvasDriver, bounds: Rect, graph_bounds: RectF) -> None:
        for series in self._sub_series:
            series.draw_series(graph, driver, bounds, graph_bounds)
