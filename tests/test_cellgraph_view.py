from __future__ import annotations

import unittest

from cellgraph import (
    Attribute,
    Bar,
    BarSeries,
    CellGlyph,
    GraphConfigError,
    GraphPoint,
    GraphView,
    ScatterSeries,
    ScreenPoint,
    TextAnnotation,
    graph,
)
from cellgraph.raster import CROSSHAIR, RIGHT_TEE, CellCanvas


class GraphViewRedrawTests(unittest.TestCase):
    def test_single_scatter_point_lands_on_its_projection(self) -> None:
        view = GraphView(10, 10)
        view.series.append(ScatterSeries(points=[GraphPoint(2.0, 2.0)]))
        canvas = view.render()
        expected = view.graph_space_to_screen(GraphPoint(2.0, 2.0))
        self.assertEqual(canvas.find("x"), [(expected.col, expected.row)])
        self.assertEqual((expected.col, expected.row), (2, 7))

    def test_empty_graph_is_blank(self) -> None:
        view = GraphView(6, 3)
        canvas = CellCanvas(6, 3)
        canvas.move_cursor(0, 0)
        canvas.write_text("junk")
        view.redraw(canvas)
        self.assertEqual(canvas.to_text(), "\n".join([" " * 6] * 3))
        self.assertEqual(canvas.color_at(0, 0), view.color_scheme.normal)

    def test_zero_cell_size_is_fatal(self) -> None:
        view = GraphView(10, 10)
        view.cell_size = (0.0, 1.0)
        with self.assertRaises(GraphConfigError):
            view.render()

    def test_negative_margin_is_fatal(self) -> None:
        view = GraphView(10, 10)
        view.margin_left = -1
        with self.assertRaises(GraphConfigError):
            view.render()

    def test_axes_are_drawn_over_series(self) -> None:
        view = GraphView(10, 10)
        view.series.append(ScatterSeries(points=[GraphPoint(0.0, 5.0), GraphPoint(3.0, 5.0)]))
        canvas = view.render()
        self.assertEqual(canvas.glyph_at(0, 4), RIGHT_TEE)
        self.assertEqual(canvas.glyph_at(3, 4), "x")

    def test_origin_crosshair(self) -> None:
        view = GraphView(10, 10)
        view.scroll_offset = (-5.0, -5.0)
        view.series.append(ScatterSeries())
        self.assertEqual(view.render().glyph_at(5, 4), CROSSHAIR)

        view.axis_x.visible = False
        self.assertNotEqual(view.render().glyph_at(5, 4), CROSSHAIR)

    def test_crosshair_skipped_when_origin_in_margin(self) -> None:
        view = GraphView(10, 10)
        view.margin_left = 2
        view.scroll_offset = (1.0, -5.0)
        view.series.append(ScatterSeries())
        self.assertEqual(view.render().find(CROSSHAIR), [])

    def test_series_never_draw_inside_margins(self) -> None:
        view = GraphView(10, 10)
        view.margin_left = 3
        view.margin_bottom = 2
        view.axis_x.visible = False
        view.axis_y.visible = False
        view.series.append(ScatterSeries(points=[GraphPoint(-1.0, 0.0), GraphPoint(0.0, -1.0), GraphPoint(0.0, 0.0)]))
        self.assertEqual(view.render().find("x"), [(3, 7)])

    def test_annotation_order_around_series(self) -> None:
        view = GraphView(10, 10)
        view.series.append(ScatterSeries(points=[GraphPoint(2.0, 2.0), GraphPoint(4.0, 4.0)]))
        view.annotations.append(TextAnnotation(text="B", screen_position=ScreenPoint(2, 7), before_series=True))
        view.annotations.append(TextAnnotation(text="A", screen_position=ScreenPoint(4, 5)))
        canvas = view.render()
        self.assertEqual(canvas.glyph_at(2, 7), "x")
        self.assertEqual(canvas.glyph_at(4, 5), "A")

    def test_annotations_alone_trigger_a_full_pass(self) -> None:
        view = GraphView(10, 10)
        view.annotations.append(TextAnnotation(text="note", screen_position=ScreenPoint(3, 3)))
        canvas = view.render()
        self.assertEqual(canvas.glyph_at(3, 3), "n")
        self.assertEqual(canvas.glyph_at(0, 9), CROSSHAIR)

    def test_series_color_does_not_leak_to_axes(self) -> None:
        red = Attribute("red", "black")
        view = GraphView(10, 10)
        view.series.append(BarSeries(bars=[Bar("a", CellGlyph("#", red), 3.0)], offset=2.0))
        canvas = view.render()
        self.assertEqual(canvas.color_at(2, 7), red)
        self.assertEqual(canvas.color_at(5, 9), view.color_scheme.normal)

    def test_graph_color_overrides_scheme(self) -> None:
        view = GraphView(5, 5)
        view.graph_color = Attribute("green", "black")
        view.series.append(ScatterSeries())
        canvas = view.render()
        self.assertEqual(canvas.color_at(3, 1), Attribute("green", "black"))

    def test_redraw_is_repeatable(self) -> None:
        view = GraphView(12, 8)
        view.series.append(ScatterSeries(points=[GraphPoint(3.0, 3.0)]))
        self.assertEqual(view.render().to_text(), view.render().to_text())


class GraphViewScrollTests(unittest.TestCase):
    def test_arrow_keys_scroll_one_cell(self) -> None:
        view = GraphView(10, 10)
        view.cell_size = (2.0, 0.5)
        self.assertTrue(view.handle_key("ArrowRight"))
        self.assertTrue(view.handle_key("ArrowUp"))
        self.assertEqual(view.scroll_offset, (2.0, 0.5))
        self.assertTrue(view.handle_key("ArrowLeft"))
        self.assertTrue(view.handle_key("ArrowDown"))
        self.assertEqual(view.scroll_offset, (0.0, 0.0))
        self.assertEqual(view.cell_size, (2.0, 0.5))

    def test_control_modifier_scrolls_five_cells(self) -> None:
        view = GraphView(10, 10)
        self.assertTrue(view.handle_key("ArrowRight", {"ctrl": True}))
        self.assertTrue(view.handle_key("ArrowDown", {"ctrl": True}))
        self.assertEqual(view.scroll_offset, (5.0, -5.0))

    def test_other_keys_are_left_to_the_host(self) -> None:
        view = GraphView(10, 10)
        self.assertFalse(view.handle_key("a"))
        self.assertFalse(view.handle_key("Enter"))
        self.assertEqual(view.scroll_offset, (0.0, 0.0))

    def test_unfocused_view_ignores_keys(self) -> None:
        view = GraphView(10, 10)
        view.has_focus = False
        self.assertFalse(view.handle_key("ArrowRight"))
        self.assertEqual(view.scroll_offset, (0.0, 0.0))

    def test_host_events_are_parsed(self) -> None:
        view = GraphView(10, 10)
        self.assertTrue(view.handle_event("key_down", {"key": "ArrowLeft", "modifiers": {"ctrl": True}}))
        self.assertTrue(view.handle_event("press", {"phase": "down", "key": "ArrowUp", "active_keys": ["ArrowUp", "Control"]}))
        self.assertFalse(view.handle_event("press", {"phase": "up", "key": "ArrowUp", "active_keys": []}))
        self.assertFalse(view.handle_event("pointer_move", {"x": 1.0}))
        self.assertEqual(view.scroll_offset, (-5.0, 5.0))

    def test_scroll_requests_redraw(self) -> None:
        view = GraphView(10, 10)
        calls: list[int] = []
        view.on_needs_display = lambda: calls.append(1)
        view.render()
        self.assertFalse(view.dirty.dirty)
        view.handle_key("ArrowRight")
        self.assertTrue(view.dirty.dirty)
        self.assertEqual(view.dirty.metadata["reason"], "scroll")
        self.assertEqual(len(calls), 1)

    def test_scrolling_shifts_rendered_points(self) -> None:
        view = GraphView(10, 10)
        view.axis_x.visible = False
        view.axis_y.visible = False
        view.series.append(ScatterSeries(points=[GraphPoint(4.0, 4.0)]))
        self.assertEqual(view.render().find("x"), [(4, 5)])
        view.handle_key("ArrowRight")
        view.handle_key("ArrowUp")
        self.assertEqual(view.render().find("x"), [(3, 6)])


class GraphViewLifecycleTests(unittest.TestCase):
    def test_reset_restores_defaults(self) -> None:
        view = GraphView(10, 10)
        view.scroll_offset = (3.0, 4.0)
        view.cell_size = (2.0, 2.0)
        view.graph_color = Attribute("green", "black")
        view.axis_y.increment = 5
        view.series.append(ScatterSeries())
        view.annotations.append(TextAnnotation(text="x"))
        view.reset()
        self.assertEqual(view.scroll_offset, (0.0, 0.0))
        self.assertEqual(view.cell_size, (1.0, 1.0))
        self.assertIsNone(view.graph_color)
        self.assertEqual(view.axis_y.increment, 1)
        self.assertEqual(view.series, [])
        self.assertEqual(view.annotations, [])
        self.assertTrue(view.dirty.dirty)

    def test_resize_recomputes_transform(self) -> None:
        view = GraphView(10, 10)
        view.resize(10, 20)
        self.assertEqual(view.graph_space_to_screen(GraphPoint(0.0, 0.0)).row, 19)
        with self.assertRaises(GraphConfigError):
            view.resize(0, 5)

    def test_graph_helper_builds_view(self) -> None:
        view = graph(30, 12)
        self.assertEqual((view.width, view.height), (30, 12))
        with self.assertRaises(GraphConfigError):
            graph(0, 12)


if __name__ == "__main__":
    unittest.main()
