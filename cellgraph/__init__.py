from cellgraph.annotations import Annotation, LegendAnnotation, PathAnnotation, TextAnnotation
from cellgraph.api import graph
from cellgraph.axis import Axis, AxisTick, HorizontalAxis, Orientation, VerticalAxis, format_axis_value
from cellgraph.config import AxisConfig, GraphViewConfig, load_graph_config, load_graph_config_file
from cellgraph.errors import GraphConfigError
from cellgraph.geometry import GraphPoint, Rect, RectF, ScreenPoint
from cellgraph.raster import CellCanvas
from cellgraph.series import Bar, BarSeries, MultiBarSeries, ScatterSeries, Series
from cellgraph.style import Attribute, CellGlyph, ColorScheme, validate_color_scheme
from cellgraph.transform import GraphTransform
from cellgraph.view import GraphView

__all__ = [
    "Annotation",
    "Attribute",
    "Axis",
    "AxisConfig",
    "AxisTick",
    "Bar",
    "BarSeries",
    "CellCanvas",
    "CellGlyph",
    "ColorScheme",
    "GraphConfigError",
    "GraphPoint",
    "GraphTransform",
    "GraphView",
    "GraphViewConfig",
    "HorizontalAxis",
    "LegendAnnotation",
    "MultiBarSeries",
    "Orientation",
    "PathAnnotation",
    "Rect",
    "RectF",
    "ScatterSeries",
    "ScreenPoint",
    "Series",
    "TextAnnotation",
    "VerticalAxis",
    "format_axis_value",
    "graph",
    "load_graph_config",
    "load_graph_config_file",
    "validate_color_scheme",
]
