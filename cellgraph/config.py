from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
from pathlib import Path
import tomllib
from typing import Any, Mapping

from cellgraph.errors import GraphConfigError
from cellgraph.style import Attribute, ColorScheme, validate_color_scheme


LOGGER = logging.getLogger(__name__)

DEFAULT_FAST_SCROLL_FACTOR = 5.0


@dataclass(frozen=True)
class AxisConfig:
    increment: float = 1.0
    show_labels_every: int = 5
    visible: bool = True
    title: str = ""


@dataclass(frozen=True)
class GraphViewConfig:
    cell_size: tuple[float, float] = (1.0, 1.0)
    scroll_offset: tuple[float, float] = (0.0, 0.0)
    margin_left: int = 0
    margin_bottom: int = 0
    fast_scroll_factor: float = DEFAULT_FAST_SCROLL_FACTOR
    graph_color: Attribute | None = None
    color_scheme: ColorScheme = field(default_factory=ColorScheme)
    axis_x: AxisConfig = field(default_factory=AxisConfig)
    axis_y: AxisConfig = field(default_factory=AxisConfig)


_TOP_LEVEL_KEYS = {
    "cell_size",
    "scroll_offset",
    "margin_left",
    "margin_bottom",
    "fast_scroll_factor",
    "graph_color",
    "color_scheme",
    "axis_x",
    "axis_y",
}
_AXIS_KEYS = {"increment", "show_labels_every", "visible", "title"}


def load_graph_config(raw: Mapping[str, Any] | None = None) -> GraphViewConfig:
    """Validate a plain mapping (e.g. parsed TOML/JSON) into a `GraphViewConfig`."""

    raw = dict(raw or {})
    unknown = sorted(set(raw) - _TOP_LEVEL_KEYS)
    if unknown:
        raise GraphConfigError(f"unknown graph config keys: {', '.join(unknown)}")

    cell_size = _coerce_pair(raw.get("cell_size", (1.0, 1.0)), "cell_size")
    if cell_size[0] == 0 or cell_size[1] == 0:
        raise GraphConfigError("cell_size cannot be 0")
    scroll_offset = _coerce_pair(raw.get("scroll_offset", (0.0, 0.0)), "scroll_offset")
    margin_left = _coerce_non_negative_int(raw.get("margin_left", 0), "margin_left")
    margin_bottom = _coerce_non_negative_int(raw.get("margin_bottom", 0), "margin_bottom")
    fast_scroll_factor = _coerce_float(raw.get("fast_scroll_factor", DEFAULT_FAST_SCROLL_FACTOR), "fast_scroll_factor")
    if fast_scroll_factor <= 0:
        raise GraphConfigError("fast_scroll_factor must be > 0")

    graph_color_raw = raw.get("graph_color")
    graph_color = None
    if graph_color_raw is not None:
        graph_color = validate_color_scheme({"normal": graph_color_raw}).normal

    config = GraphViewConfig(
        cell_size=cell_size,
        scroll_offset=scroll_offset,
        margin_left=margin_left,
        margin_bottom=margin_bottom,
        fast_scroll_factor=fast_scroll_factor,
        graph_color=graph_color,
        color_scheme=validate_color_scheme(_coerce_mapping(raw.get("color_scheme"), "color_scheme")),
        axis_x=_load_axis_config(raw.get("axis_x"), "axis_x"),
        axis_y=_load_axis_config(raw.get("axis_y"), "axis_y"),
    )
    LOGGER.debug("loaded graph config: cell_size=%s margins=(%d, %d)", cell_size, margin_left, margin_bottom)
    return config


def load_graph_config_file(path: str | Path) -> GraphViewConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"graph config not found: {config_path}")
    suffix = config_path.suffix.lower()
    if suffix == ".toml":
        with config_path.open("rb") as f:
            raw = tomllib.load(f)
    elif suffix == ".json":
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    else:
        raise GraphConfigError(f"unsupported graph config format: {config_path.suffix}")
    if not isinstance(raw, dict):
        raise GraphConfigError("graph config must be an object")
    return load_graph_config(raw)


def _load_axis_config(raw: Any, name: str) -> AxisConfig:
    values = _coerce_mapping(raw, name)
    unknown = sorted(set(values) - _AXIS_KEYS)
    if unknown:
        raise GraphConfigError(f"unknown {name} keys: {', '.join(unknown)}")
    title = values.get("title", "")
    if not isinstance(title, str):
        raise GraphConfigError(f"{name}.title must be a string")
    visible = values.get("visible", True)
    if not isinstance(visible, bool):
        raise GraphConfigError(f"{name}.visible must be a boolean")
    return AxisConfig(
        increment=_coerce_float(values.get("increment", 1.0), f"{name}.increment"),
        show_labels_every=_coerce_non_negative_int(values.get("show_labels_every", 5), f"{name}.show_labels_every"),
        visible=visible,
        title=title,
    )


def _coerce_mapping(value: Any, name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise GraphConfigError(f"{name} must be an object")
    return dict(value)


def _coerce_float(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise GraphConfigError(f"{name} must be a number")
    return float(value)


def _coerce_pair(value: Any, name: str) -> tuple[float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise GraphConfigError(f"{name} must be a pair of numbers")
    return (_coerce_float(value[0], f"{name}[0]"), _coerce_float(value[1], f"{name}[1]"))


def _coerce_non_negative_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise GraphConfigError(f"{name} must be an integer")
    if value < 0:
        raise GraphConfigError(f"{name} must be >= 0")
    return value
