from __future__ import annotations

from pathlib import Path

from cellgraph.config import GraphViewConfig, load_graph_config_file
from cellgraph.view import GraphView


def graph(
    width: int,
    height: int,
    *,
    config: GraphViewConfig | None = None,
    config_path: str | Path | None = None,
) -> GraphView:
    if config is not None and config_path is not None:
        raise ValueError("pass either config or config_path, not both")
    view = GraphView(width=width, height=height)
    if config_path is not None:
        config = load_graph_config_file(config_path)
    if config is not None:
        view.apply_config(config)
    return view
