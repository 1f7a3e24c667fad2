from .canvas import CROSSHAIR, H_LINE, RIGHT_TEE, TOP_TEE, V_LINE, CanvasDriver, CellCanvas, draw_frame, put_glyph
from .draw_lines import clip_line, draw_line, draw_polyline, rasterize_line
from .draw_text import text_width, truncate_or_pad, truncate_to_width
from .layers import DirtyState

__all__ = [
    "CROSSHAIR",
    "CanvasDriver",
    "CellCanvas",
    "DirtyState",
    "H_LINE",
    "RIGHT_TEE",
    "TOP_TEE",
    "V_LINE",
    "clip_line",
    "draw_frame",
    "draw_line",
    "draw_polyline",
    "put_glyph",
    "rasterize_line",
    "text_width",
    "truncate_or_pad",
    "truncate_to_width",
]
