from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from cellgraph.errors import GraphConfigError


TERMINAL_COLORS = (
    "black",
    "blue",
    "green",
    "cyan",
    "red",
    "magenta",
    "brown",
    "gray",
    "dark_gray",
    "bright_blue",
    "bright_green",
    "bright_cyan",
    "bright_red",
    "bright_magenta",
    "bright_yellow",
    "white",
)


@dataclass(frozen=True)
class Attribute:
    """Foreground/background pair understood by the terminal driver."""

    foreground: str = "white"
    background: str = "black"

    def __post_init__(self) -> None:
        for name in (self.foreground, self.background):
            if name not in TERMINAL_COLORS:
                raise GraphConfigError(f"unknown terminal color: {name}")


@dataclass(frozen=True)
class ColorScheme:
    normal: Attribute = field(default_factory=lambda: Attribute("white", "blue"))
    focus: Attribute = field(default_factory=lambda: Attribute("black", "gray"))
    hot_normal: Attribute = field(default_factory=lambda: Attribute("bright_yellow", "blue"))
    hot_focus: Attribute = field(default_factory=lambda: Attribute("bright_yellow", "gray"))
    disabled: Attribute = field(default_factory=lambda: Attribute("dark_gray", "blue"))


DEFAULT_COLOR_SCHEME = ColorScheme()


@dataclass
class CellGlyph:
    """One terminal cell worth of content: a symbol plus an optional color override."""

    symbol: str
    color: Attribute | None = None

    def __post_init__(self) -> None:
        if len(self.symbol) != 1:
            raise GraphConfigError("glyph symbol must be a single character")


def validate_color_scheme(overrides: Mapping[str, Any] | None = None) -> ColorScheme:
    """Merge attribute overrides onto the default scheme.

    Values may be `Attribute` instances or `(foreground, background)` pairs.
    """

    raw: dict[str, Any] = {f.name: getattr(DEFAULT_COLOR_SCHEME, f.name) for f in fields(ColorScheme)}
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise GraphConfigError(f"Unknown color scheme token: {key}")
            raw[key] = _coerce_attribute(value, key)
    return ColorScheme(**raw)


def _coerce_attribute(value: Any, key: str) -> Attribute:
    if isinstance(value, Attribute):
        return value
    if isinstance(value, Mapping):
        try:
            return Attribute(foreground=str(value["foreground"]), background=str(value["background"]))
        except KeyError as exc:
            raise GraphConfigError(f"Token `{key}` missing field: {exc.args[0]}") from exc
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return Attribute(foreground=str(value[0]), background=str(value[1]))
    raise GraphConfigError(f"Token `{key}` must be an Attribute or a (foreground, background) pair")
