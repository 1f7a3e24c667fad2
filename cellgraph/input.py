from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping


ScrollDirection = Literal["left", "right", "up", "down"]

KEY_DIRECTIONS: dict[str, ScrollDirection] = {
    "ArrowLeft": "left",
    "ArrowRight": "right",
    "ArrowUp": "up",
    "ArrowDown": "down",
}
FAST_SCROLL_MODIFIERS = frozenset({"ctrl", "control", "Control", "ControlLeft", "ControlRight"})
_SCROLL_PHASES = frozenset({"down", "repeat", "single"})


@dataclass(frozen=True)
class ScrollKeyEvent:
    """Directional navigation request; `fast` is set when a control modifier is held."""

    direction: ScrollDirection
    fast: bool = False


def parse_scroll_key(key: str, modifiers: Mapping[str, bool] | None = None) -> ScrollKeyEvent | None:
    direction = KEY_DIRECTIONS.get(key)
    if direction is None:
        return None
    fast = bool(modifiers) and any(bool(v) for k, v in modifiers.items() if k in FAST_SCROLL_MODIFIERS)
    return ScrollKeyEvent(direction=direction, fast=fast)


def parse_scroll_key_event(event_type: str, payload: object) -> ScrollKeyEvent | None:
    """Parse a normalized host key event into a scroll request.

    Accepts `key_down` events carrying a `modifiers` mapping and `press` events
    carrying `phase` and `active_keys`; anything else is left to the host.
    """

    if not isinstance(payload, Mapping):
        return None
    key = str(payload.get("key", ""))
    if event_type == "key_down":
        raw_modifiers = payload.get("modifiers") or {}
        if not isinstance(raw_modifiers, Mapping):
            raw_modifiers = {}
        return parse_scroll_key(key, raw_modifiers)
    if event_type == "press":
        if payload.get("phase") not in _SCROLL_PHASES:
            return None
        raw_active_keys = payload.get("active_keys", ())
        if not isinstance(raw_active_keys, (list, tuple)):
            raw_active_keys = ()
        return parse_scroll_key(key, {str(k): True for k in raw_active_keys})
    return None
