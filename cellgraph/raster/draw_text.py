from __future__ import annotations

from typing import Literal
import unicodedata


TextAlignment = Literal["left", "right", "centered"]


def char_width(ch: str) -> int:
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in {"W", "F"} else 1


def text_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


def truncate_to_width(text: str, width: int) -> str:
    if width <= 0:
        return ""
    out: list[str] = []
    used = 0
    for ch in text:
        w = char_width(ch)
        if used + w > width:
            break
        out.append(ch)
        used += w
    return "".join(out)


def truncate_or_pad(text: str, width: int, alignment: TextAlignment = "left") -> str:
    if not text:
        return text
    current = text_width(text)
    if current >= width:
        return truncate_to_width(text, width)
    pad = width - current
    if alignment == "left":
        return text + " " * pad
    if alignment == "right":
        return " " * pad + text
    return " " * (pad // 2) + text + " " * (pad - pad // 2)
