from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class DirtyState:
    """Pending full redraw of a view; `metadata["reason"]` names the last mutation."""

    dirty: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)

    def mark(self, reason: str) -> None:
        self.dirty = True
        self.metadata["reason"] = reason

    def clear(self) -> None:
        self.dirty = False
        self.metadata.clear()
