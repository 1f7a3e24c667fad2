from __future__ import annotations


class GraphConfigError(ValueError):
    """Raised when graph configuration would produce undefined geometry."""
