"""Adapter configuration — heuristic thresholds."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AdapterConfig:
    """Numeric thresholds used while adapting a drawing."""

    # Bounding-box area (local user units) under which a shape is ornamental
    tiny_area: float = 100.0

    # Colorable regions render with at least this stroke width
    min_stroke_width: float = 2.0


DEFAULT_CONFIG = AdapterConfig()
