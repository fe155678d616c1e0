"""Transform engine — rewrites classified elements in place.

Colorable regions get sequential ``area-N`` ids, an empty fill and a visible
stroke; decorative elements become non-interactive and otherwise render
unchanged. Nodes are never inserted, removed or reordered, and a second run
with the same classification leaves the tree as the first run left it.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from app.adapter.config import DEFAULT_CONFIG, AdapterConfig
from app.adapter.constants import COLORABLE_ID_PREFIX, FILL_NONE, POINTER_EVENTS_NONE
from app.adapter.context import Classification
from app.models.results import TransformStats
from app.utils.math_helpers import parse_number

logger = logging.getLogger(__name__)


def transform(
    root: ET.Element,
    classification: Classification,
    config: AdapterConfig = DEFAULT_CONFIG,
) -> TransformStats:
    """Apply the canonical attribute contract to every classified element.

    ``root`` is the caller-owned tree the classification was taken from; it is
    mutated through the element handles and no reference is kept.
    """
    stats = TransformStats()

    for index, info in enumerate(classification.colorable, start=1):
        if info.element is None:
            logger.warning("Colorable <%s> has no element handle, skipping", info.tag)
            continue
        _transform_colorable(info.element, index, stats, config)

    for info in classification.decorative:
        if info.element is None:
            logger.warning("Decorative <%s> has no element handle, skipping", info.tag)
            continue
        _transform_decorative(info.element, stats)

    logger.info(
        "Transformed %d elements: %d ids assigned, %d pointer-events added, %d strokes adjusted, %d fills cleared",
        classification.total,
        stats.ids_assigned,
        stats.pointer_events_added,
        stats.strokes_adjusted,
        stats.fills_cleared,
    )
    return stats


def _transform_colorable(element: ET.Element, index: int, stats: TransformStats, config: AdapterConfig) -> None:
    # Position-derived, so re-running never shifts ids
    element.set("id", f"{COLORABLE_ID_PREFIX}{index}")
    stats.ids_assigned += 1

    if element.get("fill") != FILL_NONE:
        element.set("fill", FILL_NONE)
        stats.fills_cleared += 1

    width = parse_number(element.get("stroke-width"))
    if width is None or width < config.min_stroke_width:
        element.set("stroke-width", _format_width(config.min_stroke_width))
        stats.strokes_adjusted += 1

    # Colorable regions must receive pointer input
    if "pointer-events" in element.attrib:
        del element.attrib["pointer-events"]


def _transform_decorative(element: ET.Element, stats: TransformStats) -> None:
    element.set("pointer-events", POINTER_EVENTS_NONE)
    stats.pointer_events_added += 1


def _format_width(width: float) -> str:
    """2.0 -> "2", 2.5 -> "2.5"."""
    return f"{width:g}"
