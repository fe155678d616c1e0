"""Element classifier — ranked heuristics deciding colorable vs. decorative.

Rules are evaluated top-to-bottom and the first match wins. Several rules can
hold for the same element, so the order of HEURISTICS is the behavior:

  1. open-stroke          fill="none" with a stroke      -> colorable
  2. tiny-area            bounding-box area < tiny_area  -> decorative
  3. decorative-color     fill in the decorative palette -> decorative
  4. filled-and-stroked   painted fill plus a stroke     -> decorative
  (default)                                              -> colorable
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Callable

from app.adapter.config import DEFAULT_CONFIG, AdapterConfig
from app.adapter.constants import FILL_NONE
from app.adapter.context import Category, Classification, ElementInfo
from app.adapter.decorative import is_decorative_color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Heuristic:
    name: str
    matches: Callable[[ElementInfo, AdapterConfig], bool]
    category: Category


def _open_stroke(info: ElementInfo, config: AdapterConfig) -> bool:
    return info.fill == FILL_NONE and bool(info.stroke)


def _tiny_area(info: ElementInfo, config: AdapterConfig) -> bool:
    return info.bounds.area < config.tiny_area


def _decorative_color(info: ElementInfo, config: AdapterConfig) -> bool:
    return is_decorative_color(info.fill)


def _filled_and_stroked(info: ElementInfo, config: AdapterConfig) -> bool:
    return bool(info.fill) and info.fill != FILL_NONE and bool(info.stroke)


HEURISTICS: tuple[Heuristic, ...] = (
    Heuristic("open-stroke", _open_stroke, Category.COLORABLE),
    Heuristic("tiny-area", _tiny_area, Category.DECORATIVE),
    Heuristic("decorative-color", _decorative_color, Category.DECORATIVE),
    Heuristic("filled-and-stroked", _filled_and_stroked, Category.DECORATIVE),
)

DEFAULT_CATEGORY = Category.COLORABLE


def classify_element(info: ElementInfo, config: AdapterConfig = DEFAULT_CONFIG) -> Category:
    """Return the category of the first matching heuristic, or the default."""
    for heuristic in HEURISTICS:
        if heuristic.matches(info, config):
            logger.debug("<%s id=%s> %s -> %s", info.tag, info.id, heuristic.name, heuristic.category.value)
            return heuristic.category
    return DEFAULT_CATEGORY


def classify(elements: Iterable[ElementInfo], config: AdapterConfig = DEFAULT_CONFIG) -> Classification:
    """Partition elements, preserving relative document order within each group."""
    result = Classification()
    for info in elements:
        if classify_element(info, config) is Category.COLORABLE:
            result.colorable.append(info)
        else:
            result.decorative.append(info)

    logger.info(
        "Classified %d elements: %d colorable, %d decorative",
        result.total,
        len(result.colorable),
        len(result.decorative),
    )
    return result
