"""Bounding boxes of SVG shapes computed from their geometry attributes.

No rendering is involved, so transforms and stroke extents are ignored; the box
is in the element's local user space.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from svgpathtools import parse_path

from app.adapter.context import Bounds
from app.utils.geometry import bbox, points_from_flat
from app.utils.math_helpers import parse_number_list, parse_number_or

logger = logging.getLogger(__name__)

# Path geometry that cannot be measured must not look tiny to the classifier
_UNKNOWN_PATH_BOUNDS = Bounds(0.0, 0.0, 100.0, 100.0)


def element_bounds(element: ET.Element, tag: str) -> Bounds:
    """Bounding box for one graphical element, dispatched on its local tag name."""
    if tag == "rect":
        return _rect_bounds(element)
    if tag == "circle":
        return _circle_bounds(element)
    if tag == "ellipse":
        return _ellipse_bounds(element)
    if tag in ("polygon", "polyline"):
        return _polygon_bounds(element)
    if tag == "path":
        return _path_bounds(element)
    return Bounds()


def _attr(element: ET.Element, name: str) -> float:
    return parse_number_or(element.get(name), 0.0)


def _rect_bounds(element: ET.Element) -> Bounds:
    return Bounds(_attr(element, "x"), _attr(element, "y"), _attr(element, "width"), _attr(element, "height"))


def _circle_bounds(element: ET.Element) -> Bounds:
    cx, cy, r = _attr(element, "cx"), _attr(element, "cy"), _attr(element, "r")
    return Bounds(cx - r, cy - r, 2 * r, 2 * r)


def _ellipse_bounds(element: ET.Element) -> Bounds:
    cx, cy = _attr(element, "cx"), _attr(element, "cy")
    rx, ry = _attr(element, "rx"), _attr(element, "ry")
    return Bounds(cx - rx, cy - ry, 2 * rx, 2 * ry)


def _polygon_bounds(element: ET.Element) -> Bounds:
    pts = points_from_flat(parse_number_list(element.get("points")))
    xmin, ymin, xmax, ymax = bbox(pts)
    return Bounds(xmin, ymin, xmax - xmin, ymax - ymin)


def _path_bounds(element: ET.Element) -> Bounds:
    d = element.get("d")
    if not d or not d.strip():
        return Bounds()

    try:
        path = parse_path(d)
        if len(path) == 0:
            return Bounds()
        xmin, xmax, ymin, ymax = path.bbox()
    except Exception as e:
        logger.warning("Failed to measure path %r: %s", element.get("id"), e)
        return _UNKNOWN_PATH_BOUNDS

    return Bounds(float(xmin), float(ymin), float(xmax - xmin), float(ymax - ymin))
