"""SVG parser — facade over xml.etree + svgpathtools.

Converts raw SVG string -> SvgDocument: the caller-owned element tree plus an
ElementInfo snapshot for every graphical element, in document order.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from app.adapter.constants import GRAPHIC_TAGS
from app.adapter.context import ElementInfo, SvgDocument
from app.svg.bounds import element_bounds

logger = logging.getLogger(__name__)


class SvgParseError(ValueError):
    """Raised when markup cannot be turned into an SVG element tree."""


def strip_ns(tag: str) -> str:
    """Remove namespace from tag name."""
    return tag.split("}")[-1] if "}" in tag else tag


def parse_svg(svg_text: str) -> SvgDocument:
    """Parse raw SVG markup into an SvgDocument."""
    if not svg_text or not svg_text.strip():
        raise SvgParseError("Empty SVG document")

    try:
        root = ET.fromstring(svg_text.strip())
    except ET.ParseError as e:
        raise SvgParseError(f"Malformed XML: {e}") from e

    if strip_ns(root.tag).lower() != "svg":
        raise SvgParseError(f"Root element is <{strip_ns(root.tag)}>, expected <svg>")

    doc = SvgDocument(root=root, elements=extract_elements(root), svg_raw=svg_text)
    logger.info("Parsed SVG: %d graphical elements", len(doc.elements))
    return doc


def extract_elements(root: ET.Element) -> list[ElementInfo]:
    """Snapshot every graphical descendant of ``root`` (root excluded), in document order."""
    elements: list[ElementInfo] = []
    for el in root.iter():
        if el is root or not isinstance(el.tag, str):
            continue
        tag = strip_ns(el.tag).lower()
        if tag not in GRAPHIC_TAGS:
            continue
        elements.append(
            ElementInfo(
                element=el,
                tag=tag,
                id=el.get("id"),
                fill=el.get("fill"),
                stroke=el.get("stroke"),
                stroke_width=el.get("stroke-width"),
                pointer_events=el.get("pointer-events"),
                bounds=element_bounds(el, tag),
            )
        )
    return elements
