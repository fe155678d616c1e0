"""Shared test fixtures."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from app.adapter.context import Bounds, ElementInfo


# A scraped drawing with every heuristic represented, in this document order:
#   rect     white background            -> decorative (decorative color)
#   path     outline, thin stroke        -> colorable  (open stroke)
#   circle   painted, no stroke          -> colorable  (default)
#   circle   tiny black dot              -> decorative (tiny area)
#   ellipse  painted and outlined        -> decorative (filled and stroked)
#   polygon  outline, thick stroke       -> colorable  (open stroke)
COLORING_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 200 200">
  <rect x="0" y="0" width="200" height="200" fill="#FFFFFF"/>
  <path d="M10 10 L90 10 L90 90 L10 90 Z" fill="none" stroke="#000" stroke-width="1"/>
  <circle cx="150" cy="50" r="30" fill="#FF6B6B"/>
  <circle cx="150" cy="150" r="3" fill="#000000"/>
  <ellipse cx="50" cy="150" rx="30" ry="20" fill="#4ECDC4" stroke="#222221" stroke-width="3"/>
  <polygon points="100,100 140,100 120,140" fill="none" stroke="#333" stroke-width="4"/>
</svg>'''

# Legacy drawing where a decorative overlay re-uses a colorable id
DUPLICATE_ID_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path id="area-1" d="M0 0 L50 0 L50 50 Z" fill="none" stroke="#000" stroke-width="2"/>
  <path id="area-1" d="M0 0 L50 0 L50 50 Z" fill="#B5B5B5" pointer-events="none"/>
  <path id="area-2" d="M50 50 L100 50 L100 100 Z" fill="none" stroke="#000" stroke-width="2"/>
</svg>'''

# Only line art: nothing carries an area- id
NO_COLORABLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M2 2 L22 22" stroke="#000" pointer-events="none"/>
</svg>'''

NESTED_GROUP_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 300 300">
  <g id="body">
    <rect x="10" y="10" width="100" height="100" fill="none" stroke="#000"/>
    <g id="head">
      <circle cx="200" cy="60" r="40" fill="none" stroke="#000"/>
    </g>
  </g>
  <text x="10" y="290">caption</text>
  <line x1="0" y1="0" x2="300" y2="300" stroke="#000"/>
  <rect x="150" y="150" width="120" height="120" fill="#FFD700"/>
</svg>'''


def make_info(
    fill: str | None = None,
    stroke: str | None = None,
    width: float = 20.0,
    height: float = 20.0,
    tag: str = "path",
    stroke_width: str | None = None,
    element: ET.Element | None = None,
) -> ElementInfo:
    """ElementInfo with a bounding box of ``width`` x ``height`` at the origin."""
    return ElementInfo(
        element=element,
        tag=tag,
        fill=fill,
        stroke=stroke,
        stroke_width=stroke_width,
        bounds=Bounds(0.0, 0.0, width, height),
    )


def svg_root(*children: dict[str, str], tag: str = "path") -> ET.Element:
    """Build an <svg> root with one child per attribute dict."""
    root = ET.Element("svg")
    for attrs in children:
        ET.SubElement(root, tag, attrs)
    return root


@pytest.fixture
def coloring_svg() -> str:
    return COLORING_SVG


@pytest.fixture
def duplicate_id_svg() -> str:
    return DUPLICATE_ID_SVG
