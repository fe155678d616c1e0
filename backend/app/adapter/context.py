"""In-process data model for one adaptation pass.

ElementInfo is a read-only snapshot taken before transformation; it keeps a
handle to the live element so the transform can mutate it in place.
"""

from __future__ import annotations

import enum
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field


class Category(str, enum.Enum):
    COLORABLE = "colorable"
    DECORATIVE = "decorative"


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box in the element's local coordinate space."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class ElementInfo:
    """Snapshot of one graphical element before transformation."""

    # Live tree node (caller-owned)
    element: ET.Element | None = field(default=None, compare=False, repr=False)
    tag: str = "path"
    id: str | None = None
    fill: str | None = None
    stroke: str | None = None
    stroke_width: str | None = None
    pointer_events: str | None = None
    bounds: Bounds = field(default_factory=Bounds)


@dataclass
class Classification:
    """Colorable/decorative partition, each group in document order."""

    colorable: list[ElementInfo] = field(default_factory=list)
    decorative: list[ElementInfo] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.colorable) + len(self.decorative)


@dataclass
class SvgDocument:
    """A parsed SVG: the root element plus its graphical elements in document order."""

    root: ET.Element
    elements: list[ElementInfo] = field(default_factory=list)
    svg_raw: str = ""
