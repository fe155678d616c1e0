"""Write an element tree back to SVG markup."""

from __future__ import annotations

import xml.etree.ElementTree as ET

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

# Serialize the SVG namespace as the default one instead of ns0:
ET.register_namespace("", SVG_NS)
ET.register_namespace("xlink", XLINK_NS)

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def serialize_svg(root: ET.Element, indent: str = "  ") -> str:
    """Serialize ``root`` with an XML declaration and indented children.

    Indentation is applied to a copy; the caller's tree keeps its whitespace.
    """
    tree = ET.ElementTree(_copy(root))
    if indent:
        ET.indent(tree, space=indent)
    body = ET.tostring(tree.getroot(), encoding="unicode")
    return f"{_XML_DECLARATION}\n{body}\n"


def _copy(root: ET.Element) -> ET.Element:
    return ET.fromstring(ET.tostring(root, encoding="unicode"))
