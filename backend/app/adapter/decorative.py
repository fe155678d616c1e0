"""Decorative-color predicate for already-built trees.

Looks only at attributes present on a concrete element. Used for
after-the-fact inspection (validation, repair), never for the initial
colorable/decorative decision; that is the classifier's job.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from app.adapter.constants import DECORATIVE_COLORS, POINTER_EVENTS_NONE


def is_decorative_color(fill: str | None) -> bool:
    return bool(fill) and fill.upper() in DECORATIVE_COLORS


def is_decorative(element: ET.Element) -> bool:
    """True if the element is non-interactive or painted with a decorative fill."""
    if element.get("pointer-events") == POINTER_EVENTS_NONE:
        return True
    return is_decorative_color(element.get("fill"))
