"""Canonical attribute contract shared by the classifier, transform and validator.

The coloring UI binds to these values; changing any of them breaks drawings
that were adapted earlier.
"""

from __future__ import annotations

# Identifier prefixes
COLORABLE_ID_PREFIX = "area-"
DECORATIVE_ID_PREFIX = "decorative-"

# Fill colors that mark line art / background rather than a fillable region.
# Compared case-insensitively.
DECORATIVE_COLORS: frozenset[str] = frozenset(
    c.upper()
    for c in ("#000000", "#222221", "#B5B5B5", "#FFFFFF", "black", "white", "gray", "grey")
)

# Graphical tags considered during adaptation
GRAPHIC_TAGS = ("path", "rect", "circle", "polygon", "ellipse")

FILL_NONE = "none"
POINTER_EVENTS_NONE = "none"
