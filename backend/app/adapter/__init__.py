"""SVG coloring adapter — classification, transform, validation and repair."""

from app.adapter.classifier import classify, classify_element
from app.adapter.context import Bounds, Category, Classification, ElementInfo, SvgDocument
from app.adapter.repair import fix_duplicate_ids
from app.adapter.transform_engine import transform
from app.adapter.validation import generate_suggestions, validate

__all__ = [
    "classify",
    "classify_element",
    "transform",
    "validate",
    "generate_suggestions",
    "fix_duplicate_ids",
    "Bounds",
    "Category",
    "Classification",
    "ElementInfo",
    "SvgDocument",
]
